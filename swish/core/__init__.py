"""Core player modeling: ratings, valuation, contracts and league context."""
