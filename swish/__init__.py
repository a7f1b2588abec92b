"""Swish - basketball franchise player modeling and valuation core."""

__version__ = "0.1.0"
