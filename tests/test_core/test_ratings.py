"""Tests for ratings: bounded arithmetic, overall, skills, position and fuzz."""

import random

import pytest

from swish.core.enums import Position, Skill
from swish.core.ratings import (
    COMPOSITE_WEIGHTS,
    RATING_KEYS,
    RatingsRow,
    bound,
    composite_fraction,
    derive,
    fuzz_rating,
    gen_fuzz,
    height_to_rating,
    limit_rating,
    next_fuzz,
    ovr,
    pos,
    round_half_up,
    skills,
)


# =============================================================================
# Bounded Arithmetic Tests
# =============================================================================

class TestBoundedArithmetic:
    """Test clamping and rounding helpers."""

    def test_round_half_up(self):
        """Halves always round up, including negatives."""
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(-2.5) == -2
        assert round_half_up(2.49) == 2

    def test_bound(self):
        """Values outside the range are clamped to the nearest edge."""
        assert bound(-1, 0, 10) == 0
        assert bound(11, 0, 10) == 10
        assert bound(5.5, 0, 10) == 5.5

    @pytest.mark.parametrize("value", [-50, -0.5, 0, 33.7, 99.99, 100, 100.1, 250])
    def test_limit_rating_idempotent(self, value):
        """Limiting twice is the same as limiting once."""
        once = limit_rating(value)
        assert limit_rating(once) == once
        assert 0 <= once <= 100

    def test_limit_rating_floors(self):
        """In-range values are floored to an integer."""
        assert limit_rating(67.9) == 67

    def test_fuzz_rating_applies_fuzz(self, settings):
        """Fuzz is added and the result rounded."""
        assert fuzz_rating(60, 2.5, settings) == 63
        assert fuzz_rating(99, 5, settings) == 100
        assert fuzz_rating(1, -5, settings) == 0

    def test_fuzz_rating_ignored_in_god_mode(self, settings):
        """God mode sees true ratings."""
        god = settings.evolve(god_mode=True)
        assert fuzz_rating(60, 5, god) == 60

    def test_fuzz_rating_ignored_with_several_user_teams(self, settings):
        """Multi-team mode sees true ratings."""
        multi = settings.evolve(user_tids=(0, 1))
        assert fuzz_rating(60, -4, multi) == 60

    def test_height_to_rating_range(self):
        """5'6" is 0, 7'9" is 100, anything beyond is clamped."""
        assert height_to_rating(66) == 0
        assert height_to_rating(93) == 100
        assert height_to_rating(60) == 0
        assert height_to_rating(100) == 100
        assert height_to_rating(79.5) == 50


# =============================================================================
# Overall Tests
# =============================================================================

class TestOverall:
    """Test the overall rating formula."""

    def test_all_fifty(self, ratings_factory):
        """Uniform ratings give that rating as overall."""
        assert ovr(ratings_factory()) == 50

    def test_extremes(self, ratings_factory):
        """All zeros and all hundreds stay at the ends of the scale."""
        assert ovr(ratings_factory(**{k: 0 for k in RATING_KEYS})) == 0
        assert ovr(ratings_factory(**{k: 100 for k in RATING_KEYS})) == 100

    def test_in_range_for_random_ratings(self):
        """Overall is always in [0, 100] and deterministic."""
        rng = random.Random(99)
        for _ in range(200):
            row = RatingsRow(**{k: rng.randint(0, 100) for k in RATING_KEYS})
            value = ovr(row)
            assert 0 <= value <= 100
            assert ovr(row) == value

    def test_weights_matter(self, ratings_factory):
        """Height counts more than free throws."""
        tall = ratings_factory(hgt=80)
        shooter = ratings_factory(ft=80)
        assert ovr(tall) > ovr(shooter)


# =============================================================================
# Skill Tests
# =============================================================================

class TestSkills:
    """Test skill tag assignment."""

    def test_average_player_has_no_skills(self, ratings_factory, settings):
        """All 50s is not good at anything."""
        assert skills(ratings_factory(), settings) == []

    def test_three_point_shooter(self, ratings_factory, settings):
        """Great shooting earns the 3 tag."""
        row = ratings_factory(tp=80, oiq=60)
        assert Skill.THREE_POINT in skills(row, settings)

    def test_height_is_rescaled(self, ratings_factory, settings):
        """Height counts as (hgt - 25) * 2 in composites."""
        row = ratings_factory(hgt=75, stre=0, jmp=0, reb=0, oiq=0, diq=0)
        composite = COMPOSITE_WEIGHTS["rebounding"]
        expected = (100 * 2) / (100 * (2 + 0.1 + 0.1 + 2 + 0.5 + 0.5))
        assert composite_fraction(row, composite, settings) == pytest.approx(expected)

    def test_monotonic_in_contributing_rating(self, ratings_factory, settings):
        """Raising a contributing rating never removes a held tag."""
        row = ratings_factory(tp=75, oiq=50)
        assert Skill.THREE_POINT in skills(row, settings)
        for tp in range(76, 101):
            row.tp = tp
            assert Skill.THREE_POINT in skills(row, settings)

    def test_tags_in_display_order(self, ratings_factory, settings):
        """Tags come out in a fixed order."""
        row = ratings_factory(hgt=90, stre=90, spd=90, jmp=90, reb=90, diq=90, oiq=90, ins=90)
        tags = skills(row, settings)
        order = list(Skill)
        assert tags == sorted(tags, key=order.index)


# =============================================================================
# Position Tests
# =============================================================================

class TestPosition:
    """Test the position cascade."""

    def test_tall_with_no_eligibility_is_center(self, ratings_factory):
        """Height 65 with no guard/forward skills is a C."""
        row = ratings_factory(hgt=65, spd=50, drb=40, pss=40, dnk=50, tp=50, stre=50)
        assert pos(row) == Position.C

    def test_pg_and_sg_is_combo_guard(self, ratings_factory):
        """A player eligible at PG and SG only is a G."""
        row = ratings_factory(hgt=40, spd=70, drb=60, pss=60, tp=70, stre=40)
        assert pos(row) == Position.G

    def test_single_eligibility_overrides_height(self, ratings_factory):
        """One eligible position wins over the height slot."""
        # Height says SF, but only PG qualifies
        row = ratings_factory(hgt=46, spd=65, drb=50, pss=50, dnk=40, tp=40, stre=40)
        assert pos(row) == Position.PG

    def test_guard_and_center_is_forward(self, ratings_factory):
        """Guard skills plus center size resolves to F."""
        row = ratings_factory(hgt=70, spd=70, drb=60, pss=60, dnk=40, tp=40, stre=40)
        assert pos(row) == Position.F

    def test_center_and_forward_is_fc(self, ratings_factory):
        """Big and strong enough for PF and C is FC."""
        row = ratings_factory(hgt=60, stre=80, spd=30, drb=30, pss=30, dnk=40, tp=40)
        assert pos(row) == Position.FC

    def test_short_slow_player_is_sg_slot(self, ratings_factory):
        """Below 6'6" without handling or speed defaults to SG."""
        row = ratings_factory(hgt=40, spd=40, drb=40, pss=40, dnk=40, tp=40)
        assert pos(row) == Position.SG


# =============================================================================
# Derive Tests
# =============================================================================

class TestDerive:
    """Test filling in derived fields."""

    def test_derive_fills_fields(self, ratings_factory, settings):
        """ovr, skills and pos are all set."""
        row = ratings_factory(pot=0)
        derive(row, settings)
        assert row.ovr == 50
        assert row.skills == []
        assert row.pos in {p.value for p in Position}

    def test_derive_clamps_potential(self, ratings_factory, settings):
        """Potential is never below overall."""
        row = ratings_factory(pot=30)
        derive(row, settings)
        assert row.pot == row.ovr


# =============================================================================
# Fuzz Tests
# =============================================================================

class TestFuzz:
    """Test scouting fuzz generation."""

    def test_best_scouting_is_tight(self, settings):
        """Rank 1 fuzz never exceeds 2."""
        rng = random.Random(5)
        for _ in range(500):
            assert abs(gen_fuzz(1, settings, rng)) <= 2

    def test_worst_scouting_is_loose(self, settings):
        """Rank 30 fuzz never exceeds 10."""
        rng = random.Random(6)
        draws = [gen_fuzz(30, settings, rng) for _ in range(500)]
        assert all(abs(f) <= 10 for f in draws)
        assert max(abs(f) for f in draws) > 2

    def test_cutoff_is_applied(self, settings, scripted_random):
        """Extreme gaussian draws are clamped to the cutoff."""
        rng = scripted_random(gausses=[50.0, -50.0])
        assert gen_fuzz(1, settings, rng) == 2
        assert gen_fuzz(30, settings, rng) == -10

    def test_next_fuzz_averages(self, settings, scripted_random):
        """New fuzz is the mean of the old value and a fresh draw."""
        rng = scripted_random(gausses=[1.0])
        assert next_fuzz(3.0, 30, settings, rng) == pytest.approx(2.0)
