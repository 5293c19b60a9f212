"""Tests for the seeded die-roll source.

Tests cover:
- Determinism (same seed -> same rolls)
- Variety (different seeds -> different rolls)
- Range and shape of batches
- Validation
"""

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from landbattle.interfaces.dice import IDieRollSource
from landbattle.utils.rng import SeededDieRolls, _seed_to_int


class TestSeedToInt:
    """Tests for seed hashing."""

    def test_stable(self):
        assert _seed_to_int("battle") == _seed_to_int("battle")

    def test_fits_in_64_bits(self):
        assert 0 <= _seed_to_int("battle") < 2**64

    def test_different_seeds_differ(self):
        assert _seed_to_int("battle-1") != _seed_to_int("battle-2")


class TestSeededDieRolls:
    """Tests for SeededDieRolls."""

    def test_determinism_same_seed_same_result(self):
        first = SeededDieRolls("seed").roll(100)
        second = SeededDieRolls("seed").roll(100)
        assert np.array_equal(first, second)

    def test_different_seeds_different_results(self):
        first = SeededDieRolls("seed-a").roll(100)
        second = SeededDieRolls("seed-b").roll(100)
        assert not np.array_equal(first, second)

    def test_successive_batches_continue_the_stream(self):
        dice = SeededDieRolls("stream")
        assert not np.array_equal(dice.roll(50), dice.roll(50))

    def test_values_cover_every_face(self):
        rolls = SeededDieRolls("faces").roll(6000)
        assert set(rolls.tolist()) == {1, 2, 3, 4, 5, 6}
        assert rolls.dtype == np.int64

    def test_unseeded_source_rolls_in_range(self):
        rolls = SeededDieRolls().roll(200)
        assert rolls.min() >= 1
        assert rolls.max() <= 6

    def test_custom_sides(self):
        rolls = SeededDieRolls("d20", sides=20).roll(1000)
        assert rolls.max() <= 20
        assert rolls.max() > 6

    def test_zero_count(self):
        assert SeededDieRolls("empty").roll(0).size == 0

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            SeededDieRolls("neg").roll(-1)

    def test_invalid_sides_rejected(self):
        with pytest.raises(ValueError, match="positive"):
            SeededDieRolls("bad", sides=0)

    def test_satisfies_protocol(self):
        source: IDieRollSource = SeededDieRolls("protocol")
        assert len(source.roll(4)) == 4


@given(st.text(max_size=30), st.integers(min_value=0, max_value=500))
def test_property_rolls_always_in_range(seed, count):
    rolls = SeededDieRolls(seed).roll(count)
    assert rolls.shape == (count,)
    assert ((rolls >= 1) & (rolls <= 6)).all()
