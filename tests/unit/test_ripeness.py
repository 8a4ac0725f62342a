"""Tests for ripeness bands."""

import pytest

from orchard.ripeness import (
    OVERRIPE_COLOR,
    RIPE_COLOR,
    RipenessBand,
    band_for,
    color_for,
    crossed_into,
    is_ripe,
    taste_for,
)


class TestRipenessBands:
    """Test the mapping from ripeness counter to band, taste and color."""

    @pytest.mark.parametrize("ripeness", [1, 2])
    def test_unripe_band(self, ripeness):
        """Counters 1-2 are unripe and starchy, keeping their color."""
        assert band_for(ripeness) is RipenessBand.UNRIPE
        assert not is_ripe(ripeness)
        assert taste_for(ripeness) == "starchy"
        assert color_for(ripeness, "yellow") == "yellow"
        assert color_for(ripeness, "green") == "green"

    @pytest.mark.parametrize("ripeness", [3, 4, 5])
    def test_ripe_band(self, ripeness):
        """Counters 3-5 are ripe, sweet and spotted."""
        assert band_for(ripeness) is RipenessBand.RIPE
        assert is_ripe(ripeness)
        assert taste_for(ripeness) == "sweet and creamy"
        assert color_for(ripeness, "yellow") == RIPE_COLOR

    @pytest.mark.parametrize("ripeness", [6, 7, 100])
    def test_overripe_band_saturates(self, ripeness):
        """Anything from 6 up is overripe and no longer counts as ripe."""
        assert band_for(ripeness) is RipenessBand.OVERRIPE
        assert not is_ripe(ripeness)
        assert taste_for(ripeness) == "very sweet but mushy"
        assert color_for(ripeness, "yellow") == OVERRIPE_COLOR


class TestBandCrossing:
    """Test detection of a step entering a band."""

    def test_crossing_into_ripe(self):
        assert crossed_into(2, 3, RipenessBand.RIPE)
        assert not crossed_into(3, 4, RipenessBand.RIPE)
        assert not crossed_into(1, 2, RipenessBand.RIPE)

    def test_crossing_into_overripe(self):
        assert crossed_into(5, 6, RipenessBand.OVERRIPE)
        assert not crossed_into(6, 7, RipenessBand.OVERRIPE)

    def test_jump_over_threshold_counts(self):
        """A jump from below the threshold past it still counts as a crossing."""
        assert crossed_into(1, 3, RipenessBand.RIPE)
