"""Ripeness bands for fruit that ages one day at a time."""

from enum import Enum

INITIAL_RIPENESS = 1
RIPE_THRESHOLD = 3
OVERRIPE_THRESHOLD = 6

INITIAL_COLOR = "yellow"
RIPE_COLOR = "yellow with brown spots"
OVERRIPE_COLOR = "brown"


class RipenessBand(Enum):
    """Band a ripeness counter falls into."""

    UNRIPE = "unripe"  # 1-2
    RIPE = "ripe"  # 3-5
    OVERRIPE = "overripe"  # 6 and up


_TASTES = {
    RipenessBand.UNRIPE: "starchy",
    RipenessBand.RIPE: "sweet and creamy",
    RipenessBand.OVERRIPE: "very sweet but mushy",
}

_COLORS = {
    RipenessBand.RIPE: RIPE_COLOR,
    RipenessBand.OVERRIPE: OVERRIPE_COLOR,
}


def band_for(ripeness: int) -> RipenessBand:
    """Map a ripeness counter to its band.

    Args:
        ripeness: Ripeness counter (starts at 1, no upper bound)

    Returns:
        The band; anything at or above the overripe threshold is OVERRIPE
    """
    if ripeness < RIPE_THRESHOLD:
        return RipenessBand.UNRIPE
    if ripeness < OVERRIPE_THRESHOLD:
        return RipenessBand.RIPE
    return RipenessBand.OVERRIPE


def taste_for(ripeness: int) -> str:
    return _TASTES[band_for(ripeness)]


def color_for(ripeness: int, current: str) -> str:
    """Color for a ripeness counter; unripe fruit keeps its current color."""
    return _COLORS.get(band_for(ripeness), current)


def is_ripe(ripeness: int) -> bool:
    """Only the RIPE band counts as ripe. Overripe fruit is not ripe."""
    return band_for(ripeness) is RipenessBand.RIPE


def crossed_into(before: int, after: int, band: RipenessBand) -> bool:
    """Check whether moving from ``before`` to ``after`` entered ``band`` from below.

    Args:
        before: Ripeness counter before the step
        after: Ripeness counter after the step
        band: Band to test for

    Returns:
        True only on the step that first reaches the band's lower bound
    """
    threshold = {
        RipenessBand.UNRIPE: INITIAL_RIPENESS,
        RipenessBand.RIPE: RIPE_THRESHOLD,
        RipenessBand.OVERRIPE: OVERRIPE_THRESHOLD,
    }[band]
    return before < threshold <= after
