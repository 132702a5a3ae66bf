"""Decimal rounding and coordinate range helpers shared by both codecs."""

import math

from geocryptor._constants import MAX_DECIMAL_PLACES, MAX_LAT, MAX_LNG, MIN_LAT, MIN_LNG


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, moving ties away from zero."""
    return int(value + math.copysign(0.5, value))


def round_to_precision(value: float, precision: int) -> float:
    """
    Round value to a given number of decimal places.

    Unlike the builtin `round`, ties are always resolved away from zero, so results don't depend
    on the platform rounding mode. Precision above `MAX_DECIMAL_PLACES` is treated as
    `MAX_DECIMAL_PLACES`.

    Args:
        value (float): Value to round.
        precision (int): Number of decimal places to keep.

    Returns:
        float: Rounded value.
    """
    base = math.pow(10, min(precision, MAX_DECIMAL_PLACES))
    return round_half_away_from_zero(value * base) / base


def is_valid_coordinate(latitude: float, longitude: float) -> bool:
    """Check if a point lies within the world bounds."""
    return MIN_LAT <= latitude <= MAX_LAT and MIN_LNG <= longitude <= MAX_LNG
