"""Search for regions adjacent to a geohash region."""

from typing import Callable, Optional

from geocryptor._exceptions import CoordinateError
from geocryptor.bounding_box import BoundingBox

__all__ = ["COMPASS_OFFSETS", "COMPASS_DIRECTIONS", "find_neighbors"]

# (latitude, longitude) steps in the order of returned neighbors.
COMPASS_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (lat_step, lng_step)
    for lat_step in (-1, 0, 1)
    for lng_step in (-1, 0, 1)
    if (lat_step, lng_step) != (0, 0)
)

COMPASS_DIRECTIONS: tuple[str, ...] = ("SW", "S", "SE", "W", "E", "NW", "N", "NE")

PointEncoder = Callable[[float, float, int], BoundingBox]


def find_neighbors(
    box: BoundingBox,
    lat_step: float,
    lng_step: float,
    encoder: PointEncoder,
) -> list[Optional[BoundingBox]]:
    """
    Find 8 regions adjacent to a given region.

    The region is moved by a single cell in every direction and the center of the moved region
    is encoded again with the same precision.

    Args:
        box (BoundingBox): Decoded region.
        lat_step (float): Height of a single cell in degrees.
        lng_step (float): Width of a single cell in degrees.
        encoder (PointEncoder): Function encoding a point with a given precision into a region.

    Returns:
        list[Optional[BoundingBox]]: Neighbors in the order of `COMPASS_OFFSETS`. Directions
            leading outside of the world (across the poles) are marked with `None`.
    """
    neighbors: list[Optional[BoundingBox]] = []
    for lat_offset, lng_offset in COMPASS_OFFSETS:
        moved_box = box.translate(lat_offset * lat_step, lng_offset * lng_step)
        try:
            latitude, longitude = moved_box.center()
            neighbors.append(encoder(latitude, longitude, box.precision))
        except CoordinateError:
            neighbors.append(None)

    return neighbors
