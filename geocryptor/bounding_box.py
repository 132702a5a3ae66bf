"""Rectangular region denoted by a geohash."""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from geocryptor._constants import FLOAT_TOLERANCE, MAX_LAT, MAX_LNG, MIN_LAT, MIN_LNG
from geocryptor._exceptions import CoordinateError
from geocryptor._rounding import round_to_precision

if TYPE_CHECKING:  # pragma: no cover
    from shapely.geometry import Polygon

__all__ = ["BoundingBox"]

FULL_TURN = MAX_LNG - MIN_LNG


@dataclass(frozen=True)
class BoundingBox:
    """
    Geohash region with its error estimate.

    Bounds are kept as constructed. Regions shifted by the neighbor search can stick out of
    the world bounds, so every accessor validates the box first and works on the repaired
    (longitude wrapped) bounds without modifying the stored ones.
    """

    max_lat: float
    min_lat: float
    max_lng: float
    min_lng: float
    lat_err: float
    lng_err: float
    hash_value: str
    precision: int

    def bounds(self) -> tuple[float, float, float, float]:
        """
        Validate the box and return its repaired bounds.

        Latitude cannot be repaired, since poles don't wrap. Longitude sticking out of
        the [-180, 180] range is wrapped by a full turn, as long as the box is oriented
        properly.

        Returns:
            tuple[float, float, float, float]: Max latitude, min latitude, max longitude and
                min longitude.

        Raises:
            CoordinateError: If latitude exceeds world bounds or longitude cannot be wrapped.
        """
        if (
            self.max_lat > MAX_LAT + FLOAT_TOLERANCE
            or self.min_lat < MIN_LAT - FLOAT_TOLERANCE
            or self.min_lat > self.max_lat
        ):
            raise CoordinateError(
                f"Latitude bounds ({self.min_lat}, {self.max_lat}) exceed"
                f" the range [{MIN_LAT}, {MAX_LAT}]."
            )

        max_lng, min_lng = self.max_lng, self.min_lng
        if max_lng > MAX_LNG + FLOAT_TOLERANCE or min_lng < MIN_LNG - FLOAT_TOLERANCE:
            if max_lng <= min_lng:
                raise CoordinateError(
                    f"Cannot wrap longitude bounds ({min_lng}, {max_lng}) with inconsistent"
                    " orientation."
                )
            shift = -FULL_TURN if max_lng > MAX_LNG + FLOAT_TOLERANCE else FULL_TURN
            max_lng += shift
            min_lng += shift

        if (
            max_lng > MAX_LNG + FLOAT_TOLERANCE
            or min_lng < MIN_LNG - FLOAT_TOLERANCE
            or min_lng > max_lng
        ):
            raise CoordinateError(
                f"Longitude bounds ({self.min_lng}, {self.max_lng}) cannot be wrapped"
                f" into the range [{MIN_LNG}, {MAX_LNG}]."
            )

        return self.max_lat, self.min_lat, max_lng, min_lng

    def validate(self) -> None:
        """Check if the box denotes a valid region."""
        self.bounds()

    def center(self) -> tuple[float, float]:
        """Get validated center point rounded to the box precision."""
        max_lat, min_lat, max_lng, min_lng = self.bounds()
        return (
            round_to_precision((max_lat + min_lat) / 2, self.precision),
            round_to_precision((max_lng + min_lng) / 2, self.precision),
        )

    def error_pair(self) -> tuple[float, float]:
        """Get latitude and longitude error in degrees."""
        return self.lat_err, self.lng_err

    def geohash(self) -> str:
        """Get validated hash value of the box."""
        self.validate()
        return self.hash_value

    def translate(self, lat_offset: float, lng_offset: float) -> "BoundingBox":
        """Return a copy of the box moved by given offsets. Result isn't validated."""
        return replace(
            self,
            max_lat=self.max_lat + lat_offset,
            min_lat=self.min_lat + lat_offset,
            max_lng=self.max_lng + lng_offset,
            min_lng=self.min_lng + lng_offset,
        )

    def to_geometry(self) -> "Polygon":
        """Get validated box as a shapely polygon in the EPSG:4326 axis order."""
        from shapely.geometry import box

        max_lat, min_lat, max_lng, min_lng = self.bounds()
        return box(minx=min_lng, miny=min_lat, maxx=max_lng, maxy=max_lat)
