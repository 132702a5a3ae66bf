"""Tests for the bounding box validation and accessors."""

import pytest
from parametrization import Parametrization as P
from shapely.geometry import box as shapely_box

from geocryptor import BoundingBox, CoordinateError


def _box(max_lat: float, min_lat: float, max_lng: float, min_lng: float) -> BoundingBox:
    return BoundingBox(
        max_lat=max_lat,
        min_lat=min_lat,
        max_lng=max_lng,
        min_lng=min_lng,
        lat_err=(max_lat - min_lat) / 2,
        lng_err=(max_lng - min_lng) / 2,
        hash_value="test",
        precision=4,
    )


def test_center_is_rounded() -> None:
    """Test if center is rounded to the box precision."""
    assert _box(1.0, 0.0, 1.0, 0.00003).center() == (0.5, 0.5)


@P.parameters("box", "expected_bounds")  # type: ignore
@P.case("Inside", _box(10, 0, 20, 10), (10, 0, 20, 10))  # type: ignore
@P.case("World", _box(90, -90, 180, -180), (90, -90, 180, -180))  # type: ignore
@P.case("East overflow", _box(10, 0, 191.25, 180), (10, 0, -168.75, -180))  # type: ignore
@P.case("West overflow", _box(10, 0, -180, -191.25), (10, 0, 180, 168.75))  # type: ignore
def test_valid_bounds(
    box: BoundingBox, expected_bounds: tuple[float, float, float, float]
) -> None:
    """Test if bounds are validated and longitude is wrapped."""
    assert box.bounds() == pytest.approx(expected_bounds)


@P.parameters("box")  # type: ignore
@P.case("North pole crossed", _box(95, 85, 10, 0))  # type: ignore
@P.case("South pole crossed", _box(-85, -95, 10, 0))  # type: ignore
@P.case("Latitude flipped", _box(0, 10, 10, 0))  # type: ignore
@P.case("Longitude flipped", _box(10, 0, 170, 190))  # type: ignore
@P.case("Inconsistent orientation", _box(10, 0, 185, 190))  # type: ignore
@P.case("Longitude too wide", _box(10, 0, 190, -190))  # type: ignore
def test_invalid_bounds(box: BoundingBox) -> None:
    """Test if invalid regions fail validation in all accessors."""
    with pytest.raises(CoordinateError):
        box.validate()

    with pytest.raises(CoordinateError):
        box.center()

    with pytest.raises(CoordinateError):
        box.geohash()

    with pytest.raises(CoordinateError):
        box.to_geometry()


def test_wrapping_doesnt_mutate_box() -> None:
    """Test if repaired bounds are used only for the current call."""
    box = _box(10, 0, 191.25, 180)

    assert box.center() == (5.0, -174.375)
    assert (box.max_lng, box.min_lng) == (191.25, 180)


def test_translate() -> None:
    """Test if translated box is a moved copy."""
    box = _box(10, 0, 20, 10)

    moved_box = box.translate(-10, 5)

    assert (moved_box.max_lat, moved_box.min_lat) == (0, -10)
    assert (moved_box.max_lng, moved_box.min_lng) == (25, 15)
    assert moved_box.hash_value == box.hash_value
    assert (box.max_lat, box.min_lat, box.max_lng, box.min_lng) == (10, 0, 20, 10)


def test_translate_accepts_float_noise() -> None:
    """Test if tiny overflow caused by float arithmetic isn't treated as pole crossing."""
    box = _box(90 + 1e-12, 80, 10, 0)

    assert box.center() == (85.0, 5.0)


def test_geohash_and_error_pair() -> None:
    """Test if simple accessors return stored values."""
    box = _box(10, 0, 20, 10)

    assert box.geohash() == "test"
    assert box.error_pair() == (5.0, 5.0)


def test_to_geometry() -> None:
    """Test if geometry uses wrapped bounds in the x/y order."""
    geometry = _box(10, 0, 191.25, 180).to_geometry()

    assert geometry.equals(shapely_box(minx=-180, miny=0, maxx=-168.75, maxy=10))
