"""Tests for the binary geohash codec."""

import pytest
from parametrization import Parametrization as P

from geocryptor import CoordinateError, PrecisionError, UnknownSymbolError, UnknownSymbolWarning
from geocryptor import geohash
from geocryptor._alphabet import Alphabet
from tests.base.conftest import REVERSED_BASE32


@P.parameters("latitude", "longitude", "precision", "expected_hash")  # type: ignore
@P.case("Philippines", 12.04512315, 118.20385763, 9, "wdhh9b9rv")  # type: ignore
@P.case("Single symbol", -2, -3, 1, "7")  # type: ignore
@P.case("Six symbols", -2, -3, 6, "7ztuee")  # type: ignore
@P.case("Jutland", 57.64911, 10.40744, 11, "u4pruydqqvj")  # type: ignore
@P.case("North-east corner", 90, 180, 5, "zzzzz")  # type: ignore
@P.case("South-west corner", -90, -180, 5, "00000")  # type: ignore
@P.case("Null island", 0, 0, 4, "7zzz")  # type: ignore
def test_encode(latitude: float, longitude: float, precision: int, expected_hash: str) -> None:
    """Test if points are encoded properly."""
    assert geohash.encode(latitude, longitude, precision) == expected_hash


@P.parameters("latitude", "longitude", "precision")  # type: ignore
@P.case("Latitude above range", 90.1, 0, 5)  # type: ignore
@P.case("Latitude below range", -90.1, 0, 5)  # type: ignore
@P.case("Longitude above range", 0, 180.1, 5)  # type: ignore
@P.case("Longitude below range", 0, -180.1, 5)  # type: ignore
@P.case("Precision too high", 0, 0, 13)  # type: ignore
@P.case("Zero precision", 0, 0, 0)  # type: ignore
@P.case("Negative precision", 0, 0, -1)  # type: ignore
def test_encode_invalid_input(latitude: float, longitude: float, precision: int) -> None:
    """Test if invalid input is encoded as an empty hash."""
    assert geohash.encode(latitude, longitude, precision) == ""


def test_encode_as_box_errors() -> None:
    """Test if box encoding raises dedicated errors."""
    with pytest.raises(CoordinateError):
        geohash.encode_as_box(91, 0, 5)

    with pytest.raises(PrecisionError):
        geohash.encode_as_box(0, 0, 13)


def test_encode_as_box() -> None:
    """Test if encoded box keeps the hash, bounds and errors."""
    box = geohash.encode_as_box(-2, -3, 6)

    assert box.hash_value == "7ztuee"
    assert box.precision == 6
    assert box.min_lat <= -2 <= box.max_lat
    assert box.min_lng <= -3 <= box.max_lng
    assert box.error_pair() == (0.002747, 0.005493)
    assert box.center() == (-2.002258, -3.004761)


@P.parameters("value", "precision", "expected_latitude", "expected_longitude")  # type: ignore
@P.case("Six symbols", "7ztuee", 6, -2.002258, -3.004761)  # type: ignore
@P.case("Rounded to less places", "wdhh9b9rv", 8, 12.04511404, 118.20385695)  # type: ignore
@P.case("Single symbol", "7", 1, -22.5, -22.5)  # type: ignore
@P.case("Default precision", "ezs42", 0, 42.605, -5.60303)  # type: ignore
@P.case("Negative precision", "ezs42", -3, 42.605, -5.60303)  # type: ignore
@P.case("Empty hash", "", 0, 0.0, 0.0)  # type: ignore
def test_decode(
    value: str, precision: int, expected_latitude: float, expected_longitude: float
) -> None:
    """Test if hashes are decoded properly."""
    assert geohash.decode(value, precision) == (expected_latitude, expected_longitude)


def test_decode_with_large_precision() -> None:
    """Test if decimal places beyond the float resolution keep the exact center."""
    assert geohash.decode("7ztuee", 400) == pytest.approx((-2.00225830078125, -3.0047607421875))


def test_decode_box() -> None:
    """Test if decoded box has exact bisection bounds."""
    box = geohash.decode_as_box("7", 1)

    assert (box.max_lat, box.min_lat, box.max_lng, box.min_lng) == (0.0, -45.0, 0.0, -45.0)
    assert box.error_pair() == (22.5, 22.5)
    assert box.geohash() == "7"


def test_decode_unknown_symbols_leniently() -> None:
    """Test if unknown symbols are decoded as the first symbol of the alphabet."""
    with pytest.warns(UnknownSymbolWarning):
        result = geohash.decode("aaaaaaa", 7)

    assert result == geohash.decode("0000000", 7)
    assert result == (-89.9993134, -179.9993134)


def test_decode_unknown_symbols_strictly() -> None:
    """Test if strict decoding rejects unknown symbols."""
    with pytest.raises(UnknownSymbolError):
        geohash.decode("7ztuea", 6, strict=True)


@pytest.mark.parametrize(
    "precision,expected_lat_err,expected_lng_err",
    [
        (1, 22.5, 22.5),
        (2, 2.81, 5.63),
        (3, 0.703, 0.703),
        (4, 0.0879, 0.1758),
        (5, 0.02197, 0.02197),
        (6, 0.002747, 0.005493),
        (7, 0.0006866, 0.0006866),
        (8, 8.583e-05, 0.00017166),
        (9, 2.1458e-05, 2.1458e-05),
        (10, 2.6822e-06, 5.3644e-06),
        (11, 6.7055e-07, 6.7055e-07),
        (12, 8.3819e-08, 1.67638e-07),
    ],
)  # type: ignore
def test_error_formula(precision: int, expected_lat_err: float, expected_lng_err: float) -> None:
    """Test if closed form errors are rounded to the precision."""
    assert geohash.lat_err(precision) == expected_lat_err
    assert geohash.lng_err(precision) == expected_lng_err


def test_custom_alphabet() -> None:
    """Test if custom alphabet renders the same bits with other symbols."""
    alphabet = Alphabet(REVERSED_BASE32, size=32)

    value = geohash.encode(-2, -3, 6, alphabet)

    assert value == "".join(REVERSED_BASE32[geohash.DEFAULT_ALPHABET.index(c)] for c in "7ztuee")
    assert geohash.decode(value, 6, alphabet) == (-2.002258, -3.004761)


def test_unknown_symbol_warning_points_at_caller() -> None:
    """Test if warning about unknown symbols is attributed to the calling code."""
    with pytest.warns(UnknownSymbolWarning) as record:
        geohash.decode("7zta", 4)

    assert record[0].filename == __file__
