"""CLI module for encoding and decoding geohashes."""

import os
from typing import TYPE_CHECKING, Annotated, NoReturn, Optional, cast

import click
import typer

from geocryptor.cryptor import CryptorAlgorithm

if TYPE_CHECKING:  # pragma: no cover
    from rich.console import Console

    from geocryptor.cryptor import GeoCryptor

app = typer.Typer(context_settings={"help_option_names": ["-h", "--help"]}, rich_markup_mode="rich")


def _version_callback(value: bool) -> None:
    if value:
        from geocryptor import __app_name__, __version__

        typer.echo(f"{__app_name__} {__version__}")
        raise typer.Exit()


def _get_console(stderr: bool = False) -> "Console":
    from rich.console import Console

    force_terminal = os.getenv("FORCE_TERMINAL_MODE", "false").lower() == "true"
    return Console(stderr=stderr, force_terminal=True if force_terminal else None)


def _exit_with_error(ex: Exception) -> NoReturn:
    err_console = _get_console(stderr=True)
    err_console.print(str(ex), markup=False, soft_wrap=True)
    raise typer.Exit(code=1)


def _get_cryptor(algorithm: CryptorAlgorithm, alphabet: Optional[str]) -> "GeoCryptor":
    from geocryptor._exceptions import InvalidAlphabetError
    from geocryptor.cryptor import get_cryptor

    try:
        return get_cryptor(algorithm, alphabet)
    except InvalidAlphabetError as ex:
        raise typer.BadParameter(str(ex), param_hint="'--alphabet'") from None


class CoordinatesParser(click.ParamType):  # type: ignore
    """Parser for a point in the LAT,LNG form."""

    name = "LAT,LNG"

    def convert(self, value, param=None, ctx=None):  # type: ignore
        """Convert parameter value."""
        try:
            latitude, longitude = (float(x.strip()) for x in value.split(","))
        except ValueError:  # ValueError raised when passing non-numbers or wrong count
            raise typer.BadParameter(
                "Cannot parse provided coordinates."
                " Valid value must contain 2 floating point numbers"
                " separated by a comma."
            ) from None
        return latitude, longitude


AlgorithmOption = Annotated[
    CryptorAlgorithm,
    typer.Option(
        "--algorithm",
        "-a",
        help=(
            "Geohash algorithm. [bold green]geohash[/bold green] uses 32 symbols,"
            " [bold green]geohash36[/bold green] uses 36 symbols."
        ),
        case_sensitive=False,
    ),
]

AlphabetOption = Annotated[
    Optional[str],
    typer.Option(
        help=(
            "Custom symbols used to render hashes. Must contain 32 unique symbols for"
            " [bold green]geohash[/bold green] and 36 for [bold green]geohash36[/bold green]."
        ),
        show_default=False,
    ),
]

WithErrorOption = Annotated[
    bool,
    typer.Option(
        "--with-error/",
        "--error/",
        help="Whether to print latitude and longitude error in degrees after the result.",
        show_default=False,
    ),
]

StrictOption = Annotated[
    bool,
    typer.Option(
        "--strict/",
        help=(
            "Whether to fail on symbols missing from the alphabet."
            " By default they are decoded as the first symbol of the alphabet."
        ),
        show_default=False,
    ),
]

DecodePrecisionOption = Annotated[
    int,
    typer.Option(
        "--precision",
        "-p",
        help="Number of decimal places of the result. [bold]0[/bold] means the hash length.",
        min=0,
    ),
]


@app.callback()  # type: ignore
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Show the application's version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    GeoCryptor CLI.

    Encodes points into [bold green]geohash[/bold green] and
    [bold green]geohash36[/bold green] strings, decodes them back and finds their neighbors.
    """


@app.command()  # type: ignore
def encode(
    coordinates: Annotated[
        str,
        typer.Argument(
            help="Point to encode in the [bold dark_orange]LAT,LNG[/bold dark_orange] form.",
            click_type=CoordinatesParser(),
            metavar="LAT,LNG",
            show_default=False,
        ),
    ],
    precision: Annotated[
        int,
        typer.Option("--precision", "-p", help="Number of symbols in the hash.", min=1),
    ] = 9,
    algorithm: AlgorithmOption = CryptorAlgorithm.geohash,
    alphabet: AlphabetOption = None,
    with_error: WithErrorOption = False,
) -> None:
    """Encode a point into a hash."""
    from geocryptor._exceptions import CoordinateError, PrecisionError

    latitude, longitude = cast("tuple[float, float]", coordinates)
    cryptor = _get_cryptor(algorithm, alphabet)
    try:
        box = cryptor.encode_as_box(latitude, longitude, precision)
    except (CoordinateError, PrecisionError) as ex:
        _exit_with_error(ex)

    result = box.hash_value
    if with_error:
        lat_err, lng_err = box.error_pair()
        result = f"{result} {lat_err} {lng_err}"

    typer.secho(result, fg="green")


@app.command()  # type: ignore
def decode(
    geohash: Annotated[
        str, typer.Argument(help="Hash to decode.", metavar="GEOHASH", show_default=False)
    ],
    precision: DecodePrecisionOption = 0,
    algorithm: AlgorithmOption = CryptorAlgorithm.geohash,
    alphabet: AlphabetOption = None,
    with_error: WithErrorOption = False,
    strict: StrictOption = False,
) -> None:
    """Decode a hash into the center of its region."""
    from geocryptor._exceptions import UnknownSymbolError

    cryptor = _get_cryptor(algorithm, alphabet)
    try:
        latitude, longitude, lat_err, lng_err = cryptor.decode_with_error(
            geohash, precision, strict=strict
        )
    except UnknownSymbolError as ex:
        _exit_with_error(ex)

    result = f"{latitude},{longitude}"
    if with_error:
        result = f"{result} {lat_err} {lng_err}"

    typer.secho(result, fg="green")


@app.command()  # type: ignore
def neighbors(
    geohash: Annotated[
        str, typer.Argument(help="Hash to search around.", metavar="GEOHASH", show_default=False)
    ],
    precision: DecodePrecisionOption = 0,
    algorithm: AlgorithmOption = CryptorAlgorithm.geohash,
    alphabet: AlphabetOption = None,
    strict: StrictOption = False,
) -> None:
    """Display 8 hashes adjacent to a given hash."""
    from rich.table import Table

    from geocryptor._exceptions import PrecisionError, UnknownSymbolError
    from geocryptor._neighbors import COMPASS_DIRECTIONS

    cryptor = _get_cryptor(algorithm, alphabet)
    try:
        neighbor_boxes = cryptor.neighbors(geohash, precision, strict=strict)
    except (PrecisionError, UnknownSymbolError) as ex:
        _exit_with_error(ex)

    table = Table(title=f"Neighbors of {geohash}")
    table.add_column("Direction")
    table.add_column("Geohash", style="green")
    table.add_column("Latitude", justify="right")
    table.add_column("Longitude", justify="right")
    for direction, box in zip(COMPASS_DIRECTIONS, neighbor_boxes):
        if box is None:
            table.add_row(direction, "-", "-", "-")
        else:
            latitude, longitude = box.center()
            table.add_row(direction, box.hash_value, str(latitude), str(longitude))

    _get_console().print(table)


@app.command()  # type: ignore
def bounds(
    geohash: Annotated[
        str, typer.Argument(help="Hash to decode.", metavar="GEOHASH", show_default=False)
    ],
    algorithm: AlgorithmOption = CryptorAlgorithm.geohash,
    alphabet: AlphabetOption = None,
    wkt: Annotated[
        bool,
        typer.Option(
            "--wkt/",
            help=(
                "Whether to print the region as a [bold dark_orange]WKT[/bold dark_orange]"
                " polygon instead of 4 numbers (min longitude, min latitude, max longitude,"
                " max latitude)."
            ),
            show_default=False,
        ),
    ] = False,
    strict: StrictOption = False,
) -> None:
    """Display the bounding box of a hash."""
    from geocryptor._exceptions import UnknownSymbolError

    cryptor = _get_cryptor(algorithm, alphabet)
    try:
        box = cryptor.decode_as_box(geohash, strict=strict)
    except UnknownSymbolError as ex:
        _exit_with_error(ex)

    if wkt:
        result = box.to_geometry().wkt
    else:
        max_lat, min_lat, max_lng, min_lng = box.bounds()
        result = f"{min_lng},{min_lat},{max_lng},{max_lat}"

    typer.secho(result, fg="green")
