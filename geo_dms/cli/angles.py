"""Angle parsing, formatting and compass CLI commands."""

from enum import Enum

import typer

from geo_dms.cli.main import app
from geo_dms.compass import compass_point, parse_compass_precision
from geo_dms.display_config import DmsDisplayConfig
from geo_dms.dms_formatter import (
    DmsFormat,
    format_bearing,
    format_dms,
    format_latitude,
    format_longitude,
)
from geo_dms.dms_parser import is_undefined, parse_dms, parse_dms_array


class Axis(str, Enum):
    """What the formatted angle represents."""

    PLAIN = "plain"
    LAT = "lat"
    LON = "lon"
    BEARING = "bearing"


def _parse_or_exit(text: str) -> float:
    value = parse_dms(text)
    if is_undefined(value):
        typer.echo(f"Error: Cannot parse angle: {text!r}", err=True)
        raise typer.Exit(1)
    return value


@app.command("parse")
def parse_command(
    texts: list[str] = typer.Argument(..., help="Angle strings, e.g. \"51°28′40″N\""),
) -> None:
    """
    Convert angle strings to signed decimal degrees, one per line.

    Unparseable input prints "nan" and makes the command exit with status 1.

    Example:
        dms parse "45°45′45.36″" "0 19 48 W"
    """
    values = parse_dms_array(texts)

    for value in values:
        typer.echo(f"{value}")

    if any(is_undefined(value) for value in values):
        raise typer.Exit(1)


@app.command("format")
def format_command(
    ctx: typer.Context,
    angle: str = typer.Argument(..., help="Angle in decimal degrees or any DMS notation"),
    fmt: DmsFormat | None = typer.Option(
        None, "--format", "-f", case_sensitive=False,
        help="Output layout (default from config, normally dms)",
    ),
    precision: int | None = typer.Option(
        None, "--precision", "-p", min=0,
        help="Decimals on the smallest unit (default from config)",
    ),
    axis: Axis = typer.Option(
        Axis.PLAIN, "--axis", "-a", case_sensitive=False,
        help="plain (unsigned), lat (N/S), lon (E/W) or bearing (0-360)",
    ),
) -> None:
    """
    Format an angle as degrees, minutes and seconds.

    Example:
        dms format 51.2 --axis lat
        dms format "0.33" --axis lon --format dm --precision 3
    """
    config: DmsDisplayConfig = ctx.obj
    value = _parse_or_exit(angle)

    fmt = fmt or config.default_format
    if precision is None:
        precision = config.resolve_precision(fmt)

    formatters = {
        Axis.LAT: format_latitude,
        Axis.LON: format_longitude,
        Axis.BEARING: format_bearing,
        Axis.PLAIN: format_dms,
    }
    typer.echo(formatters[axis](value, fmt, precision, config.separator))


@app.command("compass")
def compass_command(
    ctx: typer.Context,
    bearing: str = typer.Argument(..., help="Bearing in decimal degrees or any DMS notation"),
    precision: int | None = typer.Option(
        None, "--precision", "-p",
        help="1 = 4 points, 2 = 8 points, 3 = 16 points (default from config)",
    ),
) -> None:
    """
    Name the compass point nearest to a bearing.

    Example:
        dms compass 24
        dms compass 237 --precision 2
    """
    config: DmsDisplayConfig = ctx.obj
    value = _parse_or_exit(bearing)

    try:
        level = config.compass_precision if precision is None else parse_compass_precision(precision)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(compass_point(value, level))
