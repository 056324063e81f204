"""CLI interface for turnmap."""

import logging
import tomllib
from typing import Optional

import click
from pydantic import ValidationError

from turnmap import config
from turnmap.config import Settings, load_settings
from turnmap.directions import parse_direction
from turnmap.errors import CoordinateError, ObscuredLocation
from turnmap.grid import (
    format_grid_coord,
    grid_string,
    parse_grid_coord,
    tile_column_row,
    tile_id,
    to_map_coord,
    with_origin,
)
from turnmap.hex_coords import distance
from turnmap.movement import walk as walk_moves
from turnmap.schemas import GridCoord, MapCoord

logger = logging.getLogger(__name__)


def _locate(location: str, origin: Optional[str]) -> GridCoord:
    g = parse_grid_coord(location)
    if origin:
        g = with_origin(g, origin)
    return g


def _place(location: str, origin: Optional[str]) -> GridCoord:
    g = _locate(location, origin)
    if g.obscured:
        raise ObscuredLocation(location, "pass --origin")
    return g


@click.group()
@click.option("--config", "config_path", default=None,
              type=click.Path(exists=True, dir_okay=False), help="TOML settings file")
@click.option("--log-level", default=None,
              type=click.Choice(config.LOG_LEVELS, case_sensitive=False), help="Logging level")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], log_level: Optional[str]):
    """Turn report hex map tools"""
    try:
        settings = load_settings(config_path)
        if log_level:
            settings = Settings(origin_tile=settings.origin_tile, log_level=log_level)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise click.ClickException(f"invalid settings: {e}")

    logging.basicConfig(level=settings.log_level, format=config.LOG_FORMAT)
    logger.debug(f"settings: {settings.model_dump()}")
    ctx.obj = settings


@cli.command()
@click.argument("location")
@click.option("--origin", default=None, help="Tile id to use for '##' locations")
@click.pass_obj
def convert(settings: Settings, location: str, origin: Optional[str]):
    """Show the map coordinates of a grid location."""
    try:
        g = _locate(location, origin or settings.origin_tile)
    except CoordinateError as e:
        raise click.ClickException(str(e))

    m = to_map_coord(g)
    click.echo(f"Grid:  {format_grid_coord(g)}")
    click.echo(f"Map:   {m}")
    click.echo(f"Tile:  {tile_id(g)}")


@cli.command()
@click.argument("column", type=int)
@click.argument("row", type=int)
def locate(column: int, row: int):
    """Show the grid location of a map column and row."""
    m = MapCoord(column=column, row=row)
    try:
        location = grid_string(m)
    except CoordinateError as e:
        raise click.ClickException(str(e))

    sheet_column, sheet_row = tile_column_row(m)
    click.echo(f"Grid:  {location}")
    click.echo(f"Sheet: column {sheet_column}, row {sheet_row}")


@cli.command()
@click.argument("location")
@click.argument("moves", nargs=-1)
@click.option("--origin", default=None, help="Tile id to use for '##' locations")
@click.pass_obj
def walk(settings: Settings, location: str, moves: tuple[str, ...], origin: Optional[str]):
    """Follow direction codes (N NE SE S SW NW) from a grid location."""
    try:
        g = _place(location, origin or settings.origin_tile)
        path = walk_moves(to_map_coord(g), [parse_direction(code) for code in moves])
        steps = [grid_string(p) for p in path]
    except CoordinateError as e:
        raise click.ClickException(str(e))

    click.echo(f"start  {format_grid_coord(g)}")
    for code, location_after in zip(moves, steps):
        click.echo(f"{code:<6} {location_after}")


@cli.command("distance")
@click.argument("start")
@click.argument("end")
@click.option("--origin", default=None, help="Tile id to use for '##' locations")
@click.pass_obj
def distance_command(settings: Settings, start: str, end: str, origin: Optional[str]):
    """Show the number of hexes between two grid locations."""
    origin = origin or settings.origin_tile
    try:
        a = to_map_coord(_place(start, origin))
        b = to_map_coord(_place(end, origin))
    except CoordinateError as e:
        raise click.ClickException(str(e))

    click.echo(distance(a, b))


if __name__ == "__main__":
    cli()
