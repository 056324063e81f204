"""Step-by-step unit movement over the map."""

import logging
from typing import Iterable

from turnmap.directions import Direction, parse_direction
from turnmap.errors import ObscuredLocation
from turnmap.grid import grid_string, parse_grid_coord, to_map_coord
from turnmap.hex_coords import step
from turnmap.schemas import MapCoord

logger = logging.getLogger(__name__)


def _as_direction(d: Direction | str) -> Direction:
    if isinstance(d, Direction):
        return d
    return parse_direction(d)


def _start(location: str) -> MapCoord:
    g = parse_grid_coord(location)
    if g.obscured:
        raise ObscuredLocation(location, "set an origin tile first")
    return to_map_coord(g)


def walk(start: MapCoord, moves: Iterable[Direction]) -> list[MapCoord]:
    """Apply each move in turn.

    Returns:
        The hex reached after every move, not including start
    """
    path = []
    current = start
    for d in moves:
        current = step(current, d)
        logger.debug(f"walk: {d.value:<2} -> {current}")
        path.append(current)
    return path


def move(location: str, direction: Direction | str) -> str:
    """Move one hex from a grid location, e.g. move("AA 1206", "N") == "AA 1205".

    Raises:
        ObscuredLocation: the location's tile is "##"
    """
    return grid_string(step(_start(location), _as_direction(direction)))


def follow_path(location: str, moves: Iterable[Direction | str]) -> list[str]:
    """Walk a list of moves from a grid location.

    Returns:
        The grid location reached after every move
    """
    path = walk(_start(location), [_as_direction(d) for d in moves])
    return [grid_string(p) for p in path]


def bounds(coords: Iterable[MapCoord]) -> tuple[MapCoord, MapCoord]:
    """Get the upper-left and lower-right corners of the hexes' bounding box."""
    coords = list(coords)
    if not coords:
        raise ValueError("bounds of an empty set of hexes")
    upper_left = MapCoord(
        column=min(c.column for c in coords),
        row=min(c.row for c in coords),
    )
    lower_right = MapCoord(
        column=max(c.column for c in coords),
        row=max(c.row for c in coords),
    )
    return upper_left, lower_right
