"""Column-offset hex coordinate utilities.

Hexes are flat-topped and laid out in columns. Every odd column is
shifted down by half a hex, so the offset to a neighbor depends on the
parity of the starting column:

    Direction   even column   odd column
    N           ( 0, -1)      ( 0, -1)
    NE          (+1, -1)      (+1,  0)
    SE          (+1,  0)      (+1, +1)
    S           ( 0, +1)      ( 0, +1)
    SW          (-1,  0)      (-1, +1)
    NW          (-1, -1)      (-1,  0)

Parity is taken from map coordinates, not from the 1-based grid column,
so "AA 0101" sits in an even column.
"""

from types import MappingProxyType
from typing import NamedTuple

from turnmap.directions import DIRECTIONS, Direction
from turnmap.errors import InvalidDirection
from turnmap.schemas import MapCoord


class HexOffset(NamedTuple):
    """Offset for hex neighbor lookup."""
    dcolumn: int
    drow: int


EVEN_COLUMN_VECTORS = MappingProxyType({
    Direction.NORTH:      HexOffset( 0, -1),  # (12, 05) -> (12, 04)
    Direction.NORTH_EAST: HexOffset(+1, -1),  # (12, 05) -> (13, 04)
    Direction.SOUTH_EAST: HexOffset(+1,  0),  # (12, 05) -> (13, 05)
    Direction.SOUTH:      HexOffset( 0, +1),  # (12, 05) -> (12, 06)
    Direction.SOUTH_WEST: HexOffset(-1,  0),  # (12, 05) -> (11, 05)
    Direction.NORTH_WEST: HexOffset(-1, -1),  # (12, 05) -> (11, 04)
})

ODD_COLUMN_VECTORS = MappingProxyType({
    Direction.NORTH:      HexOffset( 0, -1),  # (11, 05) -> (11, 04)
    Direction.NORTH_EAST: HexOffset(+1,  0),  # (11, 05) -> (12, 05)
    Direction.SOUTH_EAST: HexOffset(+1, +1),  # (11, 05) -> (12, 06)
    Direction.SOUTH:      HexOffset( 0, +1),  # (11, 05) -> (11, 06)
    Direction.SOUTH_WEST: HexOffset(-1, +1),  # (11, 05) -> (10, 06)
    Direction.NORTH_WEST: HexOffset(-1,  0),  # (11, 05) -> (10, 05)
})


def column_vectors(column: int) -> MappingProxyType:
    """Get the vector table for a map column."""
    if column % 2 == 0:
        return EVEN_COLUMN_VECTORS
    return ODD_COLUMN_VECTORS


def step(p: MapCoord, d: Direction) -> MapCoord:
    """Get the hex one step from p in direction d.

    Raises:
        InvalidDirection: d is UNKNOWN
    """
    offset = column_vectors(p.column).get(d)
    if offset is None:
        raise InvalidDirection(d)
    return MapCoord(column=p.column + offset.dcolumn, row=p.row + offset.drow)


def neighbors(p: MapCoord) -> list[tuple[Direction, MapCoord]]:
    """Get all 6 neighbors with the direction that reaches them.

    Returns:
        List of (direction, neighbor), clockwise from North
    """
    vectors = column_vectors(p.column)
    return [
        (d, MapCoord(column=p.column + vectors[d].dcolumn, row=p.row + vectors[d].drow))
        for d in DIRECTIONS
    ]


def direction_between(a: MapCoord, b: MapCoord) -> Direction:
    """Get the direction from a to an adjacent hex b.

    Returns UNKNOWN when b is not a neighbor of a.
    """
    for d, neighbor in neighbors(a):
        if neighbor == b:
            return d
    return Direction.UNKNOWN


def is_adjacent(a: MapCoord, b: MapCoord) -> bool:
    return direction_between(a, b) != Direction.UNKNOWN


def to_cube(p: MapCoord) -> tuple[int, int, int]:
    """Convert to cube coordinates (x, y, z) with x + y + z == 0."""
    x = p.column
    z = p.row - (p.column - (p.column & 1)) // 2
    return (x, -x - z, z)


def distance(a: MapCoord, b: MapCoord) -> int:
    """Calculate hex distance between two map coordinates."""
    ax, ay, az = to_cube(a)
    bx, by, bz = to_cube(b)
    return max(abs(ax - bx), abs(ay - by), abs(az - bz))
