"""Hex grid directions.

Columns are vertical and hexes are flat-topped, so there is no East or
West neighbor. Directions clockwise from North:

    N   NE   SE   S   SW   NW

``UNKNOWN`` ("?") is what a report gives when the direction is unreadable.
"""

from enum import Enum
from types import MappingProxyType

from turnmap.errors import InvalidDirectionCode


class Direction(str, Enum):
    """A hex direction. The value is the canonical short code."""
    UNKNOWN = "?"
    NORTH = "N"
    NORTH_EAST = "NE"
    SOUTH_EAST = "SE"
    SOUTH = "S"
    SOUTH_WEST = "SW"
    NORTH_WEST = "NW"

    def __str__(self) -> str:
        return self.value


# The six real directions, clockwise from North
DIRECTIONS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.NORTH_EAST,
    Direction.SOUTH_EAST,
    Direction.SOUTH,
    Direction.SOUTH_WEST,
    Direction.NORTH_WEST,
)

CODE_TO_DIRECTION = MappingProxyType({d.value: d for d in Direction})

OPPOSITES = MappingProxyType({
    Direction.UNKNOWN: Direction.UNKNOWN,
    Direction.NORTH: Direction.SOUTH,
    Direction.NORTH_EAST: Direction.SOUTH_WEST,
    Direction.SOUTH_EAST: Direction.NORTH_WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.SOUTH_WEST: Direction.NORTH_EAST,
    Direction.NORTH_WEST: Direction.SOUTH_EAST,
})


def parse_direction(code: str) -> Direction:
    """Convert a short code ("N", "NE", ..., "?") to a Direction.

    Matching is exact; "ne" and " N" are rejected.
    """
    try:
        return CODE_TO_DIRECTION[code]
    except (KeyError, TypeError):
        raise InvalidDirectionCode(code) from None


def format_direction(d: Direction) -> str:
    """Convert a Direction back to its short code."""
    return d.value


def opposite(d: Direction) -> Direction:
    """Get the direction on the opposite side of the hex.

    UNKNOWN is its own opposite.
    """
    return OPPOSITES[d]
