"""Report grid notation and conversion to and from map coordinates.

A grid location is a tile id and a position inside that tile:

    "AB 1207"
     ||  | |
     ||  | +-- row within the tile, 01..21
     ||  +---- column within the tile, 01..30
     |+------- tile column, A..Z
     +-------- tile row, A..Z

Tiles are 30 hexes wide and 21 hexes tall and sit edge to edge, so tile
(tr, tc) covers map columns [tc*30, tc*30+30) and map rows [tr*21, tr*21+21).
Reports print "##" instead of the tile letters when the tile is hidden.
"""

from turnmap.config import OBSCURED_TILE, TILE_HEIGHT, TILE_WIDTH, TILES_PER_SIDE
from turnmap.errors import (
    InvalidColumn,
    InvalidRow,
    InvalidTileLetter,
    MalformedGridString,
    TileOutOfRange,
)
from turnmap.schemas import GridCoord, MapCoord

DIGITS = "0123456789"


def _tile_index(letter: str, value: str) -> int:
    if not ("A" <= letter <= "Z"):
        raise InvalidTileLetter(value, f"{letter!r} is not A-Z")
    return ord(letter) - ord("A")


def _grid_number(digits: str, limit: int, error: type, value: str) -> int:
    """Convert a two digit 1-based number to a zero-based index."""
    if not all(c in DIGITS for c in digits):
        raise error(value, f"{digits!r} is not a number")
    n = int(digits)
    if not 1 <= n <= limit:
        raise error(value, f"{digits} is not in 01..{limit:02d}")
    return n - 1


def parse_grid_coord(s: str) -> GridCoord:
    """Parse report notation like "AB 1207" or "## 1207".

    Raises:
        MalformedGridString: not 7 characters with a space at index 2
        InvalidTileLetter: tile is neither "##" nor two letters A-Z
        InvalidColumn: column digits not in 01..30
        InvalidRow: row digits not in 01..21
    """
    if not isinstance(s, str) or len(s) != 7 or s[2] != " ":
        raise MalformedGridString(s)

    tile = s[:2]
    obscured = tile == OBSCURED_TILE
    if obscured:
        tile_row, tile_column = 0, 0
    else:
        tile_row = _tile_index(tile[0], s)
        tile_column = _tile_index(tile[1], s)

    return GridCoord(
        tile_row=tile_row,
        tile_column=tile_column,
        column=_grid_number(s[3:5], TILE_WIDTH, InvalidColumn, s),
        row=_grid_number(s[5:7], TILE_HEIGHT, InvalidRow, s),
        obscured=obscured,
    )


def format_grid_coord(g: GridCoord) -> str:
    """Render a grid coordinate in report notation."""
    return str(g)


def tile_id(g: GridCoord) -> str:
    """Get the two character tile id ("AB" or "##")."""
    return g.tile_id


def to_map_coord(g: GridCoord) -> MapCoord:
    """Convert a grid coordinate to a map coordinate.

    An obscured coordinate is treated as lying in tile "AA".
    """
    return MapCoord(
        column=g.tile_column * TILE_WIDTH + g.column,
        row=g.tile_row * TILE_HEIGHT + g.row,
    )


def to_grid_coord(m: MapCoord) -> GridCoord:
    """Convert a map coordinate to a grid coordinate.

    Raises:
        TileOutOfRange: the hex lies outside tiles "AA" through "ZZ"
    """
    tile_row, row = divmod(m.row, TILE_HEIGHT)
    tile_column, column = divmod(m.column, TILE_WIDTH)
    if not (0 <= tile_row < TILES_PER_SIDE and 0 <= tile_column < TILES_PER_SIDE):
        raise TileOutOfRange(m, f"tile ({tile_row}, {tile_column})")
    return GridCoord(tile_row=tile_row, tile_column=tile_column, column=column, row=row)


def tile_column_row(m: MapCoord) -> tuple[int, int]:
    """Get the 1-based column and row printed on the hex's tile sheet."""
    return m.column % TILE_WIDTH + 1, m.row % TILE_HEIGHT + 1


def map_coord_from_string(s: str) -> MapCoord:
    return to_map_coord(parse_grid_coord(s))


def grid_string(m: MapCoord) -> str:
    return format_grid_coord(to_grid_coord(m))


def with_origin(g: GridCoord, origin_tile: str) -> GridCoord:
    """Replace a hidden "##" tile with the given tile id.

    The position inside the tile is kept. Coordinates that are not
    obscured are returned unchanged.
    """
    if not isinstance(origin_tile, str) or len(origin_tile) != 2:
        raise InvalidTileLetter(origin_tile, "origin tile must be two letters")
    tile_row = _tile_index(origin_tile[0], origin_tile)
    tile_column = _tile_index(origin_tile[1], origin_tile)
    if not g.obscured:
        return g
    return GridCoord(tile_row=tile_row, tile_column=tile_column, column=g.column, row=g.row)
