"""Hex grid coordinate engine for mapping turn reports."""

from .directions import (
    DIRECTIONS,
    Direction,
    format_direction,
    opposite,
    parse_direction,
)
from .errors import (
    CoordinateError,
    InvalidColumn,
    InvalidDirection,
    InvalidDirectionCode,
    InvalidRow,
    InvalidTileLetter,
    MalformedGridString,
    ObscuredLocation,
    TileOutOfRange,
)
from .grid import (
    format_grid_coord,
    grid_string,
    map_coord_from_string,
    parse_grid_coord,
    tile_column_row,
    tile_id,
    to_grid_coord,
    to_map_coord,
    with_origin,
)
from .hex_coords import (
    EVEN_COLUMN_VECTORS,
    ODD_COLUMN_VECTORS,
    direction_between,
    distance,
    is_adjacent,
    neighbors,
    step,
)
from .movement import bounds, follow_path, move, walk
from .schemas import GridCoord, MapCoord

__all__ = [
    # directions
    "DIRECTIONS",
    "Direction",
    "format_direction",
    "opposite",
    "parse_direction",
    # errors
    "CoordinateError",
    "InvalidColumn",
    "InvalidDirection",
    "InvalidDirectionCode",
    "InvalidRow",
    "InvalidTileLetter",
    "MalformedGridString",
    "ObscuredLocation",
    "TileOutOfRange",
    # grid
    "format_grid_coord",
    "grid_string",
    "map_coord_from_string",
    "parse_grid_coord",
    "tile_column_row",
    "tile_id",
    "to_grid_coord",
    "to_map_coord",
    "with_origin",
    # hex_coords
    "EVEN_COLUMN_VECTORS",
    "ODD_COLUMN_VECTORS",
    "direction_between",
    "distance",
    "is_adjacent",
    "neighbors",
    "step",
    # movement
    "bounds",
    "follow_path",
    "move",
    "walk",
    # schemas
    "GridCoord",
    "MapCoord",
]
