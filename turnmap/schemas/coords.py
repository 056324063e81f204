"""Coordinate models: internal map coordinates and report grid coordinates."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from turnmap.config import OBSCURED_TILE, TILE_HEIGHT, TILE_WIDTH, TILES_PER_SIDE


class MapCoord(BaseModel):
    """A hex on the map.

    (0, 0) is the top-left hex of tile "AA". Columns increase to the
    right and rows increase down. Any pair of integers is a real hex,
    including negative ones.
    """
    model_config = ConfigDict(frozen=True)

    column: int
    row: int

    def __str__(self) -> str:
        return f"({self.column}, {self.row})"


class GridCoord(BaseModel):
    """A hex in report notation, e.g. "AB 1207".

    Fields are zero-based: "AA 0101" has every field 0. An obscured
    coordinate ("## 1207") has tile (0, 0) and prints "##" as its tile id.
    """
    model_config = ConfigDict(frozen=True)

    tile_row: int = Field(ge=0, lt=TILES_PER_SIDE, description="First tile letter, A=0")
    tile_column: int = Field(ge=0, lt=TILES_PER_SIDE, description="Second tile letter, A=0")
    column: int = Field(ge=0, lt=TILE_WIDTH, description="Column within the tile")
    row: int = Field(ge=0, lt=TILE_HEIGHT, description="Row within the tile")
    obscured: bool = False

    @model_validator(mode="after")
    def check_obscured_tile(self) -> "GridCoord":
        if self.obscured and (self.tile_row, self.tile_column) != (0, 0):
            raise ValueError("obscured coordinates must use tile (0, 0)")
        return self

    @property
    def tile_id(self) -> str:
        if self.obscured:
            return OBSCURED_TILE
        return chr(ord("A") + self.tile_row) + chr(ord("A") + self.tile_column)

    def __str__(self) -> str:
        return f"{self.tile_id} {self.column + 1:02d}{self.row + 1:02d}"
