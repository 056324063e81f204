"""Configuration for turnmap."""

import os
import tomllib
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Paths
TURNMAP_ROOT = Path(__file__).parent
DEFAULT_CONFIG_PATH = Path("turnmap.toml")

# Tile geometry (hexes per tile sheet)
TILE_WIDTH = 30
TILE_HEIGHT = 21
TILES_PER_SIDE = 26  # one letter A..Z per tile row and tile column

# Tile id used by reports when the tile is hidden from the player
OBSCURED_TILE = "##"

# Environment
DEFAULT_ORIGIN_TILE = os.environ.get("TURNMAP_ORIGIN_TILE", "")
LOG_LEVEL = os.environ.get("TURNMAP_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Runtime settings for the command line tools."""

    origin_tile: str = Field(
        default_factory=lambda: DEFAULT_ORIGIN_TILE,
        description="Tile id substituted for '##' locations (empty to disable)",
    )
    log_level: str = Field(default_factory=lambda: LOG_LEVEL)

    @field_validator("origin_tile")
    @classmethod
    def validate_origin_tile(cls, v: str) -> str:
        if v and not (len(v) == 2 and all("A" <= c <= "Z" for c in v)):
            raise ValueError(f"origin tile must be two letters A-Z, got {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return level


def load_settings(path: Optional[str | Path] = None) -> Settings:
    """Load settings from a TOML file.

    Only the ``[turnmap]`` table is read. Keys missing from the file fall
    back to the environment defaults. With no path, returns the defaults.
    """
    if path is None:
        return Settings()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    return Settings.model_validate(data.get("turnmap", {}))
