"""Pydantic schemas for turnmap."""

from .coords import MapCoord, GridCoord

__all__ = [
    "MapCoord",
    "GridCoord",
]
