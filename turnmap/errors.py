"""Errors raised by the coordinate engine.

Every error is a ``ValueError`` so callers that only care about bad input
can catch that. The offending input is kept on ``value``.
"""

from typing import Any


class CoordinateError(ValueError):
    """Base class for grid, map and direction errors."""

    message = "invalid coordinate"

    def __init__(self, value: Any, detail: str = ""):
        self.value = value
        self.detail = detail
        text = f"{self.message}: {value!r}"
        if detail:
            text = f"{text} ({detail})"
        super().__init__(text)


class MalformedGridString(CoordinateError):
    message = "malformed grid coordinates"


class InvalidTileLetter(CoordinateError):
    message = "invalid tile letter"


class InvalidColumn(CoordinateError):
    message = "invalid grid column"


class InvalidRow(CoordinateError):
    message = "invalid grid row"


class InvalidDirectionCode(CoordinateError):
    message = "invalid direction code"


class InvalidDirection(CoordinateError):
    message = "cannot move in direction"


class TileOutOfRange(CoordinateError):
    message = "tile out of range"


class ObscuredLocation(CoordinateError):
    message = "location is obscured"
