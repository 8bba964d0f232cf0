"""Exception hierarchy for the hex tile map."""

from __future__ import annotations


class HexTileError(Exception):
    """Base class for every error raised by :mod:`hex_tiles`."""


class InvalidArgumentError(HexTileError, ValueError):
    """Raised for bad geometric parameters such as a non-positive width."""


class TileNotFoundError(HexTileError, KeyError):
    """Raised when looking up a coordinate with no tile."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class TileAlreadyExistsError(HexTileError, ValueError):
    """Raised when indexing a tile over an occupied coordinate."""


class InternalInvariantViolation(HexTileError, RuntimeError):
    """A caller broke an assumption of the tile map; not recoverable locally."""


__all__ = [
    "HexTileError",
    "InternalInvariantViolation",
    "InvalidArgumentError",
    "TileAlreadyExistsError",
    "TileNotFoundError",
]
