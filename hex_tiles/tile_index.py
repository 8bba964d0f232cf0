"""Coordinate to tile mapping owned by :class:`~hex_tiles.tile_map.TileMap`."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Tuple, TypeVar

from .errors import InvalidArgumentError, TileAlreadyExistsError, TileNotFoundError
from .hexgrid import Axial

T = TypeVar("T")


class TileIndex(Generic[T]):
    """At most one tile per coordinate, enumerated in insertion order."""

    def __init__(self, entries: Iterable[Tuple[Axial, T]] = ()) -> None:
        self._tiles: dict[Axial, T] = {}
        for coord, tile in entries:
            self.add(coord, tile)

    def __contains__(self, coord: object) -> bool:
        return coord in self._tiles

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Axial]:
        return iter(self.keys())

    def contains(self, coord: Axial) -> bool:
        return coord in self._tiles

    def get(self, coord: Axial) -> T:
        try:
            return self._tiles[coord]
        except KeyError as exc:
            raise TileNotFoundError(f"no tile at {coord}") from exc

    def try_get(self, coord: Axial) -> T | None:
        return self._tiles.get(coord)

    def add(self, coord: Axial, tile: T) -> None:
        """Index ``tile`` at ``coord``; replacing requires an explicit remove."""

        if tile is None:
            raise InvalidArgumentError("cannot index None as a tile")
        if coord in self._tiles:
            raise TileAlreadyExistsError(f"a tile is already indexed at {coord}")
        self._tiles[coord] = tile

    def remove(self, coord: Axial) -> None:
        self._tiles.pop(coord, None)

    def keys(self) -> list[Axial]:
        # Snapshot so callers may mutate the index while iterating.
        return list(self._tiles)

    def values(self) -> list[T]:
        return list(self._tiles.values())

    def items(self) -> list[Tuple[Axial, T]]:
        return list(self._tiles.items())

    def clear(self) -> None:
        self._tiles.clear()


__all__ = ["TileIndex"]
