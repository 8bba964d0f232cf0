from __future__ import annotations

from typing import Iterable

from ..errors import InvalidArgumentError
from .coords import AXIAL_DIRECTIONS, Axial, Cube


def unit_offsets() -> tuple[Axial, ...]:
    return AXIAL_DIRECTIONS


def direction_index(direction: Axial) -> int:
    try:
        return AXIAL_DIRECTIONS.index(direction)
    except ValueError as exc:
        raise InvalidArgumentError(f"{direction} is not a unit hex offset") from exc


def opposite_direction(direction: Axial) -> Axial:
    return AXIAL_DIRECTIONS[(direction_index(direction) + 3) % 6]


def neighbors_axial(a: Axial) -> Iterable[Axial]:
    for d in AXIAL_DIRECTIONS:
        yield a + d


def hex_distance_axial(a: Axial, b: Axial) -> int:
    return a.distance(b)


def hex_distance_cube(a: Cube, b: Cube) -> int:
    return max(abs(a.x - b.x), abs(a.y - b.y), abs(a.z - b.z))


def coordinate_range(center: Axial, radius: int) -> frozenset[Axial]:
    return center.range_within(radius)
