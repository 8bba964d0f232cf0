import pytest

from hex_tiles.errors import InvalidArgumentError
from hex_tiles.hexgrid import (
    AXIAL_DIRECTIONS,
    Axial,
    coordinate_range,
    neighbors_axial,
    opposite_direction,
    unit_offsets,
)


def test_neighbors_axial_six():
    n = list(neighbors_axial(Axial(0, 0)))
    assert len(n) == 6
    assert Axial(1, 0) in n
    assert Axial(0, 1) in n


def test_unit_offsets_have_fixed_order():
    assert unit_offsets() == (
        Axial(1, 0),
        Axial(1, -1),
        Axial(0, -1),
        Axial(-1, 0),
        Axial(-1, 1),
        Axial(0, 1),
    )


@pytest.mark.parametrize("center", [Axial(0, 0), Axial(3, -5), Axial(-7, 2)])
def test_neighbors_are_distinct_and_adjacent(center: Axial):
    neighbors = center.neighbors()
    assert len(neighbors) == 6
    assert center not in neighbors
    assert all(center.distance(n) == 1 for n in neighbors)


def test_opposite_directions_cancel():
    for direction in AXIAL_DIRECTIONS:
        assert direction + opposite_direction(direction) == Axial(0, 0)


def test_opposite_direction_rejects_non_unit_offsets():
    with pytest.raises(InvalidArgumentError):
        opposite_direction(Axial(2, 0))


def test_range_rejects_radius_below_one():
    with pytest.raises(InvalidArgumentError):
        Axial(0, 0).range_within(0)
    with pytest.raises(ValueError):
        coordinate_range(Axial(0, 0), -3)


@pytest.mark.parametrize("radius", [1, 2, 5])
def test_range_is_the_immediate_ring_plus_center(radius: int):
    center = Axial(2, -1)
    cells = coordinate_range(center, radius)
    assert len(cells) == 7
    assert cells == center.neighbors() | {center}
