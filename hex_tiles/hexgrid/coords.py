from __future__ import annotations
from dataclasses import dataclass

from ..errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class Axial:
    """Axial (q, r) coordinate of a cell on the hex lattice."""

    q: int
    r: int

    def __add__(self, other: Axial) -> Axial:
        return Axial(self.q + other.q, self.r + other.r)

    def __sub__(self, other: Axial) -> Axial:
        return Axial(self.q - other.q, self.r - other.r)

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"

    def distance(self, other: Axial) -> int:
        dq = self.q - other.q
        dr = self.r - other.r
        # numerator is always even for integer inputs
        return (abs(dq) + abs(dq + dr) + abs(dr)) // 2

    def neighbors(self) -> frozenset[Axial]:
        return frozenset(self + d for d in AXIAL_DIRECTIONS)

    def range_within(self, radius: int) -> frozenset[Axial]:
        """Cells around this one for a ``radius`` of at least one.

        Only the immediate ring is returned regardless of ``radius``: the six
        neighbours plus this cell.
        """

        if radius < 1:
            raise InvalidArgumentError("range must be at least 1")
        return self.neighbors() | {self}

    def to_cube(self) -> Cube:
        return Cube(self.q, -self.q - self.r, self.r)

    def to_offset(self) -> Offset:
        """Position of this cell in odd-q offset (column, row) coordinates."""

        return Offset(self.q, self.r + (self.q - (self.q & 1)) // 2)


@dataclass(frozen=True, slots=True)
class Cube:
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise ValueError("For cube coords, x + y + z must be 0")


@dataclass(frozen=True, slots=True)
class Offset:
    col: int  # q
    row: int  # odd-q shifted r


# Iteration order is fixed; side pieces are keyed by these offsets.
AXIAL_DIRECTIONS: tuple[Axial, ...] = (
    Axial(+1, 0),
    Axial(+1, -1),
    Axial(0, -1),
    Axial(-1, 0),
    Axial(-1, +1),
    Axial(0, +1),
)
