from __future__ import annotations

from .coords import Axial, Cube, Offset


def axial_to_cube(a: Axial) -> Cube:
    x = a.q
    z = a.r
    y = -x - z
    return Cube(x, y, z)


def cube_to_axial(c: Cube) -> Axial:
    return Axial(c.x, c.z)


def axial_to_offset(a: Axial) -> Offset:
    return a.to_offset()


def offset_to_axial(o: Offset) -> Axial:
    col, row = o.col, o.row
    return Axial(col, row - (col - (col & 1)) // 2)
