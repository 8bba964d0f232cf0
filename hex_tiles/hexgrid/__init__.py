from .coords import AXIAL_DIRECTIONS, Axial, Cube, Offset
from .conversions import axial_to_cube, cube_to_axial, axial_to_offset, offset_to_axial
from .neighbors import (
    coordinate_range,
    direction_index,
    hex_distance_axial,
    hex_distance_cube,
    neighbors_axial,
    opposite_direction,
    unit_offsets,
)
from .geometry import (
    HEX_HEIGHT_TO_WIDTH,
    HEX_TRIANGLES,
    HexMesh,
    build_hex_mesh,
    hex_vertices,
    triangle_fan,
)

__all__ = [
    "AXIAL_DIRECTIONS",
    "Axial",
    "Cube",
    "Offset",
    "axial_to_cube",
    "cube_to_axial",
    "axial_to_offset",
    "offset_to_axial",
    "coordinate_range",
    "direction_index",
    "hex_distance_axial",
    "hex_distance_cube",
    "neighbors_axial",
    "opposite_direction",
    "unit_offsets",
    "HEX_HEIGHT_TO_WIDTH",
    "HEX_TRIANGLES",
    "HexMesh",
    "build_hex_mesh",
    "hex_vertices",
    "triangle_fan",
]
