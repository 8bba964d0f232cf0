"""Static geometry of a flat-topped hexagon tile.

Vertices live in the tile's local x/z plane with ``y`` up.  The hexagon is
``diameter`` wide (corner to corner along x) and
``diameter * HEX_HEIGHT_TO_WIDTH`` deep along z.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from ..errors import InvalidArgumentError

# sqrt(3)/2, the ratio of a flat-topped hexagon's height to its width.
HEX_HEIGHT_TO_WIDTH = math.sqrt(3.0) / 2.0

# Four triangles spanning all six corners, no centre vertex.  Every
# triangle winds so its normal points up (+y).
HEX_TRIANGLES: dict[int, tuple[tuple[int, int, int], ...]] = {
    6: (
        (0, 1, 5),
        (1, 4, 5),
        (1, 2, 4),
        (2, 3, 4),
    ),
}

TILE_TANGENT = (1.0, 0.0, 0.0, -1.0)


def hex_vertices(diameter: float) -> np.ndarray:
    """Return the six outline corners as a ``(6, 3)`` array.

    Vertex 0 is the left-most (-x) corner; the rest follow around the
    outline towards +z first.
    """

    if not math.isfinite(diameter) or diameter <= 0:
        raise InvalidArgumentError("diameter must be positive and finite")
    half_w = diameter / 2.0
    quarter_w = diameter / 4.0
    half_h = diameter * HEX_HEIGHT_TO_WIDTH / 2.0
    return np.array(
        [
            (-half_w, 0.0, 0.0),
            (-quarter_w, 0.0, half_h),
            (quarter_w, 0.0, half_h),
            (half_w, 0.0, 0.0),
            (quarter_w, 0.0, -half_h),
            (-quarter_w, 0.0, -half_h),
        ],
        dtype=np.float64,
    )


def triangle_fan(vertex_count: int = 6) -> np.ndarray:
    try:
        triangles = HEX_TRIANGLES[vertex_count]
    except KeyError as exc:
        raise InvalidArgumentError(f"no triangulation for {vertex_count} vertices") from exc
    return np.array(triangles, dtype=np.uint32)


def vertex_normals(vertices: np.ndarray, triangles: np.ndarray) -> np.ndarray:
    """Area-weighted per-vertex normals for an indexed triangle list."""

    a = vertices[triangles[:, 0]]
    b = vertices[triangles[:, 1]]
    c = vertices[triangles[:, 2]]
    face_normals = np.cross(b - a, c - a)

    normals = np.zeros_like(vertices)
    for corner in range(3):
        np.add.at(normals, triangles[:, corner], face_normals)
    lengths = np.linalg.norm(normals, axis=1, keepdims=True)
    lengths[lengths == 0.0] = 1.0
    return normals / lengths


@dataclass
class HexMesh:
    """Renderable and collidable data for a single tile."""

    vertices: np.ndarray  # (6, 3) float64
    triangles: np.ndarray  # (4, 3) uint32
    normals: np.ndarray  # (6, 3) float64
    tangents: np.ndarray  # (6, 4) float64
    uv: np.ndarray  # (6, 2) float64
    name: str = "Procedural hex tile"

    @property
    def diameter(self) -> float:
        return float(self.vertices[:, 0].max() - self.vertices[:, 0].min())


def build_hex_mesh(diameter: float) -> HexMesh:
    vertices = hex_vertices(diameter)
    triangles = triangle_fan(len(vertices))
    tangents = np.tile(np.array(TILE_TANGENT, dtype=np.float64), (len(vertices), 1))

    # Planar projection of the outline into the unit square.
    extent = np.array([diameter, diameter * HEX_HEIGHT_TO_WIDTH])
    uv = vertices[:, [0, 2]] / extent + 0.5

    return HexMesh(
        vertices=vertices,
        triangles=triangles,
        normals=vertex_normals(vertices, triangles),
        tangents=tangents,
        uv=uv,
    )


__all__ = [
    "HEX_HEIGHT_TO_WIDTH",
    "HEX_TRIANGLES",
    "HexMesh",
    "build_hex_mesh",
    "hex_vertices",
    "triangle_fan",
    "vertex_normals",
]
