"""World space <-> axial coordinate conversion for a flat-topped hex map."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .errors import InvalidArgumentError
from .hexgrid import Axial, hex_vertices
from .tiles import Vec3


@dataclass(frozen=True)
class Orientation:
    f0: float; f1: float; f2: float; f3: float  # axial(q,r) -> plane
    b0: float; b1: float; b2: float; b3: float  # plane -> axial


layout_flat = Orientation(
    f0 = 3.0/2.0,        f1 = 0.0,
    f2 = math.sqrt(3.0)/2.0, f3 = math.sqrt(3.0),
    b0 = 2.0/3.0,        b1 = 0.0,
    b2 = -1.0/3.0,       b3 = math.sqrt(3.0)/3.0,
)


@dataclass(frozen=True)
class Placement:
    """Where the map sits in the host scene: an origin and a yaw about +y."""

    origin: Vec3 = (0.0, 0.0, 0.0)
    yaw_degrees: float = 0.0

    @property
    def rotation(self) -> np.ndarray:
        theta = math.radians(self.yaw_degrees)
        c, s = math.cos(theta), math.sin(theta)
        return np.array(
            [
                (c, 0.0, s),
                (0.0, 1.0, 0.0),
                (-s, 0.0, c),
            ]
        )

    def transform_point(self, local: Sequence[float]) -> Vec3:
        world = self.rotation @ np.asarray(local, dtype=np.float64) + np.asarray(self.origin)
        return (float(world[0]), float(world[1]), float(world[2]))

    def transform_points(self, local: np.ndarray) -> np.ndarray:
        return local @ self.rotation.T + np.asarray(self.origin)

    def inverse_transform_point(self, world: Sequence[float]) -> Vec3:
        shifted = np.asarray(world, dtype=np.float64) - np.asarray(self.origin)
        local = self.rotation.T @ shifted
        return (float(local[0]), float(local[1]), float(local[2]))


class GridTransform:
    """Snap world positions to lattice cells and place cells in the world.

    ``hex_width`` is the corner-to-corner width of a tile.  Fractional axial
    components are rounded independently, half to even.
    """

    def __init__(self, hex_width: float = 1.0, placement: Placement | None = None) -> None:
        self.hex_width = hex_width
        self.placement = placement or Placement()
        self.orientation = layout_flat

    @property
    def hex_width(self) -> float:
        return self._hex_width

    @hex_width.setter
    def hex_width(self, value: float) -> None:
        if not math.isfinite(value) or value <= 0:
            raise InvalidArgumentError("hex_width must be positive and finite")
        self._hex_width = float(value)

    @property
    def size(self) -> float:
        return self._hex_width / 2.0

    def quantize(self, world_pos: Sequence[float]) -> Axial:
        """Return the coordinate of the cell containing ``world_pos``."""

        x, _, z = self.placement.inverse_transform_point(world_pos)
        M = self.orientation
        q = (M.b0 * x + M.b1 * z) / self.size
        r = (M.b2 * x + M.b3 * z) / self.size
        return Axial(round(q), round(r))

    def place(self, coord: Axial, elevation: float) -> Vec3:
        """World position of the centre of ``coord`` at ``elevation``."""

        M = self.orientation
        x = (M.f0 * coord.q + M.f1 * coord.r) * self.size
        z = (M.f2 * coord.q + M.f3 * coord.r) * self.size
        return self.placement.transform_point((x, elevation, z))

    def snap(self, world_pos: Sequence[float]) -> Vec3:
        """Nearest cell centre to ``world_pos``, keeping its height."""

        elevation = self.placement.inverse_transform_point(world_pos)[1]
        return self.place(self.quantize(world_pos), elevation)

    def outline(self, coord: Axial, elevation: float, diameter: float | None = None) -> np.ndarray:
        """World-space corners of the cell at ``coord``, for overlay drawing."""

        M = self.orientation
        centre = np.array(
            [
                (M.f0 * coord.q + M.f1 * coord.r) * self.size,
                elevation,
                (M.f2 * coord.q + M.f3 * coord.r) * self.size,
            ]
        )
        local = hex_vertices(self._hex_width if diameter is None else diameter) + centre
        return self.placement.transform_points(local)


__all__ = ["GridTransform", "Orientation", "Placement", "layout_flat"]
