"""The bounded box the particles live in and its wall behaviour."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum

from .constants import (
    COLLISION_DAMPING,
    DEFAULT_GRID_DEPTH,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_GRID_WIDTH,
    PARTICLE_RADIUS,
)
from .vector import Vec3


class BoundaryMode(Enum):
    """What happens when a particle reaches a wall."""

    BOUNCE = "bounce"
    TELEPORT = "teleport"


@dataclass
class GridParameters:
    """Dimensions of the box, centred on the origin."""

    width: float = DEFAULT_GRID_WIDTH
    height: float = DEFAULT_GRID_HEIGHT
    depth: float = DEFAULT_GRID_DEPTH

    @property
    def _halves(self) -> tuple[float, float, float]:
        return self.width / 2.0, self.height / 2.0, self.depth / 2.0

    def is_in_bounds(self, position: Vec3) -> bool:
        """Whether the position lies inside the box, walls included."""
        return all(abs(p) <= half for p, half in zip(position, self._halves))

    def apply_bounds(
        self, position: Vec3, velocity: Vec3, mode: BoundaryMode = BoundaryMode.BOUNCE
    ) -> tuple[Vec3, Vec3]:
        """Return the position and velocity after applying the walls."""
        if mode is BoundaryMode.BOUNCE:
            return self._bounce(position, velocity)
        return self._teleport(position), velocity

    def _bounce(self, position: Vec3, velocity: Vec3) -> tuple[Vec3, Vec3]:
        new_position = []
        new_velocity = []
        for p, v, half in zip(position, velocity, self._halves):
            limit = half - PARTICLE_RADIUS
            if abs(p) > limit:
                p = math.copysign(limit, p)
                v *= -COLLISION_DAMPING
            new_position.append(p)
            new_velocity.append(v)
        return Vec3(*new_position), Vec3(*new_velocity)

    def _teleport(self, position: Vec3) -> Vec3:
        wrapped = []
        for p, half in zip(position, self._halves):
            if p > half:
                p = -half + (p - half)
            elif p < -half:
                p = half + (p + half)
            wrapped.append(p)
        return Vec3(*wrapped)

    def random_position(self, rng: random.Random | None = None) -> Vec3:
        """A uniformly random point inside the box."""
        rng = rng or random.Random()
        return Vec3(*(rng.uniform(-half, half) for half in self._halves))