"""The things that live in a simulation: particles, food and simulations."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import DEFAULT_FOOD_RESPAWN_TIME, DEFAULT_FOOD_VALUE
from .genotype import Genotype
from .timer import Timer, TimerMode
from .vector import Vec3


def _default_respawn_timer() -> Timer:
    return Timer(DEFAULT_FOOD_RESPAWN_TIME, TimerMode.ONCE)


@dataclass(eq=False)
class Particle:
    """A particle of some type; compared by identity."""

    particle_type: int = 0
    position: Vec3 = Vec3.ZERO
    velocity: Vec3 = Vec3.ZERO


@dataclass(eq=False)
class Food:
    """A food pellet that scores for whoever touches it."""

    position: Vec3 = Vec3.ZERO
    value: float = DEFAULT_FOOD_VALUE
    respawn_timer: Timer | None = field(default_factory=_default_respawn_timer)
    visible: bool = True

    @property
    def respawns(self) -> bool:
        """Whether the food comes back after being eaten."""
        return self.respawn_timer is not None

    def eat(self) -> float:
        """Hide the food, restart its respawn timer and return its value."""
        self.visible = False
        if self.respawn_timer is not None:
            self.respawn_timer.reset()
        return self.value


@dataclass(eq=False)
class Simulation:
    """One population of particles governed by a single genotype."""

    id: int = 0
    genotype: Genotype = field(default_factory=Genotype)
    score: float = 0.0
    particles: list[Particle] = field(default_factory=list)

    def add_score(self, value: float) -> None:
        """Add points to the simulation's score."""
        self.score += value