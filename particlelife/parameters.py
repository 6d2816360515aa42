"""Settings and states that drive a simulation run."""

from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass, field
from enum import Enum

from .constants import (
    DEFAULT_CROSSOVER_RATE,
    DEFAULT_ELITE_RATIO,
    DEFAULT_EPOCH_DURATION,
    DEFAULT_FOOD_COUNT,
    DEFAULT_FOOD_RESPAWN_TIME,
    DEFAULT_FOOD_VALUE,
    DEFAULT_MAX_FORCE_RANGE,
    DEFAULT_MUTATION_RATE,
    DEFAULT_PARTICLE_COUNT,
    DEFAULT_PARTICLE_TYPES,
    DEFAULT_SIMULATION_COUNT,
)
from .timer import Timer, TimerMode

Rgb = tuple[float, float, float]


class SimulationSpeed(Enum):
    """How fast simulated time runs relative to real time."""

    PAUSED = "paused"
    NORMAL = "normal"
    FAST = "fast"
    VERY_FAST = "very_fast"

    def multiplier(self) -> float:
        """Factor applied to real time."""
        return _SPEED_MULTIPLIERS[self]


_SPEED_MULTIPLIERS = {
    SimulationSpeed.PAUSED: 0.0,
    SimulationSpeed.NORMAL: 1.0,
    SimulationSpeed.FAST: 2.0,
    SimulationSpeed.VERY_FAST: 4.0,
}


class AppState(Enum):
    """Top-level state of the application."""

    MAIN_MENU = "main_menu"
    SIMULATION = "simulation"


class SimulationState(Enum):
    """Phase of a running simulation."""

    STARTING = "starting"
    RUNNING = "running"
    PAUSED = "paused"
    GENETIC_SELECTION = "genetic_selection"


@dataclass
class SimulationParameters:
    """Epoch, population, force and genetic settings."""

    current_epoch: int = 0
    max_epochs: int = 100
    epoch_duration: float = DEFAULT_EPOCH_DURATION
    epoch_timer: Timer | None = None

    simulation_count: int = DEFAULT_SIMULATION_COUNT
    particle_count: int = DEFAULT_PARTICLE_COUNT
    particle_types: int = DEFAULT_PARTICLE_TYPES
    simulation_speed: SimulationSpeed = SimulationSpeed.NORMAL

    max_force_range: float = DEFAULT_MAX_FORCE_RANGE
    velocity_half_life: float = 0.043

    elite_ratio: float = DEFAULT_ELITE_RATIO
    mutation_rate: float = DEFAULT_MUTATION_RATE
    crossover_rate: float = DEFAULT_CROSSOVER_RATE

    def __post_init__(self) -> None:
        if self.epoch_timer is None:
            self.epoch_timer = Timer(self.epoch_duration, TimerMode.ONCE)

    def tick(self, delta: float) -> None:
        """Advance the epoch timer by ``delta`` real seconds, scaled by speed."""
        if self.simulation_speed is not SimulationSpeed.PAUSED:
            self.epoch_timer.tick(delta * self.simulation_speed.multiplier())

    def is_epoch_finished(self) -> bool:
        """Whether the current epoch has run its full duration."""
        return self.epoch_timer.is_finished()

    def start_new_epoch(self) -> None:
        """Move to the next epoch and restart its timer."""
        self.current_epoch += 1
        self.epoch_timer.reset()


@dataclass
class FoodParameters:
    """How much food there is and how it comes back."""

    food_count: int = DEFAULT_FOOD_COUNT
    respawn_enabled: bool = True
    respawn_cooldown: float = DEFAULT_FOOD_RESPAWN_TIME
    food_value: float = DEFAULT_FOOD_VALUE


def _srgb_to_linear(channel: float) -> float:
    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def _generate_colors(count: int) -> list[tuple[Rgb, Rgb]]:
    colors = []
    for index in range(count):
        hue = index / count
        base = colorsys.hls_to_rgb(hue, 0.6, 0.8)
        emissive = tuple(_srgb_to_linear(c) * 0.5 for c in base)
        colors.append((base, emissive))
    return colors


@dataclass
class ParticleTypesConfig:
    """Number of particle types and a distinct colour for each."""

    type_count: int = DEFAULT_PARTICLE_TYPES
    colors: list[tuple[Rgb, Rgb]] = field(init=False)

    def __post_init__(self) -> None:
        if self.type_count < 0:
            raise ValueError("type_count must not be negative")
        self.colors = _generate_colors(self.type_count)

    def color_for_type(self, type_index: int) -> tuple[Rgb, Rgb]:
        """The (sRGB base, linear emissive) colour pair of a type."""
        if not self.colors:
            raise ValueError("no particle types configured")
        return self.colors[type_index % len(self.colors)]


_PITCH_LIMIT = math.pi / 2 - 0.01


@dataclass
class CameraSettings:
    """Orbit camera sensitivity and limits."""

    orbit_distance: float = 1000.0
    pitch_speed: float = 0.003
    pitch_range: tuple[float, float] = (-_PITCH_LIMIT, _PITCH_LIMIT)
    roll_speed: float = 1.0
    yaw_speed: float = 0.004