"""Run configuration as chosen before a simulation starts."""

from __future__ import annotations

import random
from dataclasses import dataclass, fields, replace

from .constants import (
    DEFAULT_CROSSOVER_RATE,
    DEFAULT_ELITE_RATIO,
    DEFAULT_EPOCH_DURATION,
    DEFAULT_FOOD_COUNT,
    DEFAULT_FOOD_RESPAWN_TIME,
    DEFAULT_FOOD_VALUE,
    DEFAULT_GRID_DEPTH,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_GRID_WIDTH,
    DEFAULT_MAX_FORCE_RANGE,
    DEFAULT_MUTATION_RATE,
    DEFAULT_PARTICLE_COUNT,
    DEFAULT_PARTICLE_TYPES,
    DEFAULT_SIMULATION_COUNT,
)
from .grid import BoundaryMode, GridParameters
from .parameters import (
    FoodParameters,
    ParticleTypesConfig,
    SimulationParameters,
    SimulationSpeed,
)
from .world import World

# Allowed range of every numeric setting.
LIMITS: dict[str, tuple[float, float]] = {
    "grid_width": (100.0, 2000.0),
    "grid_height": (100.0, 2000.0),
    "grid_depth": (100.0, 2000.0),
    "simulation_count": (1, 20),
    "particle_count": (10, 2000),
    "particle_types": (2, 5),
    "epoch_duration": (10.0, 300.0),
    "max_epochs": (1, 1000),
    "max_force_range": (10.0, 500.0),
    "food_count": (0, 200),
    "food_respawn_time": (1.0, 60.0),
    "food_value": (0.1, 10.0),
    "elite_ratio": (0.01, 0.5),
    "mutation_rate": (0.0, 1.0),
    "crossover_rate": (0.0, 1.0),
}


@dataclass(frozen=True)
class MenuConfig:
    """Every user-adjustable setting of a run."""

    grid_width: float = DEFAULT_GRID_WIDTH
    grid_height: float = DEFAULT_GRID_HEIGHT
    grid_depth: float = DEFAULT_GRID_DEPTH

    simulation_count: int = DEFAULT_SIMULATION_COUNT
    particle_count: int = DEFAULT_PARTICLE_COUNT
    particle_types: int = DEFAULT_PARTICLE_TYPES
    epoch_duration: float = DEFAULT_EPOCH_DURATION
    max_epochs: int = 100
    max_force_range: float = DEFAULT_MAX_FORCE_RANGE

    food_count: int = DEFAULT_FOOD_COUNT
    food_respawn_enabled: bool = True
    food_respawn_time: float = DEFAULT_FOOD_RESPAWN_TIME
    food_value: float = DEFAULT_FOOD_VALUE

    boundary_mode: BoundaryMode = BoundaryMode.BOUNCE

    elite_ratio: float = DEFAULT_ELITE_RATIO
    mutation_rate: float = DEFAULT_MUTATION_RATE
    crossover_rate: float = DEFAULT_CROSSOVER_RATE

    def clamped(self) -> MenuConfig:
        """A copy with every numeric setting forced into its allowed range."""
        changes = {}
        for item in fields(self):
            limits = LIMITS.get(item.name)
            if limits is None:
                continue
            low, high = limits
            value = min(max(getattr(self, item.name), low), high)
            changes[item.name] = int(value) if isinstance(low, int) else float(value)
        return replace(self, **changes)

    def build_world(self, rng: random.Random | None = None) -> World:
        """A fresh world set up from this configuration."""
        return World(
            grid=GridParameters(self.grid_width, self.grid_height, self.grid_depth),
            params=SimulationParameters(
                current_epoch=0,
                max_epochs=self.max_epochs,
                epoch_duration=self.epoch_duration,
                simulation_count=self.simulation_count,
                particle_count=self.particle_count,
                particle_types=self.particle_types,
                simulation_speed=SimulationSpeed.NORMAL,
                max_force_range=self.max_force_range,
                velocity_half_life=0.043,
                elite_ratio=self.elite_ratio,
                mutation_rate=self.mutation_rate,
                crossover_rate=self.crossover_rate,
            ),
            particle_types=ParticleTypesConfig(self.particle_types),
            food_params=FoodParameters(
                food_count=self.food_count,
                respawn_enabled=self.food_respawn_enabled,
                respawn_cooldown=self.food_respawn_time,
                food_value=self.food_value,
            ),
            boundary_mode=self.boundary_mode,
            rng=rng or random.Random(),
        )