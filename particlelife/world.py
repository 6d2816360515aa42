"""A whole run: populations, food, collisions and the epoch cycle."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from .constants import FOOD_RADIUS, PARTICLE_RADIUS
from .entities import Food, Particle, Simulation
from .genetics import reset_for_new_epoch
from .genotype import Genotype
from .grid import BoundaryMode, GridParameters
from .parameters import (
    FoodParameters,
    ParticleTypesConfig,
    SimulationParameters,
    SimulationState,
)
from .physics import apply_movement, calculate_forces
from .spatial_grid import SpatialGrid
from .timer import Timer, TimerMode

logger = logging.getLogger(__name__)

_SCORE_LOG_PERIOD = 2.0
_VELOCITY_LOG_PERIOD = 5.0
_RANKING_SHOWN = 5
_MOVING_THRESHOLD = 0.1


def particles_per_type(particle_count: int, type_count: int) -> int:
    """Particles of each type so that every type has as many, rounding up."""
    if type_count <= 0:
        raise ValueError("type_count must be positive")
    return -(-particle_count // type_count)


@dataclass(frozen=True)
class VelocityStats:
    """Summary of particle speeds."""

    moving: int
    total: int
    average: float
    maximum: float


@dataclass
class World:
    """Every simulation and the food they compete for."""

    grid: GridParameters = field(default_factory=GridParameters)
    params: SimulationParameters = field(default_factory=SimulationParameters)
    particle_types: ParticleTypesConfig = field(default_factory=ParticleTypesConfig)
    food_params: FoodParameters = field(default_factory=FoodParameters)
    boundary_mode: BoundaryMode = BoundaryMode.BOUNCE
    rng: random.Random = field(default_factory=random.Random)
    simulations: list[Simulation] = field(default_factory=list)
    foods: list[Food] = field(default_factory=list)
    food_positions: list = field(default_factory=list)
    state: SimulationState = SimulationState.STARTING
    spatial_grid: SpatialGrid = field(default_factory=SpatialGrid)
    entities_spawned: bool = False
    _score_log_timer: Timer = field(
        default_factory=lambda: Timer(_SCORE_LOG_PERIOD, TimerMode.REPEATING),
        repr=False,
    )
    _velocity_log_timer: Timer = field(
        default_factory=lambda: Timer(_VELOCITY_LOG_PERIOD, TimerMode.REPEATING),
        repr=False,
    )

    @property
    def type_count(self) -> int:
        """Number of particle types."""
        return self.particle_types.type_count

    def spawn_simulations(self) -> bool:
        """Create the populations once; every one starts from the same layout.

        Returns whether anything was created.
        """
        if self.entities_spawned or self.simulations:
            return False

        type_count = self.type_count
        per_type = particles_per_type(self.params.particle_count, type_count)
        actual_count = per_type * type_count
        if actual_count != self.params.particle_count:
            logger.info(
                "Particle count adjusted from %d to %d for an even split",
                self.params.particle_count,
                actual_count,
            )

        layout = [
            (particle_type, self.grid.random_position(self.rng))
            for particle_type in range(type_count)
            for _ in range(per_type)
        ]
        self.simulations = [
            Simulation(
                id=sim_id,
                genotype=Genotype.random(type_count, self.rng),
                particles=[Particle(t, position) for t, position in layout],
            )
            for sim_id in range(self.params.simulation_count)
        ]
        self.entities_spawned = True
        logger.info(
            "Created %d simulations with %d particles each (%d per type)",
            self.params.simulation_count,
            actual_count,
            per_type,
        )
        return True

    def spawn_food(self) -> bool:
        """Scatter the food once. Returns whether anything was created."""
        if self.foods:
            return False
        self.food_positions = [
            self.grid.random_position(self.rng)
            for _ in range(self.food_params.food_count)
        ]
        self.foods = [
            Food(
                position=position,
                value=self.food_params.food_value,
                respawn_timer=(
                    Timer(self.food_params.respawn_cooldown, TimerMode.ONCE)
                    if self.food_params.respawn_enabled
                    else None
                ),
            )
            for position in self.food_positions
        ]
        logger.info("Created %d food items", self.food_params.food_count)
        return True

    def start_epoch(self) -> None:
        """Spawn on first use, evolve and reset on later epochs, then run."""
        self.spawn_simulations()
        self.spawn_food()
        new_positions = reset_for_new_epoch(
            self.simulations,
            self.foods,
            self.grid,
            self.params,
            self.type_count,
            self.food_params.food_count,
            self.rng,
        )
        if new_positions is not None:
            self.food_positions = new_positions
        self.state = SimulationState.RUNNING

    def detect_food_collision(self, delta: float) -> int:
        """Let particles eat touching food and credit their simulation.

        Hidden food waits on its respawn timer; food that does not respawn
        is removed once eaten. Returns how many items were eaten.
        """
        reach = PARTICLE_RADIUS + FOOD_RADIUS
        eaten = 0
        remaining: list[Food] = []
        for food in self.foods:
            timer = food.respawn_timer
            if timer is not None:
                if timer.is_finished():
                    timer.reset()
                    food.visible = True
                elif not food.visible:
                    timer.tick(delta)
                    remaining.append(food)
                    continue

            eater = next(
                (
                    simulation
                    for simulation in self.simulations
                    for particle in simulation.particles
                    if (particle.position - food.position).length() < reach
                ),
                None,
            )
            if eater is None:
                remaining.append(food)
                continue

            eaten += 1
            if food.respawns:
                eater.add_score(food.eat())
                remaining.append(food)
            else:
                eater.add_score(food.value)
        self.foods = remaining
        return eaten

    def check_epoch_end(self, delta: float) -> bool:
        """Advance the epoch clock; on expiry begin the next epoch."""
        self.params.tick(delta)
        if not self.params.is_epoch_finished():
            return False
        logger.info("Epoch %d finished", self.params.current_epoch)
        self.params.start_new_epoch()
        self.state = SimulationState.STARTING
        return True

    def step(self, delta: float) -> None:
        """Advance the world by one frame of ``delta`` real seconds."""
        if self.state is SimulationState.STARTING:
            self.start_epoch()
            return
        if self.state is not SimulationState.RUNNING:
            return

        self.spatial_grid.rebuild(self.simulations)
        calculate_forces(
            self.simulations,
            self.foods,
            self.spatial_grid,
            self.params,
            self.type_count,
        )
        apply_movement(self.simulations, self.grid, self.boundary_mode, self.params)
        self.detect_food_collision(delta)
        self.check_epoch_end(delta)
        self._log_progress(delta)

    def _log_progress(self, delta: float) -> None:
        if self._score_log_timer.tick(delta).just_finished():
            ranking = self.score_ranking()
            logger.info("=== Simulation scores ===")
            for sim_id, score in ranking[:_RANKING_SHOWN]:
                logger.info("Simulation %d: %.1f points", sim_id, score)
            if len(ranking) > _RANKING_SHOWN:
                logger.info("... and %d more", len(ranking) - _RANKING_SHOWN)

        if self._velocity_log_timer.tick(delta).just_finished():
            stats = self.velocity_stats()
            if stats is None:
                logger.warning("No particles found")
            else:
                logger.info("Moving particles: %d/%d", stats.moving, stats.total)
                logger.info("Average speed: %.2f", stats.average)
                logger.info("Max speed: %.2f", stats.maximum)

    def toggle_pause(self) -> SimulationState:
        """Switch between running and paused; other states are left alone."""
        if self.state is SimulationState.RUNNING:
            logger.info("Simulation paused")
            self.state = SimulationState.PAUSED
        elif self.state is SimulationState.PAUSED:
            logger.info("Simulation resumed")
            self.state = SimulationState.RUNNING
        return self.state

    def cleanup(self) -> None:
        """Remove every simulation and food item."""
        self.simulations = []
        self.foods = []
        self.entities_spawned = False
        logger.info("Simulation cleaned up")

    def score_ranking(self) -> list[tuple[int, float]]:
        """(simulation id, score) pairs, best score first."""
        return sorted(
            ((sim.id, sim.score) for sim in self.simulations),
            key=lambda entry: entry[1],
            reverse=True,
        )

    def velocity_stats(self) -> VelocityStats | None:
        """Speed summary over every particle, or None when there are none."""
        speeds = [
            particle.velocity.length()
            for simulation in self.simulations
            for particle in simulation.particles
        ]
        if not speeds:
            return None
        return VelocityStats(
            moving=sum(1 for speed in speeds if speed > _MOVING_THRESHOLD),
            total=len(speeds),
            average=sum(speeds) / len(speeds),
            maximum=max(speeds),
        )