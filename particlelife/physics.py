"""Forces between particles and food, and integration of their motion."""

from __future__ import annotations

from typing import Iterable

from .constants import FOOD_RADIUS, MAX_VELOCITY, PARTICLE_RADIUS
from .entities import Food, Particle, Simulation
from .genotype import Genotype
from .grid import BoundaryMode, GridParameters
from .parameters import SimulationParameters, SimulationSpeed
from .spatial_grid import SpatialGrid
from .vector import Vec3

# Fixed time step used for physics, independent of the frame rate.
PHYSICS_DELTA = 0.016
# Upper bound on particle-particle interactions per particle and step.
MAX_INTERACTIONS = 100

_MIN_DISTANCE = 0.001
_MIN_DISTANCE_SQUARED = 0.001

_ITERATIONS = {
    SimulationSpeed.PAUSED: 0,
    SimulationSpeed.NORMAL: 1,
    SimulationSpeed.FAST: 2,
    SimulationSpeed.VERY_FAST: 4,
}


def calculate_acceleration(
    min_r: float, relative_pos: Vec3, attraction: float, max_force_range: float
) -> Vec3:
    """Acceleration a particle feels from another at ``relative_pos``.

    Inside ``min_r`` the force is always repulsive; beyond it the genome's
    attraction applies, peaking half-way between ``min_r`` and the range.
    """
    dist = relative_pos.length()
    if dist < _MIN_DISTANCE:
        return Vec3.ZERO

    normalized_pos = relative_pos / max_force_range
    normalized_dist = dist / max_force_range
    min_r_normalized = min_r / max_force_range

    if normalized_dist < min_r_normalized:
        force = normalized_dist / min_r_normalized - 1.0
    else:
        force = attraction * (
            1.0
            - abs(1.0 + min_r_normalized - 2.0 * normalized_dist)
            / (1.0 - min_r_normalized)
        )
    return normalized_pos * (force / normalized_dist)


def _particle_force(
    particle: Particle,
    simulation_id: int,
    genotype: Genotype,
    spatial_grid: SpatialGrid,
    food_positions: list[Vec3],
    max_force_range: float,
    min_r: float,
) -> Vec3:
    total = Vec3.ZERO
    position = particle.position
    range_squared = max_force_range * max_force_range

    interactions = 0
    for other, other_position, other_type in spatial_grid.potential_neighbors(
        position, simulation_id
    ):
        if other is particle:
            continue
        if interactions >= MAX_INTERACTIONS:
            break
        offset = other_position - position
        distance_squared = offset.dot(offset)
        if distance_squared > range_squared or distance_squared < _MIN_DISTANCE_SQUARED:
            continue
        interactions += 1
        attraction = genotype.scaled_force(particle.particle_type, other_type)
        acceleration = calculate_acceleration(min_r, offset, attraction, max_force_range)
        total += acceleration * max_force_range

    food_force = genotype.scaled_food_force(particle.particle_type)
    if abs(food_force) > _MIN_DISTANCE:
        for food_position in food_positions:
            offset = food_position - position
            distance = offset.length()
            if _MIN_DISTANCE < distance < max_force_range:
                falloff = min(FOOD_RADIUS * 2.0 / distance, 1.0) ** 0.5
                total += offset.normalize() * (food_force * falloff)
    return total


def calculate_forces(
    simulations: Iterable[Simulation],
    foods: Iterable[Food],
    spatial_grid: SpatialGrid,
    params: SimulationParameters,
    type_count: int,
) -> dict[Particle, Vec3]:
    """Compute every particle's force and update its velocity.

    The spatial grid must have been rebuilt from the current positions.
    Returns the force applied to each particle; nothing happens when paused.
    """
    if params.simulation_speed is SimulationSpeed.PAUSED:
        return {}

    food_positions = [food.position for food in foods if food.visible]
    min_r = type_count * PARTICLE_RADIUS

    forces: dict[Particle, Vec3] = {}
    for simulation in simulations:
        for particle in simulation.particles:
            forces[particle] = _particle_force(
                particle,
                simulation.id,
                simulation.genotype,
                spatial_grid,
                food_positions,
                params.max_force_range,
                min_r,
            )

    damping = 0.5 ** (PHYSICS_DELTA / params.velocity_half_life)
    for particle, force in forces.items():
        velocity = (particle.velocity + force * PHYSICS_DELTA) * damping
        if velocity.length() > MAX_VELOCITY:
            velocity = velocity.normalize() * MAX_VELOCITY
        particle.velocity = velocity
    return forces


def apply_movement(
    simulations: Iterable[Simulation],
    grid: GridParameters,
    boundary_mode: BoundaryMode,
    params: SimulationParameters,
) -> None:
    """Move every particle by its velocity, once per speed step, then apply walls."""
    iterations = _ITERATIONS[params.simulation_speed]
    if iterations == 0:
        return
    particles = [p for simulation in simulations for p in simulation.particles]
    for _ in range(iterations):
        for particle in particles:
            position = particle.position + particle.velocity * PHYSICS_DELTA
            particle.position, particle.velocity = grid.apply_bounds(
                position, particle.velocity, boundary_mode
            )