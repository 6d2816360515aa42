"""Selection, reproduction and the reset of a population between epochs."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Iterable, Sequence

from .entities import Food, Simulation
from .genotype import Genotype
from .grid import GridParameters
from .parameters import SimulationParameters
from .vector import Vec3

logger = logging.getLogger(__name__)

TOURNAMENT_SIZE = 3


@dataclass(frozen=True)
class ScoredGenome:
    """A genotype together with the score it earned."""

    genotype: Genotype
    score: float


def tournament_selection(
    population: Sequence[ScoredGenome], rng: random.Random | None = None
) -> Genotype:
    """Best genotype among a few distinct members drawn at random."""
    if not population:
        raise ValueError("cannot select from an empty population")
    rng = rng or random.Random()
    contenders = rng.sample(list(population), min(TOURNAMENT_SIZE, len(population)))
    return max(contenders, key=lambda member: member.score).genotype


def next_generation(
    population: Sequence[ScoredGenome],
    params: SimulationParameters,
    rng: random.Random | None = None,
) -> list[Genotype]:
    """Elites first, then children by crossover or cloning, all mutated."""
    rng = rng or random.Random()
    ranked = sorted(population, key=lambda member: member.score, reverse=True)
    elite_count = max(math.ceil(params.simulation_count * params.elite_ratio), 1)
    if elite_count > len(ranked):
        raise ValueError(
            f"population of {len(ranked)} cannot provide {elite_count} elites"
        )

    logger.info("Best score: %.1f", ranked[0].score)
    logger.info("Mean score: %.1f", sum(m.score for m in ranked) / len(ranked))
    logger.info("Elites kept: %d", elite_count)

    genomes = [member.genotype for member in ranked[:elite_count]]
    while len(genomes) < params.simulation_count:
        if rng.random() < params.crossover_rate and len(ranked) >= 2:
            first = tournament_selection(ranked, rng)
            second = tournament_selection(ranked, rng)
            child = first.crossover(second, rng)
        else:
            child = tournament_selection(ranked, rng)
        genomes.append(child.mutated(params.mutation_rate, rng))
    return genomes


def _starting_layout(
    grid: GridParameters, particle_count: int, type_count: int, rng: random.Random
) -> list[tuple[int, Vec3]]:
    if type_count <= 0:
        raise ValueError("type_count must be positive")
    per_type = -(-particle_count // type_count)
    return [
        (particle_type, grid.random_position(rng))
        for particle_type in range(type_count)
        for _ in range(per_type)
    ]


def reset_for_new_epoch(
    simulations: Sequence[Simulation],
    foods: Iterable[Food],
    grid: GridParameters,
    params: SimulationParameters,
    type_count: int,
    food_count: int,
    rng: random.Random | None = None,
) -> list[Vec3] | None:
    """Evolve the genotypes and put particles and food back at fresh places.

    Every simulation gets the same starting positions. Nothing is done in
    epoch 0, whose entities were just created; otherwise the new food
    positions are returned.
    """
    if params.current_epoch == 0:
        return None
    rng = rng or random.Random()

    logger.info("Genetic algorithm, epoch %d", params.current_epoch)
    population = [ScoredGenome(sim.genotype, sim.score) for sim in simulations]
    genomes = next_generation(population, params, rng)

    layout = _starting_layout(grid, params.particle_count, type_count, rng)
    for simulation, genotype in zip(simulations, genomes):
        simulation.genotype = genotype
    for simulation in simulations:
        simulation.score = 0.0
        for particle, (expected_type, position) in zip(simulation.particles, layout):
            if particle.particle_type == expected_type:
                particle.position = position
                particle.velocity = Vec3.ZERO

    food_positions = [grid.random_position(rng) for _ in range(food_count)]
    for food, position in zip(foods, food_positions):
        food.position = position
        if food.respawn_timer is not None:
            food.respawn_timer.reset()
        food.visible = True

    logger.info("Reset for epoch %d done", params.current_epoch)
    return food_positions