"""Command line entry point: run the evolution headless and report."""

from __future__ import annotations

import argparse
import logging
import random
import sys

from .config import MenuConfig
from .grid import BoundaryMode
from .report import format_force_matrix, rank_simulations

_DEFAULTS = MenuConfig()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="particlelife",
        description="Evolve particle-life populations competing for food.",
    )
    add = parser.add_argument
    add("--width", type=float, default=_DEFAULTS.grid_width, help="grid width")
    add("--height", type=float, default=_DEFAULTS.grid_height, help="grid height")
    add("--depth", type=float, default=_DEFAULTS.grid_depth, help="grid depth")
    add("--simulations", type=int, default=_DEFAULTS.simulation_count)
    add("--particles", type=int, default=_DEFAULTS.particle_count)
    add("--types", type=int, default=_DEFAULTS.particle_types)
    add("--epoch-duration", type=float, default=_DEFAULTS.epoch_duration)
    add("--max-epochs", type=int, default=_DEFAULTS.max_epochs)
    add("--force-range", type=float, default=_DEFAULTS.max_force_range)
    add("--food", type=int, default=_DEFAULTS.food_count)
    add("--no-respawn", action="store_true", help="eaten food never returns")
    add("--respawn-time", type=float, default=_DEFAULTS.food_respawn_time)
    add("--food-value", type=float, default=_DEFAULTS.food_value)
    add("--teleport", action="store_true", help="wrap around walls instead of bouncing")
    add("--elite-ratio", type=float, default=_DEFAULTS.elite_ratio)
    add("--mutation-rate", type=float, default=_DEFAULTS.mutation_rate)
    add("--crossover-rate", type=float, default=_DEFAULTS.crossover_rate)
    add("--frames", type=int, default=300, help="frames to simulate")
    add("--delta", type=float, default=0.016, help="seconds per frame")
    add("--seed", type=int, default=None, help="random seed")
    add("-v", "--verbose", action="store_true", help="log progress")
    return parser


def _config_from(args: argparse.Namespace) -> MenuConfig:
    return MenuConfig(
        grid_width=args.width,
        grid_height=args.height,
        grid_depth=args.depth,
        simulation_count=args.simulations,
        particle_count=args.particles,
        particle_types=args.types,
        epoch_duration=args.epoch_duration,
        max_epochs=args.max_epochs,
        max_force_range=args.force_range,
        food_count=args.food,
        food_respawn_enabled=not args.no_respawn,
        food_respawn_time=args.respawn_time,
        food_value=args.food_value,
        boundary_mode=BoundaryMode.TELEPORT if args.teleport else BoundaryMode.BOUNCE,
        elite_ratio=args.elite_ratio,
        mutation_rate=args.mutation_rate,
        crossover_rate=args.crossover_rate,
    ).clamped()


def main(argv: list[str] | None = None) -> int:
    """Run the simulation for a number of frames and print the results."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")
    if args.delta < 0:
        parser.error("--delta must not be negative")
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    config = _config_from(args)
    world = config.build_world(random.Random(args.seed))
    world.start_epoch()
    for _ in range(args.frames):
        world.step(args.delta)

    out = sys.stdout
    print(f"Epoch {world.params.current_epoch + 1}/{world.params.max_epochs}", file=out)
    ranked = rank_simulations(world.simulations)
    for simulation in ranked:
        print(f"Simulation #{simulation.id + 1}: {simulation.score:.0f}", file=out)
    if ranked:
        best = ranked[0]
        print(file=out)
        print(f"Force matrix - Simulation #{best.id + 1}", file=out)
        print(format_force_matrix(best.genotype, world.type_count), file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())