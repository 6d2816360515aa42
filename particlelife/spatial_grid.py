"""Bucketing of particles into cubic cells for neighbour lookup."""

from __future__ import annotations

import itertools
import math
from collections import defaultdict
from typing import Iterable

from .constants import DEFAULT_MAX_FORCE_RANGE
from .entities import Particle, Simulation
from .vector import Vec3

CELL_SIZE = DEFAULT_MAX_FORCE_RANGE / 2.0

Cell = tuple[int, int, int]
_Entry = tuple[Particle, Vec3, int]


def cell_key(position: Vec3) -> Cell:
    """The cell that holds a position."""
    return tuple(math.floor(c / CELL_SIZE) for c in position)  # type: ignore[return-value]


def neighbor_cells(cell: Cell) -> list[Cell]:
    """The 27 cells around and including ``cell``."""
    x, y, z = cell
    return [
        (x + dx, y + dy, z + dz)
        for dx, dy, dz in itertools.product((-1, 0, 1), repeat=3)
    ]


class SpatialGrid:
    """Particles of every simulation, grouped by simulation and cell."""

    def __init__(self) -> None:
        self._cells: dict[tuple[int, Cell], list[_Entry]] = defaultdict(list)

    def rebuild(self, simulations: Iterable[Simulation]) -> None:
        """Replace the contents with the current particle positions."""
        self._cells.clear()
        for simulation in simulations:
            for particle in simulation.particles:
                key = (simulation.id, cell_key(particle.position))
                self._cells[key].append(
                    (particle, particle.position, particle.particle_type)
                )

    def potential_neighbors(self, position: Vec3, simulation_id: int) -> list[_Entry]:
        """Particles of the simulation in the cells around a position."""
        neighbors: list[_Entry] = []
        for cell in neighbor_cells(cell_key(position)):
            neighbors.extend(self._cells.get((simulation_id, cell), ()))
        return neighbors