"""Text views of the simulations: ranking, colours and force matrices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .constants import FORCE_SCALE_FACTOR
from .entities import Simulation
from .genotype import Genotype

Rgb8 = tuple[int, int, int]

_NEAR_ZERO = 0.05
_NEUTRAL = (120, 120, 120)
_MIN_INTENSITY = 100
_COLUMN_WIDTH = 10


def _default_visible() -> set[int]:
    return {0}


@dataclass
class SelectionState:
    """Which simulations are shown and whose force matrix is open."""

    selected_simulation: int | None = None
    show_matrix_window: bool = False
    show_simulations_list: bool = True
    selected_simulations: set[int] = field(default_factory=_default_visible)

    def select_all(self, simulation_ids: Iterable[int]) -> None:
        """Show every given simulation, keeping those already shown."""
        self.selected_simulations.update(simulation_ids)

    def deselect_all(self) -> None:
        """Hide every simulation."""
        self.selected_simulations.clear()

    def set_visible(self, simulation_id: int, visible: bool) -> None:
        """Show or hide one simulation."""
        if visible:
            self.selected_simulations.add(simulation_id)
        else:
            self.selected_simulations.discard(simulation_id)

    def open_matrix(self, simulation_id: int) -> None:
        """Open the force matrix of a simulation."""
        self.selected_simulation = simulation_id
        self.show_matrix_window = True


def score_color(score: float) -> Rgb8:
    """Colour of a score: green when high, grey when low."""
    if score > 50.0:
        return (0, 255, 0)
    if score > 20.0:
        return (255, 255, 0)
    if score > 10.0:
        return (255, 150, 0)
    return (200, 200, 200)


def force_color(force: float) -> Rgb8:
    """Green for attraction, red for repulsion, grey near zero."""
    magnitude = abs(force)
    if magnitude < _NEAR_ZERO:
        return _NEUTRAL
    intensity = max(min(int(magnitude * 255.0), 255), _MIN_INTENSITY)
    if force > 0.0:
        return (0, intensity, 0)
    return (intensity, 0, 0)


def rank_simulations(simulations: Iterable[Simulation]) -> list[Simulation]:
    """Simulations ordered by score, best first."""
    return sorted(simulations, key=lambda simulation: simulation.score, reverse=True)


def _row(cells: Iterable[str]) -> str:
    return "".join(cell.ljust(_COLUMN_WIDTH) for cell in cells).rstrip()


def format_force_matrix(genotype: Genotype, type_count: int) -> str:
    """A plain-text report of a genotype's normalised forces."""
    if type_count < 0:
        raise ValueError("type_count must not be negative")
    types = range(type_count)
    headers = [f"Type {t}" for t in types]

    lines = [
        f"Particle types: {type_count}",
        "Forces normalised between -1.000 and +1.000",
        "",
        "Particle-particle forces",
        _row(["From\\To", *headers]),
    ]
    lines.extend(
        _row([f"Type {a}", *(f"{genotype.decode_force(a, b):+.3f}" for b in types)])
        for a in types
    )
    lines += [
        "",
        "Food -> particle forces",
        _row(headers),
        _row(f"{genotype.decode_food_force(t):+.3f}" for t in types),
        "",
        f"Main genome: 0x{genotype.genome:016X}",
        f"Food genome: 0x{genotype.food_force_genome:04X}",
        f"Bits per interaction: {64 // max(type_count * type_count, 1)}",
        f"Bits per type (food): {16 // max(type_count, 1)}",
        f"Force factor applied: {FORCE_SCALE_FACTOR:.1f}",
        f"Actual forces = values x {FORCE_SCALE_FACTOR:.1f}",
    ]
    return "\n".join(lines)