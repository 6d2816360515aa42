"""Genome encoding the interaction forces between particle types."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from .constants import FORCE_SCALE_FACTOR

_GENOME_BITS = 64
_FOOD_GENOME_BITS = 16


def _shape(raw_value: int, bits: int) -> float:
    """Map a raw bit field to [-1, 1] with a curve that favours middle values."""
    max_value = (1 << bits) - 1
    normalized = raw_value / max_value * 2.0 - 1.0
    shaped = math.copysign(1.0, normalized) * abs(normalized) ** 0.7
    # Round to three decimals, halves away from zero.
    return math.copysign(math.floor(abs(shaped) * 1000.0 + 0.5), shaped) / 1000.0


@dataclass(frozen=True)
class Genotype:
    """A 64-bit interaction genome plus a 16-bit food-attraction genome."""

    genome: int = 0
    type_count: int = 0
    food_force_genome: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.genome < 1 << _GENOME_BITS:
            raise ValueError(f"genome must fit in {_GENOME_BITS} bits")
        if not 0 <= self.food_force_genome < 1 << _FOOD_GENOME_BITS:
            raise ValueError(f"food genome must fit in {_FOOD_GENOME_BITS} bits")
        if self.type_count < 0:
            raise ValueError("type_count must not be negative")

    @classmethod
    def random(cls, type_count: int, rng: random.Random | None = None) -> Genotype:
        """A genotype with uniformly random bits."""
        rng = rng or random.Random()
        return cls(
            rng.getrandbits(_GENOME_BITS), type_count, rng.getrandbits(_FOOD_GENOME_BITS)
        )

    @property
    def _interactions(self) -> int:
        return self.type_count * self.type_count

    @property
    def _bits_per_interaction(self) -> int:
        return min(max(_GENOME_BITS // max(self._interactions, 1), 2), 8)

    @property
    def _bits_per_type(self) -> int:
        return min(max(_FOOD_GENOME_BITS // max(self.type_count, 1), 3), 8)

    def decode_force(self, type_a: int, type_b: int) -> float:
        """Normalised force type_a feels from type_b, in [-1, 1]."""
        bits = self._bits_per_interaction
        bit_start = (type_a * self.type_count + type_b) * bits
        if bit_start + bits > _GENOME_BITS:
            return 0.0
        raw_value = (self.genome >> bit_start) & ((1 << bits) - 1)
        return _shape(raw_value, bits)

    def decode_food_force(self, particle_type: int) -> float:
        """Normalised force food exerts on a particle type, in [-1, 1]."""
        bits = self._bits_per_type
        bit_start = particle_type * bits
        if bit_start + bits > _FOOD_GENOME_BITS:
            return 0.0
        raw_value = (self.food_force_genome >> bit_start) & ((1 << bits) - 1)
        return _shape(raw_value, bits)

    def scaled_force(self, type_a: int, type_b: int) -> float:
        """Interaction force with the physics scale factor applied."""
        return self.decode_force(type_a, type_b) * FORCE_SCALE_FACTOR

    def scaled_food_force(self, particle_type: int) -> float:
        """Food force with the physics scale factor applied."""
        return self.decode_food_force(particle_type) * FORCE_SCALE_FACTOR

    def force_matrix(self) -> list[list[float]]:
        """All normalised interaction forces, rows by acting-on type."""
        types = range(self.type_count)
        return [[self.decode_force(a, b) for b in types] for a in types]

    def food_forces(self) -> list[float]:
        """Normalised food force for every particle type."""
        return [self.decode_food_force(t) for t in range(self.type_count)]

    def crossover(self, other: Genotype, rng: random.Random | None = None) -> Genotype:
        """Uniform crossover: every bit comes from either parent with equal odds."""
        rng = rng or random.Random()
        mask = rng.getrandbits(_GENOME_BITS)
        food_mask = rng.getrandbits(_FOOD_GENOME_BITS)
        genome = (self.genome & mask) | (other.genome & ~mask & ((1 << _GENOME_BITS) - 1))
        food = (self.food_force_genome & food_mask) | (
            other.food_force_genome & ~food_mask & ((1 << _FOOD_GENOME_BITS) - 1)
        )
        return Genotype(genome, self.type_count, food)

    def mutated(self, mutation_rate: float, rng: random.Random | None = None) -> Genotype:
        """A copy with random bit flips inside the encoded fields."""
        rng = rng or random.Random()
        genome = self.genome
        bits = self._bits_per_interaction
        for interaction in range(self._interactions):
            if rng.random() >= mutation_rate:
                continue
            bit_start = interaction * bits
            if bit_start + bits > _GENOME_BITS:
                continue
            for _ in range(rng.randint(1, min(2, bits))):
                genome ^= 1 << (bit_start + rng.randrange(bits))

        food = self.food_force_genome
        if rng.random() < mutation_rate * 0.5:
            type_bits = self._bits_per_type
            bit_start = rng.randrange(self.type_count) * type_bits
            if bit_start + type_bits <= _FOOD_GENOME_BITS:
                food ^= 1 << (bit_start + rng.randrange(type_bits))

        return Genotype(genome, self.type_count, food)