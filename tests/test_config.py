import random

from particlelife.config import MenuConfig
from particlelife.constants import (
    DEFAULT_FOOD_COUNT,
    DEFAULT_GRID_WIDTH,
    DEFAULT_PARTICLE_COUNT,
    DEFAULT_PARTICLE_TYPES,
    DEFAULT_SIMULATION_COUNT,
)
from particlelife.grid import BoundaryMode
from particlelife.parameters import SimulationSpeed


def test_defaults_follow_constants():
    config = MenuConfig()
    assert config.grid_width == DEFAULT_GRID_WIDTH
    assert config.simulation_count == DEFAULT_SIMULATION_COUNT
    assert config.particle_count == DEFAULT_PARTICLE_COUNT
    assert config.particle_types == DEFAULT_PARTICLE_TYPES
    assert config.food_count == DEFAULT_FOOD_COUNT
    assert config.boundary_mode is BoundaryMode.BOUNCE
    assert config.max_epochs == 100


def test_defaults_are_within_limits():
    config = MenuConfig()
    assert config.clamped() == config


def test_clamped_raises_values_to_lower_bounds():
    config = MenuConfig(grid_width=5.0, particle_types=0, simulation_count=0).clamped()
    assert config.grid_width == 100.0
    assert config.particle_types == 2
    assert config.simulation_count == 1


def test_clamped_lowers_values_to_upper_bounds():
    config = MenuConfig(particle_types=9, mutation_rate=3.0, food_count=1000).clamped()
    assert config.particle_types == 5
    assert config.mutation_rate == 1.0
    assert config.food_count == 200


def test_clamped_leaves_original_untouched():
    original = MenuConfig(particle_types=9)
    original.clamped()
    assert original.particle_types == 9


def test_build_world_applies_settings():
    config = MenuConfig(
        grid_width=300.0,
        simulation_count=3,
        particle_count=30,
        particle_types=4,
        epoch_duration=20.0,
        food_count=7,
        food_respawn_enabled=False,
        boundary_mode=BoundaryMode.TELEPORT,
        mutation_rate=0.25,
    )
    world = config.build_world(random.Random(1))
    assert world.grid.width == 300.0
    assert world.params.simulation_count == 3
    assert world.params.particle_count == 30
    assert world.params.current_epoch == 0
    assert world.params.simulation_speed is SimulationSpeed.NORMAL
    assert world.params.epoch_timer.duration == 20.0
    assert world.params.mutation_rate == 0.25
    assert world.type_count == 4
    assert world.food_params.food_count == 7
    assert world.food_params.respawn_enabled is False
    assert world.boundary_mode is BoundaryMode.TELEPORT


def test_build_world_spawns_configured_entities():
    config = MenuConfig(simulation_count=2, particle_count=10, particle_types=3, food_count=4)
    world = config.build_world(random.Random(3))
    world.start_epoch()
    assert len(world.simulations) == 2
    assert all(len(sim.particles) == 12 for sim in world.simulations)
    assert len(world.foods) == 4
    assert all(food.respawn_timer is not None for food in world.foods)


def test_same_seed_gives_same_world():
    config = MenuConfig(simulation_count=2, particle_count=10, food_count=3)
    first = config.build_world(random.Random(42))
    second = config.build_world(random.Random(42))
    first.start_epoch()
    second.start_epoch()
    assert [s.genotype for s in first.simulations] == [s.genotype for s in second.simulations]
    assert [f.position for f in first.foods] == [f.position for f in second.foods]