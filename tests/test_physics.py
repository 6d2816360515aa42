import pytest

from particlelife.constants import MAX_VELOCITY, PARTICLE_RADIUS
from particlelife.entities import Food, Particle, Simulation
from particlelife.genotype import Genotype
from particlelife.grid import BoundaryMode, GridParameters
from particlelife.parameters import SimulationParameters, SimulationSpeed
from particlelife.physics import apply_movement, calculate_acceleration, calculate_forces
from particlelife.spatial_grid import SpatialGrid
from particlelife.vector import Vec3

TYPES = 3
MIN_R = TYPES * PARTICLE_RADIUS
# Type 0 gets the largest food attraction for three types (5 bits per type).
FOOD_ATTRACTS_TYPE_0 = 0b11111


def _grid_for(simulations):
    grid = SpatialGrid()
    grid.rebuild(simulations)
    return grid


def _sim(sim_id, particles, food_genome=0, genome=0):
    return Simulation(sim_id, Genotype(genome, TYPES, food_genome), particles=particles)


def test_acceleration_zero_for_coincident_points():
    assert calculate_acceleration(MIN_R, Vec3(0.0001, 0.0, 0.0), 50.0, 100.0) == Vec3.ZERO


def test_acceleration_repulsive_inside_min_radius_regardless_of_attraction():
    rel = Vec3(3.0, 0.0, 0.0)
    a = calculate_acceleration(MIN_R, rel, 0.0, 100.0)
    b = calculate_acceleration(MIN_R, rel, 80.0, 100.0)
    assert a.x < 0.0
    assert a.y == 0.0 and a.z == 0.0
    assert a == b


def test_acceleration_peaks_at_attraction_midway():
    force_range = 100.0
    distance = force_range * (1.0 + MIN_R / force_range) / 2.0
    acc = calculate_acceleration(MIN_R, Vec3(distance, 0.0, 0.0), 40.0, force_range)
    assert acc.x == pytest.approx(40.0)
    assert acc.y == 0.0


def test_acceleration_vanishes_at_range():
    acc = calculate_acceleration(MIN_R, Vec3(0.0, 100.0, 0.0), 40.0, 100.0)
    assert acc.length() == pytest.approx(0.0, abs=1e-9)


def test_acceleration_is_antisymmetric():
    rel = Vec3(12.0, -7.0, 20.0)
    forward = calculate_acceleration(MIN_R, rel, 30.0, 100.0)
    backward = calculate_acceleration(MIN_R, -rel, 30.0, 100.0)
    for f, b in zip(forward, backward):
        assert f == pytest.approx(-b)


def test_paused_does_nothing():
    particle = Particle(0, Vec3.ZERO, Vec3(5.0, 0.0, 0.0))
    sims = [_sim(0, [particle, Particle(0, Vec3(3.0, 0.0, 0.0))])]
    params = SimulationParameters(simulation_speed=SimulationSpeed.PAUSED)
    assert calculate_forces(sims, [], _grid_for(sims), params, TYPES) == {}
    assert particle.velocity == Vec3(5.0, 0.0, 0.0)


def test_lone_particle_stays_still():
    particle = Particle(0, Vec3.ZERO)
    sims = [_sim(0, [particle])]
    forces = calculate_forces(sims, [], _grid_for(sims), SimulationParameters(), TYPES)
    assert forces[particle] == Vec3.ZERO
    assert particle.velocity == Vec3.ZERO


def test_close_particles_repel_each_other():
    a = Particle(0, Vec3.ZERO)
    b = Particle(0, Vec3(3.0, 0.0, 0.0))
    sims = [_sim(0, [a, b])]
    calculate_forces(sims, [], _grid_for(sims), SimulationParameters(), TYPES)
    assert a.velocity.x < 0.0
    assert b.velocity.x > 0.0
    assert a.position == Vec3.ZERO


def test_particles_of_other_simulations_do_not_interact():
    a = Particle(0, Vec3.ZERO)
    b = Particle(0, Vec3(3.0, 0.0, 0.0))
    sims = [_sim(0, [a]), _sim(1, [b])]
    calculate_forces(sims, [], _grid_for(sims), SimulationParameters(), TYPES)
    assert a.velocity == Vec3.ZERO
    assert b.velocity == Vec3.ZERO


def test_attractive_food_pulls_particle():
    particle = Particle(0, Vec3.ZERO)
    sims = [_sim(0, [particle], food_genome=FOOD_ATTRACTS_TYPE_0)]
    foods = [Food(Vec3(10.0, 0.0, 0.0))]
    calculate_forces(sims, foods, _grid_for(sims), SimulationParameters(), TYPES)
    assert particle.velocity.x > 0.0
    assert particle.velocity.y == 0.0


def test_repulsive_food_pushes_particle():
    particle = Particle(0, Vec3.ZERO)
    sims = [_sim(0, [particle], food_genome=0)]
    foods = [Food(Vec3(10.0, 0.0, 0.0))]
    calculate_forces(sims, foods, _grid_for(sims), SimulationParameters(), TYPES)
    assert particle.velocity.x < 0.0


def test_hidden_or_distant_food_is_ignored():
    particle = Particle(0, Vec3.ZERO)
    sims = [_sim(0, [particle], food_genome=FOOD_ATTRACTS_TYPE_0)]
    foods = [Food(Vec3(10.0, 0.0, 0.0), visible=False), Food(Vec3(150.0, 0.0, 0.0))]
    calculate_forces(sims, foods, _grid_for(sims), SimulationParameters(), TYPES)
    assert particle.velocity == Vec3.ZERO


def test_velocity_is_damped():
    particle = Particle(0, Vec3.ZERO, Vec3(10.0, 0.0, 0.0))
    sims = [_sim(0, [particle])]
    calculate_forces(sims, [], _grid_for(sims), SimulationParameters(), TYPES)
    assert 0.0 < particle.velocity.x < 10.0


def test_velocity_is_capped():
    particle = Particle(0, Vec3.ZERO, Vec3(10000.0, 0.0, 0.0))
    sims = [_sim(0, [particle])]
    params = SimulationParameters(velocity_half_life=1e9)
    calculate_forces(sims, [], _grid_for(sims), params, TYPES)
    assert particle.velocity.length() == pytest.approx(MAX_VELOCITY)


def _displacement(speed):
    particle = Particle(0, Vec3.ZERO, Vec3(10.0, 0.0, 0.0))
    params = SimulationParameters(simulation_speed=speed)
    apply_movement([_sim(0, [particle])], GridParameters(), BoundaryMode.BOUNCE, params)
    return particle.position.x


def test_movement_scales_with_speed():
    normal = _displacement(SimulationSpeed.NORMAL)
    assert normal > 0.0
    assert _displacement(SimulationSpeed.FAST) == pytest.approx(2 * normal)
    assert _displacement(SimulationSpeed.VERY_FAST) == pytest.approx(4 * normal)
    assert _displacement(SimulationSpeed.PAUSED) == 0.0


def test_movement_bounces_off_walls():
    grid = GridParameters()
    particle = Particle(0, Vec3(197.0, 0.0, 0.0), Vec3(100.0, 0.0, 0.0))
    apply_movement([_sim(0, [particle])], grid, BoundaryMode.BOUNCE, SimulationParameters())
    assert particle.position.x <= grid.width / 2 - PARTICLE_RADIUS
    assert particle.velocity.x < 0.0
    assert grid.is_in_bounds(particle.position)


def test_movement_teleports_across_walls():
    grid = GridParameters()
    particle = Particle(0, Vec3(199.5, 0.0, 0.0), Vec3(100.0, 0.0, 0.0))
    apply_movement([_sim(0, [particle])], grid, BoundaryMode.TELEPORT, SimulationParameters())
    assert particle.position.x < 0.0
    assert particle.velocity == Vec3(100.0, 0.0, 0.0)
    assert grid.is_in_bounds(particle.position)