import pytest

from particlelife.constants import DEFAULT_FOOD_RESPAWN_TIME, DEFAULT_FOOD_VALUE
from particlelife.entities import Food, Particle, Simulation
from particlelife.vector import Vec3


def test_add_score_accumulates():
    sim = Simulation(id=3)
    sim.add_score(1.5)
    sim.add_score(2.0)
    assert sim.score == pytest.approx(1.5 + 2.0)


def test_default_food_has_respawn_timer():
    food = Food()
    assert food.respawns
    assert food.respawn_timer.duration == DEFAULT_FOOD_RESPAWN_TIME
    assert food.value == DEFAULT_FOOD_VALUE


def test_eat_hides_and_resets_timer():
    food = Food(position=Vec3(1.0, 2.0, 3.0), value=4.0)
    food.respawn_timer.tick(2.0)
    assert food.eat() == 4.0
    assert food.visible is False
    assert food.respawn_timer.elapsed == 0.0


def test_eat_without_respawn():
    food = Food(value=2.0, respawn_timer=None)
    assert food.eat() == 2.0
    assert food.respawns is False
    assert food.visible is False


def test_particles_compare_by_identity():
    a = Particle(1, Vec3(1.0, 0.0, 0.0))
    b = Particle(1, Vec3(1.0, 0.0, 0.0))
    assert (a == b) is False
    assert len({a, b}) == 2


def test_simulations_do_not_share_particle_lists():
    first = Simulation()
    second = Simulation()
    first.particles.append(Particle())
    assert second.particles == []