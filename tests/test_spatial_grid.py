from particlelife.entities import Particle, Simulation
from particlelife.spatial_grid import CELL_SIZE, SpatialGrid, cell_key, neighbor_cells
from particlelife.vector import Vec3


def test_cell_key_of_origin():
    assert cell_key(Vec3.ZERO) == (0, 0, 0)


def test_cell_key_floors_negative_and_boundaries():
    position = Vec3(-0.1, CELL_SIZE - 0.1, CELL_SIZE)
    assert cell_key(position) == (-1, 0, 1)


def test_neighbor_cells_are_27_unique_around_cell():
    cell = (2, -3, 5)
    cells = neighbor_cells(cell)
    assert len(cells) == 27
    assert len(set(cells)) == 27
    assert cell in cells
    assert all(max(abs(a - b) for a, b in zip(c, cell)) <= 1 for c in cells)


def _sim(sim_id, *positions):
    return Simulation(
        id=sim_id, particles=[Particle(i % 2, p) for i, p in enumerate(positions)]
    )


def test_neighbors_found_in_adjacent_cells():
    near = Vec3(CELL_SIZE * 1.5, 0.0, 0.0)
    sim = _sim(0, Vec3.ZERO, near)
    grid = SpatialGrid()
    grid.rebuild([sim])
    found = [entry[0] for entry in grid.potential_neighbors(Vec3.ZERO, 0)]
    assert sim.particles[0] in found
    assert sim.particles[1] in found


def test_far_particles_excluded():
    far = Vec3(CELL_SIZE * 3.5, 0.0, 0.0)
    sim = _sim(0, Vec3.ZERO, far)
    grid = SpatialGrid()
    grid.rebuild([sim])
    found = [entry[0] for entry in grid.potential_neighbors(Vec3.ZERO, 0)]
    assert found == [sim.particles[0]]


def test_other_simulations_excluded():
    first = _sim(0, Vec3.ZERO)
    second = _sim(1, Vec3.ZERO)
    grid = SpatialGrid()
    grid.rebuild([first, second])
    found = grid.potential_neighbors(Vec3.ZERO, 1)
    assert [entry[0] for entry in found] == second.particles


def test_entries_hold_position_and_type():
    position = Vec3(1.0, 2.0, 3.0)
    particle = Particle(2, position)
    grid = SpatialGrid()
    grid.rebuild([Simulation(id=0, particles=[particle])])
    assert grid.potential_neighbors(position, 0) == [(particle, position, 2)]


def test_rebuild_clears_previous_contents():
    sim = _sim(0, Vec3.ZERO)
    grid = SpatialGrid()
    grid.rebuild([sim])
    grid.rebuild([])
    assert grid.potential_neighbors(Vec3.ZERO, 0) == []