# particlelife

A headless particle-life simulator with a genetic algorithm on top.

Several simulations run side by side in a bounded 3D box centred on the
origin. Each one starts from the same layout of typed particles and competes
for the same food. How particles of one type pull or push particles of
another type, and how strongly food attracts or repels each type, is encoded
in a compact genome (`Genotype`: a 64-bit interaction genome and a 16-bit
food genome, decoded to forces between -1.0 and +1.0). A simulation scores
the food's value whenever one of its particles touches a piece of food.
When an epoch ends, the best genomes are kept as elites and the rest of the
population is bred from them by tournament selection, uniform crossover and
mutation; particles and food are then put back at fresh random places.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
particlelife
```

builds a world from the default configuration (`MenuConfig`): 4 simulations,
500 particles of 3 types, 50 pieces of food in a 400 × 400 × 400 box, epochs
of 60 seconds. It simulates 300 frames of 0.016 seconds each, then prints the
current epoch, every simulation's score (best first) and the force matrix of
the best simulation.

Options:

| Option | Meaning |
| --- | --- |
| `--width`, `--height`, `--depth` | size of the box |
| `--simulations` | number of simulations |
| `--particles` | particles per simulation (rounded up to an even split between types) |
| `--types` | number of particle types |
| `--epoch-duration` | seconds per epoch |
| `--max-epochs` | epoch count shown in the report |
| `--force-range` | maximum range of particle forces |
| `--food` | number of food items |
| `--no-respawn` | eaten food never returns |
| `--respawn-time` | seconds before eaten food returns |
| `--food-value` | points a food item is worth |
| `--teleport` | wrap around walls instead of bouncing |
| `--elite-ratio`, `--mutation-rate`, `--crossover-rate` | genetic settings |
| `--frames` | frames to simulate (default 300) |
| `--delta` | seconds per frame (default 0.016) |
| `--seed` | random seed, for reproducible runs |
| `-v`, `--verbose` | log progress (scores, particle speeds, epochs) |

Numeric settings are clamped into their allowed ranges (`config.LIMITS`), so
for example `--types` is kept between 2 and 5.

## Using the library

Genomes can be inspected on their own:

```python
import random

from particlelife.genotype import Genotype

rng = random.Random(1)
genotype = Genotype.random(3, rng)

for row in genotype.force_matrix():   # values between -1.0 and +1.0
    print(row)
print(genotype.food_forces())

child = genotype.crossover(Genotype.random(3, rng), rng).mutated(0.1, rng)
```

A whole run is built from a `MenuConfig` and driven through the `World`:

```python
import random

from particlelife.config import MenuConfig

world = MenuConfig().build_world(random.Random(7))
for _ in range(600):
    world.step(0.016)

print(world.score_ranking())
print(world.velocity_stats())
```

The first `step` spawns the simulations and food and starts the epoch; later
steps rebuild the spatial grid, compute forces, move particles, let them eat
food and advance the epoch clock. `World.toggle_pause()` switches between
running and paused, and the speed (`SimulationSpeed`) runs simulated time at
0×, 1×, 2× or 4×.

`particlelife.report` turns a genome into a plain-text force table
(`format_force_matrix`), ranks simulations by score (`rank_simulations`),
picks display colours for scores and forces, and keeps track of which
simulations are selected for display (`SelectionState`).

## Main modules

- `particlelife.genotype` – genome encoding, decoding, crossover and mutation
- `particlelife.grid` – box limits and the bounce / teleport boundary modes
- `particlelife.physics` – force calculation and movement
- `particlelife.spatial_grid` – neighbour lookup by grid cells
- `particlelife.genetics` – elite selection, breeding and the epoch reset
- `particlelife.world` – spawning, eating food, epoch timing and pausing
- `particlelife.parameters` – simulation, food, particle-type and camera settings
- `particlelife.timer` – a countdown timer driven by explicit time steps
- `particlelife.viewport` – layout of per-simulation views and their borders in a window
- `particlelife.config` – the full set of user-facing settings
- `particlelife.report` – text reports and selection state
- `particlelife.cli` – the `particlelife` command

## What it does not do

There is no graphical window, 3D rendering, camera control or interactive
settings menu: the simulation runs headless and reports as text.
`particlelife.viewport` only computes where per-simulation views and their
separator lines would go; it draws nothing. All physics runs on the CPU in
pure Python, so large particle counts are slow.