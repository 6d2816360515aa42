"""Default values and physical constants of the simulation."""

DEFAULT_PARTICLE_COUNT = 500
DEFAULT_PARTICLE_TYPES = 3
DEFAULT_SIMULATION_COUNT = 4
DEFAULT_EPOCH_DURATION = 60.0  # seconds
DEFAULT_PARTICLES_PER_TYPE = DEFAULT_PARTICLE_COUNT // DEFAULT_PARTICLE_TYPES

# Grid
DEFAULT_GRID_WIDTH = 400.0
DEFAULT_GRID_HEIGHT = 400.0
DEFAULT_GRID_DEPTH = 400.0

# Food
DEFAULT_FOOD_COUNT = 50
DEFAULT_FOOD_RESPAWN_TIME = 5.0  # seconds
DEFAULT_FOOD_VALUE = 1.0
FOOD_RADIUS = 1.0

# Particles
PARTICLE_RADIUS = 2.5
PARTICLE_MASS = 1.0
MAX_VELOCITY = 200.0
COLLISION_DAMPING = 0.5

# Forces
DEFAULT_MAX_FORCE_RANGE = 100.0
# Scales a normalised force of 1.0 into an acceleration that stays
# significant against velocity damping while remaining stable.
FORCE_SCALE_FACTOR = 80.0
MIN_DISTANCE = 0.001
PARTICLE_REPULSION_STRENGTH = 100.0

# Genetics
MUTATION_RATE = 0.1
ELITE_RATIO = 0.2
CROSSOVER_RATE = 0.7
DEFAULT_ELITE_RATIO = 0.1
DEFAULT_MUTATION_RATE = 0.1
DEFAULT_CROSSOVER_RATE = 0.7

# Rendering
PARTICLE_SUBDIVISIONS = 8