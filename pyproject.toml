[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "particlelife"
version = "0.1.0"
description = "Headless particle-life simulations of typed particles and food, evolved by a genetic algorithm over interaction genomes"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "particle life",
    "artificial life",
    "genetic algorithm",
    "simulation",
    "evolution",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
particlelife = "particlelife.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["particlelife"]

[tool.pytest.ini_options]
addopts = "-ra"
