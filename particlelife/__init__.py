"""Headless particle-life simulations evolved by a genetic algorithm."""

__version__ = "0.1.0"