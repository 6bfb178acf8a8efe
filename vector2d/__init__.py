"""Immutable 2D vector type for simulation, graphics and physics code."""

from . import config
from .errors import DivideByZeroError, InvalidInputError, VectorError
from .vector import TAU, RandomSource, Vector, is_vector, seed_random

__all__ = [
    "DivideByZeroError",
    "InvalidInputError",
    "RandomSource",
    "TAU",
    "Vector",
    "VectorError",
    "config",
    "is_vector",
    "seed_random",
]
