"""Exceptions raised by vector2d."""

from __future__ import annotations


class VectorError(Exception):
    """Base class for errors raised by this package."""


class DivideByZeroError(VectorError, ZeroDivisionError):
    """Whole-vector division by zero, including normalizing a zero vector."""


class InvalidInputError(VectorError, ValueError):
    """A component passed to a validating constructor is not a finite number."""
