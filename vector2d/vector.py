"""Immutable 2D vector math."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterator, Protocol

import numpy as np

from . import config
from .errors import DivideByZeroError, InvalidInputError

logger = logging.getLogger(__name__)

TAU = config.TAU

_rng = random.Random(config.DEFAULT_SEED)


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning uniform floats in [0, 1)."""

    def random(self) -> float:
        ...


def seed_random(seed: int | None = None) -> None:
    """Reseed the shared source used by :meth:`Vector.random_unit`."""
    logger.debug("Reseeding shared random source with %r", seed)
    _rng.seed(seed)


def is_vector(value: Any) -> bool:
    return isinstance(value, Vector)


def _ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics: zero divisors give inf or nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.true_divide(numerator, denominator))


@dataclass(frozen=True, eq=False)
class Vector:
    """2D vector whose components are fixed at construction.

    Every operation returns a new instance of the receiver's class. Equality
    is exact, component by component; use :meth:`is_close` when a tolerance
    is needed.
    """

    x: float
    y: float

    @classmethod
    def checked(cls, x: float, y: float) -> "Vector":
        """Build a vector, rejecting components that are not finite real numbers."""
        for name, value in (("x", x), ("y", y)):
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidInputError(f"Component {name} must be a real number, got {value!r}.")
            if not math.isfinite(value):
                raise InvalidInputError(f"Component {name} must be finite, got {value!r}.")
        return cls(x, y)

    @classmethod
    def zero(cls) -> "Vector":
        return cls(0.0, 0.0)

    @classmethod
    def up(cls) -> "Vector":
        return cls(0.0, -1.0)

    @classmethod
    def down(cls) -> "Vector":
        return cls(0.0, 1.0)

    @classmethod
    def left(cls) -> "Vector":
        return cls(-1.0, 0.0)

    @classmethod
    def right(cls) -> "Vector":
        return cls(1.0, 0.0)

    @classmethod
    def from_angle(cls, angle: float) -> "Vector":
        """Unit vector at ``angle`` radians, counter-clockwise from +X."""
        return cls(math.cos(angle), math.sin(angle))

    @classmethod
    def random_unit(cls, rng: RandomSource | None = None) -> "Vector":
        """Unit vector with a direction drawn uniformly from [0, TAU).

        Args:
            rng: Source of uniform floats in [0, 1). Defaults to the shared
                module source, see :func:`seed_random`.
        """
        source = _rng if rng is None else rng
        return cls.from_angle(TAU * source.random())

    def with_x(self, x: float) -> "Vector":
        return type(self)(x, self.y)

    def with_y(self, y: float) -> "Vector":
        return type(self)(self.x, y)

    def add(self, other: "Vector") -> "Vector":
        return type(self)(self.x + other.x, self.y + other.y)

    def add_x(self, scalar: float) -> "Vector":
        return type(self)(self.x + scalar, self.y)

    def add_y(self, scalar: float) -> "Vector":
        return type(self)(self.x, self.y + scalar)

    def sub(self, other: "Vector") -> "Vector":
        return type(self)(self.x - other.x, self.y - other.y)

    def sub_x(self, scalar: float) -> "Vector":
        return type(self)(self.x - scalar, self.y)

    def sub_y(self, scalar: float) -> "Vector":
        return type(self)(self.x, self.y - scalar)

    def mul(self, scalar: float) -> "Vector":
        return type(self)(self.x * scalar, self.y * scalar)

    def mul_x(self, scalar: float) -> "Vector":
        return type(self)(self.x * scalar, self.y)

    def mul_y(self, scalar: float) -> "Vector":
        return type(self)(self.x, self.y * scalar)

    def div(self, scalar: float) -> "Vector":
        if scalar == 0:
            logger.debug("Rejected division of %r by zero", self)
            raise DivideByZeroError("Cannot divide vector by zero.")
        return type(self)(self.x / scalar, self.y / scalar)

    def div_x(self, scalar: float) -> "Vector":
        """Divide x only. A zero divisor yields inf or nan rather than raising."""
        return type(self)(_ieee_divide(self.x, scalar), self.y)

    def div_y(self, scalar: float) -> "Vector":
        """Divide y only. A zero divisor yields inf or nan rather than raising."""
        return type(self)(self.x, _ieee_divide(self.y, scalar))

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def magnitude_squared(self) -> float:
        """Squared magnitude, for comparisons that can skip the sqrt."""
        return self.x * self.x + self.y * self.y

    def unit(self) -> "Vector":
        """Vector of length 1 in the same direction.

        Raises:
            DivideByZeroError: if the vector has zero magnitude.
        """
        mag = self.magnitude()
        if mag == 0:
            raise DivideByZeroError("Cannot normalize a zero-length vector.")
        return self.div(mag)

    def normal(self) -> "Vector":
        """Perpendicular vector (90 degrees counter-clockwise)."""
        return type(self)(-self.y, self.x)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y

    def negate(self) -> "Vector":
        return type(self)(-self.x, -self.y)

    def negate_x(self) -> "Vector":
        return type(self)(-self.x, self.y)

    def negate_y(self) -> "Vector":
        return type(self)(self.x, -self.y)

    def swap(self) -> "Vector":
        return type(self)(self.y, self.x)

    def angle(self) -> float:
        """Angle in radians from the positive X axis, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def distance_to(self, other: "Vector") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def limit(self, max_magnitude: float) -> "Vector":
        """Clamp the magnitude to ``max_magnitude``, keeping the direction.

        ``max_magnitude`` must be non-negative. Vectors already within the
        limit are returned as is.
        """
        mag = self.magnitude()
        if mag <= max_magnitude:
            return self
        scale = max_magnitude / mag
        return self.mul(scale)

    def equals(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return False
        return self.x == other.x and self.y == other.y

    def is_close(
        self,
        other: "Vector",
        rel_tol: float = config.DEFAULT_REL_TOL,
        abs_tol: float = config.DEFAULT_ABS_TOL,
    ) -> bool:
        return math.isclose(self.x, other.x, rel_tol=rel_tol, abs_tol=abs_tol) and math.isclose(
            self.y, other.y, rel_tol=rel_tol, abs_tol=abs_tol
        )

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar: float) -> "Vector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.mul(scalar)

    def __rmul__(self, scalar: float) -> "Vector":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.div(scalar)

    def __neg__(self) -> "Vector":
        return self.negate()
