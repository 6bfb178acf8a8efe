import math
import random

import pytest

from vector2d import (
    TAU,
    DivideByZeroError,
    InvalidInputError,
    RandomSource,
    Vector,
    VectorError,
    is_vector,
    seed_random,
)


class ChildVector(Vector):
    pass


class _FixedSource:
    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


def test_tau_is_full_turn():
    assert TAU == 2 * math.pi


def test_random_unit_uses_given_source():
    source = _FixedSource(0.25)

    v = Vector.random_unit(source)

    assert source.calls == 1
    assert v.x == pytest.approx(0.0, abs=1e-12)
    assert v.y == pytest.approx(1.0)


def test_random_unit_at_zero_points_right():
    assert Vector.random_unit(_FixedSource(0.0)) == Vector.right()


def test_random_unit_is_unit_length():
    rng = random.Random(7)
    for _ in range(50):
        assert Vector.random_unit(rng).magnitude() == pytest.approx(1.0)


def test_random_unit_is_deterministic_for_seeded_source():
    first = [Vector.random_unit(random.Random(123)) for _ in range(3)]
    second = [Vector.random_unit(random.Random(123)) for _ in range(3)]
    assert first == second


@pytest.fixture
def reseed_shared_source():
    yield seed_random
    seed_random(None)


def test_seed_random_makes_shared_source_repeatable(reseed_shared_source):
    reseed_shared_source(42)
    first = [Vector.random_unit() for _ in range(5)]
    reseed_shared_source(42)
    second = [Vector.random_unit() for _ in range(5)]
    assert first == second


def test_checked_accepts_finite_numbers():
    assert Vector.checked(1, 2.5) == Vector(1, 2.5)


@pytest.mark.parametrize(
    "x, y",
    [
        (math.nan, 0.0),
        (0.0, math.inf),
        (-math.inf, 1.0),
        ("1", 2.0),
        (None, 2.0),
        (True, 0.0),
    ],
)
def test_checked_rejects_invalid_components(x, y):
    with pytest.raises(InvalidInputError):
        Vector.checked(x, y)


def test_checked_builds_subclass_instances():
    assert isinstance(ChildVector.checked(1.0, 2.0), ChildVector)


def test_error_hierarchy():
    assert issubclass(DivideByZeroError, VectorError)
    assert issubclass(DivideByZeroError, ZeroDivisionError)
    assert issubclass(InvalidInputError, VectorError)
    assert issubclass(InvalidInputError, ValueError)


def test_divide_by_zero_is_logged(caplog):
    with caplog.at_level("DEBUG", logger="vector2d.vector"):
        with pytest.raises(DivideByZeroError):
            Vector(1.0, 2.0).div(0)
    assert "by zero" in caplog.text


def test_is_vector_accepts_vectors_and_subclasses():
    assert is_vector(Vector(1, 2))
    assert is_vector(ChildVector(1, 2))
    assert is_vector(Vector.zero())


@pytest.mark.parametrize("value", [None, "", "foo", 1, 0, -1, {}, (1, 2), [1, 2], {"x": 1, "y": 2}])
def test_is_vector_rejects_other_values(value):
    assert not is_vector(value)


def test_subclass_factories_and_equality():
    child = ChildVector.up()
    assert isinstance(child, ChildVector)
    assert child == Vector(0, -1)
    assert child.add(Vector(1, 1)) == Vector(1, 0)


def test_operations_keep_subclass_type():
    child = ChildVector(3.0, 4.0)
    results = [
        child.negate(),
        child.with_x(1.0),
        child.add(Vector(1.0, 1.0)),
        child.mul(2.0),
        child.div(2.0),
        child.div_y(0.0),
        child.unit(),
        child.normal(),
        child.swap(),
        child.limit(1.0),
        -child,
        child + Vector(1.0, 1.0),
        2.0 * child,
    ]
    for result in results:
        assert isinstance(result, ChildVector)
    assert isinstance(ChildVector.up().negate(), ChildVector)


def test_random_source_protocol_is_exported():
    source: RandomSource = random.Random(3)
    assert Vector.random_unit(source).magnitude() == pytest.approx(1.0)
