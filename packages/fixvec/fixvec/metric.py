"""Metric helpers shared by every vector arity."""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from fixvec import scalar
from fixvec.config import DEFAULT_CONFIG, VecConfig
from fixvec.types import Ordering, ScalarTypeError

if TYPE_CHECKING:
    from fixvec.vector import Vector


def require_compatible(a: Vector, b: Vector) -> None:
    if type(a) is not type(b):
        raise TypeError(
            f"operands must share an arity, got {type(a).__name__} and {type(b).__name__}"
        )
    if a.dtype != b.dtype:
        raise ScalarTypeError(f"operands must share a scalar type, got {a.dtype} and {b.dtype}")


def dot(a: Vector, b: Vector) -> np.generic:
    """Sum of componentwise products, accumulated in index order."""
    require_compatible(a, b)
    acc = scalar.zero(a.dtype)
    with scalar.quiet():
        for ai, bi in zip(a, b, strict=True):
            acc = acc + ai * bi
    return acc


def sub_dot(a: Vector, b: Vector, c: Vector) -> np.generic:
    """dot(a - b, c) without naming the intermediate."""
    return dot(a - b, c)


def norm_squared(v: Vector) -> np.generic:
    return dot(v, v)


def norm(v: Vector) -> np.generic:
    scalar.require_float(v.dtype, "norm")
    return np.sqrt(norm_squared(v))


def normalize(v: Vector) -> Vector:
    # A zero vector yields nan components.
    return v / norm(v)


def distance_squared(a: Vector, b: Vector) -> np.generic:
    return norm_squared(a - b)


def distance(a: Vector, b: Vector) -> np.generic:
    return norm(a - b)


def approx_eq(
    a: Vector,
    b: Vector,
    epsilon: float | None = None,
    config: VecConfig = DEFAULT_CONFIG,
) -> bool:
    """True when every component pair differs by at most ``epsilon`` (absolute)."""
    require_compatible(a, b)
    if epsilon is None:
        epsilon = config.float_epsilon if scalar.is_float(a.dtype) else 0
    # .item() widens to Python numbers so unsigned differences cannot wrap.
    return all(abs(ai.item() - bi.item()) <= epsilon for ai, bi in zip(a, b, strict=True))


def partial_cmp(a: Vector, b: Vector) -> Ordering:
    """Lexicographic comparison in index order."""
    require_compatible(a, b)
    for ai, bi in zip(a, b, strict=True):
        if ai < bi:
            return Ordering.LESS
        if ai > bi:
            return Ordering.GREATER
        if ai != bi:
            return Ordering.NOT_COMPARABLE
    return Ordering.EQUAL


def inf(a: Vector, b: Vector) -> Vector:
    """Componentwise minimum."""
    require_compatible(a, b)
    return type(a).from_iterable(map(np.minimum, a, b), dtype=a.dtype)


def sup(a: Vector, b: Vector) -> Vector:
    """Componentwise maximum."""
    require_compatible(a, b)
    return type(a).from_iterable(map(np.maximum, a, b), dtype=a.dtype)


def partial_min(a: Vector, b: Vector) -> Vector | None:
    order = partial_cmp(a, b)
    if order is Ordering.NOT_COMPARABLE:
        return None
    return b if order is Ordering.GREATER else a


def partial_max(a: Vector, b: Vector) -> Vector | None:
    order = partial_cmp(a, b)
    if order is Ordering.NOT_COMPARABLE:
        return None
    return b if order is Ordering.LESS else a
