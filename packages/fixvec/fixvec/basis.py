"""Orthonormal basis construction.

Arities 0 through 3 have closed forms. Higher arities complete the basis
from the standard axes: every accepted vector (the seed first) is projected
out of each candidate axis, and the candidate is kept only when its residual
norm clears ``basis_tolerance_ulps`` machine epsilons of the dtype.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import DTypeLike

from fixvec import scalar
from fixvec.config import DEFAULT_CONFIG, VecConfig
from fixvec.types import BasisCompletionError

if TYPE_CHECKING:
    from fixvec.vector import Vec2, Vec3, Vector

logger = logging.getLogger(__name__)


def tolerance(dtype: np.dtype, config: VecConfig = DEFAULT_CONFIG) -> float:
    return config.basis_tolerance_ulps * float(np.finfo(dtype).eps)


def orthonormal_basis(
    cls: type[Vector],
    seed: Vector | None = None,
    dtype: DTypeLike = np.float64,
    config: VecConfig = DEFAULT_CONFIG,
) -> list[Vector]:
    """Return ``cls.dim()`` orthonormal vectors, the first along ``seed``.

    Without a seed the first standard axis is used.
    """
    if seed is None:
        resolved = scalar.resolve_dtype(dtype)
    else:
        if type(seed) is not cls:
            raise TypeError(f"seed must be a {cls.__name__}, got {type(seed).__name__}")
        resolved = seed.dtype
    scalar.require_float(resolved, "orthonormal_basis")
    if cls.dim() == 0:
        return []
    if seed is None:
        seed = cls.canonical_basis(resolved)[0]

    tol = tolerance(resolved, config)
    length = seed.norm()
    if not length > 0:
        raise ValueError(f"seed direction must be non-zero, got norm {float(length)}")
    unit = seed / length
    complete = _CLOSED_FORMS.get(cls.dim(), _complete)
    return [unit, *complete(unit, tol)]


def _rest_1d(unit: Vector, tol: float) -> list[Vector]:
    return []


def _rest_2d(unit: Vec2, tol: float) -> list[Vector]:
    x, y = unit
    return [type(unit)(-y, x)]


def _rest_3d(unit: Vec3, tol: float) -> list[Vector]:
    x, y, z = unit
    zero = scalar.zero(unit.dtype)
    cls = type(unit)
    if abs(x) > abs(y):
        side = cls(z, zero, -x)
    else:
        side = cls(zero, -z, y)
    side = side.normalize()
    return [side, unit.cross(side)]


def _complete(unit: Vector, tol: float) -> list[Vector]:
    cls = type(unit)
    accepted = [unit]
    for index, axis in enumerate(cls.canonical_basis(unit.dtype)):
        if len(accepted) == cls.dim():
            break
        residual = axis
        for b in accepted:
            residual = residual - b * residual.dot(b)
        length = residual.norm()
        if not length > tol:
            logger.debug(
                "%s basis: skipping axis %d, residual norm %g <= %g",
                cls.__name__, index, float(length), tol,
            )
            continue
        accepted.append(residual / length)
    if len(accepted) < cls.dim():
        raise BasisCompletionError(
            f"found {len(accepted)} independent axes for {cls.__name__}, need {cls.dim()}"
        )
    return accepted[1:]


_CLOSED_FORMS: dict[int, Callable[..., list[Vector]]] = {
    1: _rest_1d,
    2: _rest_2d,
    3: _rest_3d,
}
