"""Scalar types backing vector components.

Every vector stores its components as one of the fixed-width numpy dtypes
listed in SUPPORTED_DTYPES. Scalars entering a vector are coerced with
``coerce``: numpy scalars must already carry the vector's dtype, Python
ints must fit the integer range, and Python floats are only accepted by
floating-point vectors. No implicit promotion between dtypes ever happens.
"""
from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import DTypeLike

from fixvec.types import ScalarTypeError

FLOAT64 = np.dtype(np.float64)
INT64 = np.dtype(np.int64)

SUPPORTED_DTYPES = frozenset(
    np.dtype(t)
    for t in (
        np.int8,
        np.int16,
        np.int32,
        np.int64,
        np.uint8,
        np.uint16,
        np.uint32,
        np.uint64,
        np.float32,
        np.float64,
    )
)


def resolve_dtype(dtype: DTypeLike) -> np.dtype:
    if dtype is None:
        raise ScalarTypeError("a scalar type is required")
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise ScalarTypeError(f"not a scalar type: {dtype!r}") from exc
    if resolved not in SUPPORTED_DTYPES:
        raise ScalarTypeError(f"unsupported scalar type: {resolved}")
    return resolved


def is_float(dtype: np.dtype) -> bool:
    return dtype.kind == "f"


def require_float(dtype: np.dtype, operation: str) -> None:
    if not is_float(dtype):
        raise ScalarTypeError(
            f"{operation} is only defined for floating-point vectors, got {dtype}"
        )


def infer_dtype(values: Sequence[object]) -> np.dtype:
    """Pick the dtype for components given without an explicit one."""
    numpy_dtypes = {v.dtype for v in values if isinstance(v, np.generic)}
    if len(numpy_dtypes) > 1:
        names = ", ".join(sorted(str(d) for d in numpy_dtypes))
        raise ScalarTypeError(f"mixed scalar types: {names}")
    if numpy_dtypes:
        return resolve_dtype(numpy_dtypes.pop())
    if not values or any(isinstance(v, float) for v in values):
        return FLOAT64
    return INT64


def coerce(value: object, dtype: np.dtype) -> np.generic:
    """Convert ``value`` to a scalar of ``dtype`` without crossing scalar types."""
    if isinstance(value, np.generic):
        if value.dtype != dtype:
            raise ScalarTypeError(
                f"scalar of type {value.dtype} used with a {dtype} vector"
            )
        return value
    if isinstance(value, bool):
        raise ScalarTypeError("bool is not a vector scalar")
    if isinstance(value, int):
        if dtype.kind in "iu":
            info = np.iinfo(dtype)
            if not info.min <= value <= info.max:
                raise OverflowError(f"{value} out of range for {dtype}")
        return dtype.type(value)
    if isinstance(value, float):
        if not is_float(dtype):
            raise ScalarTypeError(f"float {value!r} used with a {dtype} vector")
        return dtype.type(value)
    raise ScalarTypeError(
        f"unsupported scalar {value!r} of type {type(value).__name__}"
    )


def zero(dtype: np.dtype) -> np.generic:
    return dtype.type(0)


def one(dtype: np.dtype) -> np.generic:
    return dtype.type(1)


def min_value(dtype: np.dtype) -> np.generic:
    if is_float(dtype):
        return dtype.type(np.finfo(dtype).min)
    return dtype.type(np.iinfo(dtype).min)


def max_value(dtype: np.dtype) -> np.generic:
    if is_float(dtype):
        return dtype.type(np.finfo(dtype).max)
    return dtype.type(np.iinfo(dtype).max)


def quiet() -> np.errstate:
    """Let results wrap (integers) or go to inf/nan (floats) without warnings."""
    return np.errstate(over="ignore", under="ignore", invalid="ignore", divide="ignore")


def divide(numerator, denominator, dtype: np.dtype) -> np.ndarray:
    """Componentwise division following the dtype's own semantics.

    Floats give IEEE results (``inf``/``nan`` on zero divisors). Integers
    truncate toward zero and raise ZeroDivisionError on any zero divisor.
    """
    if is_float(dtype):
        with quiet():
            return np.asarray(np.true_divide(numerator, denominator), dtype=dtype)
    if np.any(np.asarray(denominator) == 0):
        raise ZeroDivisionError("integer division by zero")
    with quiet():
        quotient = np.floor_divide(numerator, denominator)
        remainder = numerator - quotient * denominator
        inexact_negative = (remainder != 0) & ((numerator < 0) != (denominator < 0))
        return np.asarray(np.where(inexact_negative, quotient + 1, quotient), dtype=dtype)
