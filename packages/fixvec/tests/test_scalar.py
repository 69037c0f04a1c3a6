"""Tests for scalar dtype resolution, coercion and division."""
from __future__ import annotations

import numpy as np
import pytest

from fixvec import ScalarTypeError, scalar


class TestResolveDtype:
    @pytest.mark.parametrize(
        "given, expected",
        [
            ("f4", np.float32),
            (float, np.float64),
            (np.int16, np.int16),
            ("uint64", np.uint64),
        ],
    )
    def test_accepted(self, given: object, expected: type) -> None:
        assert scalar.resolve_dtype(given) == np.dtype(expected)

    @pytest.mark.parametrize("given", [np.complex128, np.bool_, "U3", "nonsense", None])
    def test_rejected(self, given: object) -> None:
        with pytest.raises(ScalarTypeError):
            scalar.resolve_dtype(given)


class TestInferDtype:
    def test_empty_is_float64(self) -> None:
        assert scalar.infer_dtype([]) == np.float64

    def test_ints(self) -> None:
        assert scalar.infer_dtype([1, 2]) == np.int64

    def test_float_wins(self) -> None:
        assert scalar.infer_dtype([1, 2.0]) == np.float64

    def test_numpy_scalar_wins(self) -> None:
        assert scalar.infer_dtype([np.uint8(1), 2]) == np.uint8


class TestCoerce:
    def test_int_into_float(self) -> None:
        value = scalar.coerce(3, np.dtype(np.float32))
        assert value == 3.0
        assert value.dtype == np.float32

    def test_int_range_checked(self) -> None:
        with pytest.raises(OverflowError):
            scalar.coerce(-1, np.dtype(np.uint8))

    def test_float_into_int_rejected(self) -> None:
        with pytest.raises(ScalarTypeError):
            scalar.coerce(1.0, np.dtype(np.int32))

    def test_numpy_mismatch_rejected(self) -> None:
        with pytest.raises(ScalarTypeError):
            scalar.coerce(np.float32(1.0), np.dtype(np.float64))

    def test_string_rejected(self) -> None:
        with pytest.raises(ScalarTypeError):
            scalar.coerce("1", np.dtype(np.int64))


class TestBounds:
    def test_integer_bounds(self) -> None:
        dtype = np.dtype(np.int16)
        assert scalar.min_value(dtype) == -32768
        assert scalar.max_value(dtype) == 32767

    def test_float_bounds_are_symmetric(self) -> None:
        dtype = np.dtype(np.float32)
        assert scalar.min_value(dtype) == -scalar.max_value(dtype)

    def test_zero_and_one_keep_dtype(self) -> None:
        dtype = np.dtype(np.uint32)
        assert scalar.zero(dtype).dtype == dtype
        assert scalar.one(dtype) == 1


class TestDivide:
    def test_truncates_negative_quotients(self) -> None:
        dtype = np.dtype(np.int32)
        numerator = np.array([7, -7, 6, -6], dtype=dtype)
        result = scalar.divide(numerator, dtype.type(4), dtype)
        assert result.tolist() == [1, -1, 1, -1]
        assert result.dtype == dtype

    def test_unsigned(self) -> None:
        dtype = np.dtype(np.uint8)
        result = scalar.divide(np.array([255, 3], dtype=dtype), dtype.type(2), dtype)
        assert result.tolist() == [127, 1]

    def test_float_keeps_dtype(self) -> None:
        dtype = np.dtype(np.float32)
        result = scalar.divide(np.array([1.0], dtype=dtype), dtype.type(4.0), dtype)
        assert result.dtype == dtype
        assert result.tolist() == [0.25]
