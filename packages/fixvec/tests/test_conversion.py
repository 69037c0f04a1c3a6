"""Tests for casting, sequence construction and bounded constructors."""
from __future__ import annotations

import numpy as np
import pytest

from fixvec import (
    ConstructionShortfallError,
    ScalarTypeError,
    Vec1,
    Vec2,
    Vec3,
    Vec4,
    vector_type,
)


class TestCast:
    def test_float_to_int_truncates(self) -> None:
        v = Vec3(1.7, -1.7, 300.0).cast(np.int16)
        assert v == Vec3(1, -1, 300, dtype=np.int16)

    def test_narrowing_wraps(self) -> None:
        assert Vec2(300, -1).cast(np.uint8) == Vec2(44, 255, dtype=np.uint8)

    def test_widening(self) -> None:
        v = Vec2(1, 2).cast(np.float32)
        assert v.dtype == np.float32
        assert v == Vec2(1.0, 2.0, dtype=np.float32)

    def test_keeps_arity(self) -> None:
        assert type(Vec4(1, 2, 3, 4).cast("f8")) is Vec4

    def test_unsupported_target(self) -> None:
        with pytest.raises(ScalarTypeError):
            Vec2(1, 2).cast(np.complex64)

    def test_source_untouched(self) -> None:
        v = Vec2(1.5, 2.5)
        v.cast(np.int32)
        assert v == Vec2(1.5, 2.5)


class TestFromIterable:
    def test_list(self) -> None:
        assert Vec3.from_iterable([1, 2, 3]) == Vec3(1, 2, 3)

    def test_pulls_exactly_dim_values(self) -> None:
        source = iter(range(10))
        assert Vec3.from_iterable(source) == Vec3(0, 1, 2)
        assert next(source) == 3

    def test_generator(self) -> None:
        v = Vec4.from_iterable(float(i) * 0.5 for i in range(4))
        assert v == Vec4(0.0, 0.5, 1.0, 1.5)

    def test_shortfall(self) -> None:
        with pytest.raises(ConstructionShortfallError) as info:
            Vec4.from_iterable(iter([1, 2]))
        assert info.value.expected == 4
        assert info.value.received == 2

    def test_shortfall_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Vec2.from_iterable([])

    def test_explicit_dtype(self) -> None:
        assert Vec2.from_iterable([1, 2], dtype=np.float32).dtype == np.float32

    @pytest.mark.parametrize("dim", range(7))
    def test_agrees_with_iteration(self, dim: int) -> None:
        cls = vector_type(dim)
        v = cls(*(i * 3 for i in range(dim)), dtype=np.int32)
        assert cls.from_iterable(v, dtype=np.int32) == v


class TestBoundedConstructors:
    def test_zero(self) -> None:
        assert Vec3.zero() == Vec3(0.0, 0.0, 0.0)

    def test_one_is_all_ones(self) -> None:
        v = Vec2.one(np.int32)
        assert v == Vec2(1, 1, dtype=np.int32)

    def test_one_is_not_unit_length(self) -> None:
        assert Vec3.one().norm() != 1.0

    def test_min_value(self) -> None:
        assert Vec2.min_value(np.int8) == Vec2(-128, -128, dtype=np.int8)

    def test_max_value(self) -> None:
        assert Vec2.max_value(np.uint16) == Vec2(65535, 65535, dtype=np.uint16)

    def test_float_bounds(self) -> None:
        top = np.finfo(np.float64).max
        assert Vec1.max_value() == Vec1(top)
        assert Vec1.min_value() == Vec1(-top)

    def test_unsupported_dtype(self) -> None:
        with pytest.raises(ScalarTypeError):
            Vec2.zero(np.bool_)

    def test_canonical_basis(self) -> None:
        assert Vec3.canonical_basis() == [
            Vec3(1.0, 0.0, 0.0),
            Vec3(0.0, 1.0, 0.0),
            Vec3(0.0, 0.0, 1.0),
        ]
