"""Fixed-dimension vector types Vec0 through Vec6.

Every arity shares the single implementation in ``Vector``; a concrete class
only declares its dimension. Components live in a private one-dimensional
numpy array of the vector's dtype and are addressed either by index or by
the field names x, y, z, w, a, b (in that order).

Vectors are values: every operation returns a vector with its own storage,
and ``copy()``/``copy.copy`` never share components between instances.
"""
from __future__ import annotations

import itertools
import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, ClassVar, Self

import numpy as np
from numpy.typing import DTypeLike

from fixvec import basis, metric, scalar
from fixvec.config import DEFAULT_CONFIG, VecConfig
from fixvec.types import ConstructionShortfallError, Ordering, OutOfRangeError

FIELD_NAMES = ("x", "y", "z", "w", "a", "b")
MAX_DIM = len(FIELD_NAMES)

_SCALAR_TYPES = (np.generic, int, float)
_BY_DIM: dict[int, type[Vector]] = {}


def vector_type(dim: int) -> type[Vector]:
    """Return the vector class of the given arity."""
    try:
        return _BY_DIM[dim]
    except KeyError:
        raise ValueError(f"no vector type of dimension {dim}") from None


def _field(index: int, name: str) -> property:
    def fget(self: Vector) -> np.generic:
        return self._data[index]

    def fset(self: Vector, value: object) -> None:
        self._data[index] = scalar.coerce(value, self.dtype)

    return property(fget, fset, doc=f"Component {index} ({name}).")


class ComponentSlot:
    """Write handle for one component, handed out by ``Vector.iter_mut``.

    A slot is only valid until the iterator that produced it advances or
    closes; touching a stale slot raises RuntimeError.
    """

    __slots__ = ("_vector", "_index", "_live")

    def __init__(self, vector: Vector, index: int) -> None:
        self._vector = vector
        self._index = index
        self._live = True

    @property
    def index(self) -> int:
        return self._index

    @property
    def value(self) -> np.generic:
        self._check()
        return self._vector.at_fast(self._index)

    @value.setter
    def value(self, value: object) -> None:
        self._check()
        self._vector.set_fast(self._index, value)

    def _check(self) -> None:
        if not self._live:
            raise RuntimeError(
                f"slot for component {self._index} used after the iterator "
                "advanced or closed"
            )

    def _release(self) -> None:
        self._live = False


class Vector:
    """Base of every fixed-dimension vector. Use Vec0 .. Vec6."""

    __slots__ = ("_data",)

    # numpy operands defer to the reflected dunders instead of treating a
    # vector as a sequence.
    __array_ufunc__ = None

    _dim: ClassVar[int]
    _data: np.ndarray

    def __init_subclass__(cls, dim: int, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not 0 <= dim <= MAX_DIM:
            raise ValueError(f"dim must be in [0, {MAX_DIM}], got {dim}")
        cls._dim = dim
        for index, name in enumerate(FIELD_NAMES[:dim]):
            setattr(cls, name, _field(index, name))
        _BY_DIM[dim] = cls

    def __init__(self, *components: object, dtype: DTypeLike = None) -> None:
        if type(self) is Vector:
            raise TypeError("Vector cannot be instantiated; use Vec0 .. Vec6")
        if len(components) != self._dim:
            raise TypeError(
                f"{type(self).__name__} takes exactly {self._dim} components "
                f"({len(components)} given)"
            )
        resolved = (
            scalar.infer_dtype(components) if dtype is None else scalar.resolve_dtype(dtype)
        )
        self._data = np.array(
            [scalar.coerce(c, resolved) for c in components], dtype=resolved
        )

    @classmethod
    def _from_array(cls, data: np.ndarray) -> Self:
        # Takes ownership of ``data``; callers pass a fresh array.
        vector = cls.__new__(cls)
        vector._data = data
        return vector

    # Construction

    @classmethod
    def repeat(cls, value: object, dtype: DTypeLike = None) -> Self:
        resolved = scalar.infer_dtype([value]) if dtype is None else scalar.resolve_dtype(dtype)
        return cls._from_array(
            np.full(cls._dim, scalar.coerce(value, resolved), dtype=resolved)
        )

    @classmethod
    def zero(cls, dtype: DTypeLike = np.float64) -> Self:
        resolved = scalar.resolve_dtype(dtype)
        return cls.repeat(scalar.zero(resolved))

    @classmethod
    def one(cls, dtype: DTypeLike = np.float64) -> Self:
        """Every component equal to one (not a unit-length vector)."""
        resolved = scalar.resolve_dtype(dtype)
        return cls.repeat(scalar.one(resolved))

    @classmethod
    def min_value(cls, dtype: DTypeLike = np.float64) -> Self:
        resolved = scalar.resolve_dtype(dtype)
        return cls.repeat(scalar.min_value(resolved))

    @classmethod
    def max_value(cls, dtype: DTypeLike = np.float64) -> Self:
        resolved = scalar.resolve_dtype(dtype)
        return cls.repeat(scalar.max_value(resolved))

    @classmethod
    def from_iterable(cls, source: Iterable[object], dtype: DTypeLike = None) -> Self:
        """Build a vector from the first ``dim`` values of ``source``.

        Exactly ``dim`` values are pulled, so a single-pass iterator is left
        positioned right after them. Raises ConstructionShortfallError if the
        source is exhausted early.
        """
        values = list(itertools.islice(source, cls._dim))
        if len(values) < cls._dim:
            raise ConstructionShortfallError(cls._dim, len(values))
        return cls(*values, dtype=dtype)

    @classmethod
    def canonical_basis(cls, dtype: DTypeLike = np.float64) -> list[Self]:
        """The standard basis e_0 .. e_(dim-1)."""
        resolved = scalar.resolve_dtype(dtype)
        identity = np.eye(cls._dim, dtype=resolved)
        return [cls._from_array(row.copy()) for row in identity]

    @classmethod
    def orthonormal_basis(
        cls,
        seed: Self | None = None,
        dtype: DTypeLike = np.float64,
        config: VecConfig = DEFAULT_CONFIG,
    ) -> list[Self]:
        return basis.orthonormal_basis(cls, seed, dtype, config)

    def orthonormal_subspace_basis(self, config: VecConfig = DEFAULT_CONFIG) -> list[Self]:
        """The ``dim - 1`` orthonormal vectors completing this direction."""
        return basis.orthonormal_basis(type(self), self, config=config)[1:]

    def copy(self) -> Self:
        return self._from_array(self._data.copy())

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.copy()

    # Introspection and indexing

    @classmethod
    def dim(cls) -> int:
        return cls._dim

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def __len__(self) -> int:
        return self._dim

    def _checked(self, index: int) -> int:
        i = operator.index(index)
        if not 0 <= i < self._dim:
            raise OutOfRangeError(i, self._dim)
        return i

    def at(self, index: int) -> np.generic:
        return self._data[self._checked(index)]

    def at_fast(self, index: int) -> np.generic:
        """Unchecked read. The caller guarantees 0 <= index < dim."""
        return self._data[index]

    def set(self, index: int, value: object) -> None:
        self._data[self._checked(index)] = scalar.coerce(value, self.dtype)

    def set_fast(self, index: int, value: object) -> None:
        """Unchecked write. The caller guarantees 0 <= index < dim."""
        self._data[index] = scalar.coerce(value, self.dtype)

    def swap(self, i: int, j: int) -> None:
        i, j = self._checked(i), self._checked(j)
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def __getitem__(self, index: int) -> np.generic:
        return self.at(index)

    def __setitem__(self, index: int, value: object) -> None:
        self.set(index, value)

    # Iteration

    def __iter__(self) -> Iterator[np.generic]:
        for i in range(self._dim):
            yield self._data[i]

    def iter(self) -> Iterator[np.generic]:
        return iter(self)

    def iter_mut(self) -> Iterator[ComponentSlot]:
        """Yield one write handle per component, in index order."""
        for i in range(self._dim):
            slot = ComponentSlot(self, i)
            try:
                yield slot
            finally:
                slot._release()

    # Display and comparison

    def __repr__(self) -> str:
        parts = [str(c) for c in self]
        parts.append(f"dtype={self.dtype}")
        return f"{type(self).__name__}({', '.join(parts)})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.dtype == other.dtype and bool(np.array_equal(self._data, other._data))

    def _ordered(self, other: object, accepted: tuple[Ordering, ...]) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return metric.partial_cmp(self, other) in accepted

    def __lt__(self, other: object) -> bool:
        return self._ordered(other, (Ordering.LESS,))

    def __le__(self, other: object) -> bool:
        return self._ordered(other, (Ordering.LESS, Ordering.EQUAL))

    def __gt__(self, other: object) -> bool:
        return self._ordered(other, (Ordering.GREATER,))

    def __ge__(self, other: object) -> bool:
        return self._ordered(other, (Ordering.GREATER, Ordering.EQUAL))

    # Arithmetic

    def _binary(self, other: object, op: Callable[[Any, Any], Any]) -> Self:
        if isinstance(other, Vector):
            if type(other) is not type(self):
                return NotImplemented
            metric.require_compatible(self, other)
            rhs: Any = other._data
        elif isinstance(other, _SCALAR_TYPES):
            rhs = scalar.coerce(other, self.dtype)
        else:
            return NotImplemented
        with scalar.quiet():
            return self._from_array(np.asarray(op(self._data, rhs), dtype=self.dtype))

    def _reflected(self, other: object, op: Callable[[Any, Any], Any]) -> Self:
        if not isinstance(other, _SCALAR_TYPES):
            return NotImplemented
        lhs = scalar.coerce(other, self.dtype)
        with scalar.quiet():
            return self._from_array(np.asarray(op(lhs, self._data), dtype=self.dtype))

    def _divide(self, numerator: Any, denominator: Any) -> np.ndarray:
        return scalar.divide(numerator, denominator, self.dtype)

    def __add__(self, other: object) -> Self:
        return self._binary(other, np.add)

    def __radd__(self, other: object) -> Self:
        return self._reflected(other, np.add)

    def __sub__(self, other: object) -> Self:
        return self._binary(other, np.subtract)

    def __rsub__(self, other: object) -> Self:
        return self._reflected(other, np.subtract)

    def __mul__(self, other: object) -> Self:
        return self._binary(other, np.multiply)

    def __rmul__(self, other: object) -> Self:
        return self._reflected(other, np.multiply)

    def __truediv__(self, other: object) -> Self:
        return self._binary(other, self._divide)

    def __rtruediv__(self, other: object) -> Self:
        return self._reflected(other, self._divide)

    def __neg__(self) -> Self:
        with scalar.quiet():
            return self._from_array(np.negative(self._data))

    def floor(self) -> Self:
        if not scalar.is_float(self.dtype):
            return self.copy()
        return self._from_array(np.floor(self._data))

    def ceil(self) -> Self:
        if not scalar.is_float(self.dtype):
            return self.copy()
        return self._from_array(np.ceil(self._data))

    def round(self) -> Self:
        """Round each component to the nearest integer, halves away from zero."""
        if not scalar.is_float(self.dtype):
            return self.copy()
        with scalar.quiet():
            whole = np.trunc(self._data)
            halfway = np.abs(self._data - whole) >= 0.5
            return self._from_array(np.where(halfway, whole + np.sign(self._data), whole))

    # Conversion

    def cast(self, dtype: DTypeLike) -> Vector:
        """Convert every component to ``dtype`` with numpy's unchecked conversion."""
        resolved = scalar.resolve_dtype(dtype)
        with scalar.quiet():
            return self._from_array(self._data.astype(resolved))

    # Metric

    def dot(self, other: Self) -> np.generic:
        return metric.dot(self, other)

    def sub_dot(self, other: Self, direction: Self) -> np.generic:
        return metric.sub_dot(self, other, direction)

    def norm_squared(self) -> np.generic:
        return metric.norm_squared(self)

    def norm(self) -> np.generic:
        return metric.norm(self)

    def normalize(self) -> Self:
        return metric.normalize(self)

    def normalize_in_place(self) -> np.generic:
        """Scale this vector to unit length and return its previous norm."""
        length = self.norm()
        self._data[:] = self._divide(self._data, length)
        return length

    def distance_squared(self, other: Self) -> np.generic:
        return metric.distance_squared(self, other)

    def distance(self, other: Self) -> np.generic:
        return metric.distance(self, other)

    def approx_eq(
        self,
        other: Self,
        epsilon: float | None = None,
        config: VecConfig = DEFAULT_CONFIG,
    ) -> bool:
        return metric.approx_eq(self, other, epsilon, config)

    def partial_cmp(self, other: Self) -> Ordering:
        return metric.partial_cmp(self, other)

    def inf(self, other: Self) -> Self:
        return metric.inf(self, other)

    def sup(self, other: Self) -> Self:
        return metric.sup(self, other)

    def partial_min(self, other: Self) -> Self | None:
        return metric.partial_min(self, other)

    def partial_max(self, other: Self) -> Self | None:
        return metric.partial_max(self, other)

    # Affine adapters. A bare vector has no orientation, so rotations are
    # identities here; rotating a vector used as a point is silently a no-op.

    def translate(self, delta: Self) -> Self:
        metric.require_compatible(self, delta)
        return self + delta

    def inv_translate(self, delta: Self) -> Self:
        metric.require_compatible(self, delta)
        return self - delta

    def rotate(self, rotation: object) -> Self:
        return self.copy()

    def inv_rotate(self, rotation: object) -> Self:
        return self.copy()

    def transform(self, delta: Self, rotation: object) -> Self:
        """Translate, then rotate."""
        return self.translate(delta).rotate(rotation)

    def inv_transform(self, delta: Self, rotation: object) -> Self:
        return self.inv_rotate(rotation).inv_translate(delta)

    def translation(self) -> Self:
        return self.copy()

    def inv_translation(self) -> Self:
        return -self

    def append_translation(self, translation: Self) -> None:
        self._data[:] = self.translate(translation)._data

    def prepend_translation(self, translation: Self) -> None:
        self._data[:] = translation.translate(self)._data

    def set_translation(self, translation: Self) -> None:
        metric.require_compatible(self, translation)
        self._data[:] = translation._data


class Homogeneous:
    """Promotion to, and truncation from, the next arity.

    Mixed into Vec1 .. Vec5 only: Vec6 has nothing to promote into and Vec0
    nothing to demote from.
    """

    __slots__ = ()

    def to_homogeneous(self: Vector) -> Vector:
        """Append a trailing one, keeping the existing components in order."""
        target = _BY_DIM[self.dim() + 1]
        return target._from_array(np.append(self._data, scalar.one(self.dtype)))

    @classmethod
    def from_homogeneous(cls: type[Vector], vector: Vector) -> Vector:
        """Drop the last component. No perspective divide is applied."""
        source = _BY_DIM[cls.dim() + 1]
        if type(vector) is not source:
            raise TypeError(
                f"{cls.__name__}.from_homogeneous expects a {source.__name__}, "
                f"got {type(vector).__name__}"
            )
        return cls._from_array(vector._data[:-1].copy())


class Vec0(Vector, dim=0):
    __slots__ = ()


class Vec1(Homogeneous, Vector, dim=1):
    __slots__ = ()


class Vec2(Homogeneous, Vector, dim=2):
    __slots__ = ()

    def cross(self, other: Vec2) -> Vec1:
        """Signed area of the parallelogram, as a Vec1."""
        metric.require_compatible(self, other)
        with scalar.quiet():
            return Vec1(self.x * other.y - self.y * other.x)


class Vec3(Homogeneous, Vector, dim=3):
    __slots__ = ()

    def cross(self, other: Vec3) -> Vec3:
        metric.require_compatible(self, other)
        (ax, ay, az), (bx, by, bz) = self, other
        with scalar.quiet():
            return Vec3(ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)


class Vec4(Homogeneous, Vector, dim=4):
    __slots__ = ()


class Vec5(Homogeneous, Vector, dim=5):
    __slots__ = ()


class Vec6(Vector, dim=6):
    __slots__ = ()
