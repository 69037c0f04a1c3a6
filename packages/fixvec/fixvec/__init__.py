"""fixvec - Fixed-dimension vectors (0 through 6 components) over numpy scalar types."""
from __future__ import annotations

import logging

from fixvec import metric
from fixvec.config import DEFAULT_CONFIG, VecConfig
from fixvec.types import (
    BasisCompletionError,
    ConstructionShortfallError,
    Ordering,
    OutOfRangeError,
    ScalarTypeError,
    Transformable,
)
from fixvec.vector import (
    ComponentSlot,
    Vec0,
    Vec1,
    Vec2,
    Vec3,
    Vec4,
    Vec5,
    Vec6,
    Vector,
    vector_type,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BasisCompletionError",
    "ComponentSlot",
    "ConstructionShortfallError",
    "DEFAULT_CONFIG",
    "Ordering",
    "OutOfRangeError",
    "ScalarTypeError",
    "Transformable",
    "Vec0",
    "Vec1",
    "Vec2",
    "Vec3",
    "Vec4",
    "Vec5",
    "Vec6",
    "VecConfig",
    "Vector",
    "metric",
    "vector_type",
]
