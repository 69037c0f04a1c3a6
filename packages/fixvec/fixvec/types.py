"""Shared types, exceptions and protocols for fixvec."""
from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, Self, runtime_checkable


class Ordering(Enum):
    """Result of a lexicographic partial comparison."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"
    NOT_COMPARABLE = "not_comparable"


class OutOfRangeError(IndexError):
    """Raised by checked component access outside [0, dim)."""

    def __init__(self, index: int, dim: int) -> None:
        self.index = index
        self.dim = dim
        super().__init__(f"index {index} out of range for dimension {dim}")


class ConstructionShortfallError(ValueError):
    """Raised when a source runs out before every component is filled."""

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"expected {expected} components, source yielded {received}"
        )


class ScalarTypeError(TypeError):
    """Raised on unsupported or mismatched scalar types."""


class BasisCompletionError(RuntimeError):
    """Raised when basis completion finds too few independent axes."""


@runtime_checkable
class Transformable(Protocol):
    """Anything that can be translated and rotated."""

    def translate(self, delta: Any) -> Self: ...
    def rotate(self, rotation: Any) -> Self: ...
    def transform(self, delta: Any, rotation: Any) -> Self: ...
