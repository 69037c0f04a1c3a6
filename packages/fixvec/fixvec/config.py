"""Numeric tolerance configuration."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VecConfig:
    """Immutable tolerances used by approximate comparison and basis completion.

    Attributes:
        float_epsilon: Default absolute tolerance of approx_eq for float vectors.
        basis_tolerance_ulps: Basis completion skips a candidate axis whose
            residual norm is at most this many machine epsilons of the dtype.
    """

    float_epsilon: float = 1.0e-6
    basis_tolerance_ulps: float = 1000.0

    def __post_init__(self) -> None:
        if self.float_epsilon < 0.0:
            raise ValueError(f"float_epsilon must be >= 0, got {self.float_epsilon}")
        if self.basis_tolerance_ulps <= 0.0:
            raise ValueError(
                f"basis_tolerance_ulps must be > 0, got {self.basis_tolerance_ulps}"
            )


DEFAULT_CONFIG = VecConfig()
