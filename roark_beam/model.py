# BeamSpec, PointLoad (frozen dataclasses)

import math
from dataclasses import dataclass

from .kernel.errors import InvalidConfigurationError, InvalidLoadError


@dataclass(frozen=True)
class BeamSpec:
    """
    Straight prismatic beam along x in [0, L]. Units must be consistent:
    E in force/length², I in length⁴, L in length.
    """
    E: float
    I: float
    L: float

    def __post_init__(self):
        for name in ("E", "I", "L"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InvalidConfigurationError(f"{name} must be positive and finite, got {value}")

    @property
    def EI(self) -> float:
        return self.E * self.I


@dataclass(frozen=True)
class PointLoad:
    """Transverse point load P (positive downward) at distance a from end A."""
    P: float
    a: float

    def check_location(self, L: float) -> None:
        if not (0.0 <= self.a <= L):
            raise InvalidLoadError(self, L)
