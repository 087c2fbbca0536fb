from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Tuple

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

RGB = Tuple[int, int, int]


class ValidationError(ValueError):
    """Raised when visualizer inputs are not usable."""


class InvalidModulus(ValidationError):
    """Raised when the modulus is not a positive integer."""


class ParameterRangeError(ValidationError):
    """Raised when a parameter does not fit a signed 64-bit integer."""


class CycleNotFound(RuntimeError):
    """Raised when the engine exceeds its step bound without a repeat."""


class LayoutError(ValueError):
    """Raised when a drawing region cannot host the circular layout."""


class Point2D(NamedTuple):
    x: float
    y: float


def _check_int64(name: str, value: int) -> None:
    if not INT64_MIN <= value <= INT64_MAX:
        raise ParameterRangeError(f"{name} must fit a signed 64-bit integer (got {value})")


@dataclass(frozen=True)
class LcgParameters:
    """Parameters of ``X(n+1) = (multiplier * X(n) + increment) mod modulus``."""

    modulus: int
    multiplier: int
    increment: int
    seed: int

    def __post_init__(self) -> None:
        for name in ("modulus", "multiplier", "increment", "seed"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(f"{name} must be an integer (got {value!r})")
            _check_int64(name, value)
        if self.modulus <= 0:
            raise InvalidModulus("Modulus (m) must be a positive integer.")

    @property
    def normalized_seed(self) -> int:
        # Python's % takes the sign of the divisor, so this lands in [0, modulus).
        return self.seed % self.modulus


@dataclass(frozen=True)
class TrajectoryStep:
    index: int
    value: int


@dataclass(frozen=True)
class CycleResult:
    tail_length: int
    cycle_start: int
    cycle_length: int


@dataclass(frozen=True)
class GenerationResult:
    """Trajectory up to the first repeat together with the detected cycle."""

    params: LcgParameters
    trajectory: Tuple[TrajectoryStep, ...]
    cycle: CycleResult

    @property
    def values(self) -> Tuple[int, ...]:
        return tuple(step.value for step in self.trajectory)

    @property
    def repeat_index(self) -> int:
        """Step at which the repeated value was detected."""
        return len(self.trajectory)

    @property
    def tail_values(self) -> Tuple[int, ...]:
        return self.values[: self.cycle.tail_length]

    @property
    def cycle_values(self) -> Tuple[int, ...]:
        return self.values[self.cycle.tail_length :]
