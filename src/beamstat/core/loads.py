from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Optional, Tuple, Union

from ..errors import InvalidGeometry
from .math import EPSILON, trapezoid_resultant

Direction = Literal["upward", "downward"]


def validate_direction(direction: str) -> str:
    if direction not in ("upward", "downward"):
        raise ValueError(f"direction must be 'upward' or 'downward', got '{direction}'")
    return direction


def _direction_sign(direction: str) -> float:
    # Downward loads are positive in the equilibrium sums.
    return 1.0 if direction == "downward" else -1.0


@dataclass(frozen=True)
class PointLoad:
    """Concentrated vertical force."""
    position: float
    magnitude: float
    direction: Direction = "downward"

    def __post_init__(self) -> None:
        validate_direction(self.direction)
        if self.position < 0:
            raise InvalidGeometry(f"Position must be non-negative, got {self.position}")

    @property
    def positions(self) -> Tuple[float, ...]:
        return (self.position,)

    def equivalent_force(self) -> float:
        return _direction_sign(self.direction) * self.magnitude

    def horizontal_force(self) -> float:
        return 0.0

    def equivalent_moment_at(self, ref: float) -> float:
        return self.equivalent_force() * (self.position - ref)

    def shear_contribution_at(self, x: float) -> float:
        if self.position <= x:
            return -self.equivalent_force()
        return 0.0

    def moment_contribution_at(self, x: float) -> float:
        if self.position <= x:
            return -self.equivalent_force() * (x - self.position)
        return 0.0


@dataclass(frozen=True)
class AngledPointLoad:
    """Concentrated force inclined to the beam axis.

    `angle` is in radians, measured clockwise from the +x axis, so pi/2 points
    straight down and 0 pulls along the beam to the right.
    """
    position: float
    magnitude: float
    angle: float

    def __post_init__(self) -> None:
        if self.position < 0:
            raise InvalidGeometry(f"Position must be non-negative, got {self.position}")

    @property
    def positions(self) -> Tuple[float, ...]:
        return (self.position,)

    @property
    def vertical_component(self) -> float:
        return self.magnitude * math.sin(self.angle)

    @property
    def horizontal_component(self) -> float:
        return self.magnitude * math.cos(self.angle)

    def equivalent_force(self) -> float:
        return self.vertical_component

    def horizontal_force(self) -> float:
        return self.horizontal_component

    def equivalent_moment_at(self, ref: float) -> float:
        return self.vertical_component * (self.position - ref)

    def shear_contribution_at(self, x: float) -> float:
        if self.position <= x:
            return -self.vertical_component
        return 0.0

    def moment_contribution_at(self, x: float) -> float:
        if self.position <= x:
            return -self.vertical_component * (x - self.position)
        return 0.0


@dataclass(frozen=True)
class DistributedLoad:
    """
    Linearly varying (trapezoidal) line load over [start_position, end_position].

    Magnitudes are intensities (force per unit length). The load is uniform when
    both ends are equal and triangular when one end is zero.
    """
    start_position: float
    end_position: float
    start_magnitude: float
    end_magnitude: Optional[float] = None
    direction: Direction = "downward"

    def __post_init__(self) -> None:
        if self.end_magnitude is None:
            object.__setattr__(self, "end_magnitude", self.start_magnitude)
        validate_direction(self.direction)
        if self.start_position < 0:
            raise InvalidGeometry(f"start_position must be non-negative, got {self.start_position}")
        if self.end_position <= self.start_position:
            raise InvalidGeometry(
                f"end_position ({self.end_position}) must be greater than start_position ({self.start_position})"
            )

    @property
    def positions(self) -> Tuple[float, ...]:
        return (self.start_position, self.end_position)

    @property
    def span(self) -> float:
        return self.end_position - self.start_position

    @property
    def is_uniform(self) -> bool:
        return self.start_magnitude == self.end_magnitude

    @property
    def is_triangular(self) -> bool:
        return not self.is_uniform and (self.start_magnitude == 0 or self.end_magnitude == 0)

    @property
    def is_trapezoidal(self) -> bool:
        return not self.is_uniform and not self.is_triangular

    @property
    def average_magnitude(self) -> float:
        return (self.start_magnitude + self.end_magnitude) / 2.0

    def magnitude_at(self, x: float) -> float:
        """Intensity at `x` (zero outside the loaded span)."""
        if x < self.start_position or x > self.end_position:
            return 0.0
        ratio = (x - self.start_position) / self.span
        return self.start_magnitude + ratio * (self.end_magnitude - self.start_magnitude)

    def centroid(self) -> float:
        """Position at which the resultant acts."""
        w1, w2 = self.start_magnitude, self.end_magnitude
        midpoint = (self.start_position + self.end_position) / 2.0
        if self.is_uniform:
            return midpoint
        if w1 == 0:
            return self.start_position + self.span * 2.0 / 3.0
        if w2 == 0:
            return self.start_position + self.span / 3.0
        total = w1 + w2
        if abs(total) < EPSILON:
            return midpoint
        return self.start_position + self.span * (w1 + 2.0 * w2) / (3.0 * total)

    def equivalent_force(self) -> float:
        return _direction_sign(self.direction) * self.average_magnitude * self.span

    def horizontal_force(self) -> float:
        return 0.0

    def equivalent_moment_at(self, ref: float) -> float:
        # First moment form: equals resultant * (centroid - ref) and keeps the
        # couple of a self-cancelling (w1 = -w2) load.
        force, first_moment = trapezoid_resultant(
            self.start_position, self.end_position, self.start_magnitude, self.end_magnitude
        )
        return _direction_sign(self.direction) * (first_moment - force * ref)

    def _partial(self, x: float) -> Tuple[float, float]:
        # Signed resultant and first moment of the part of the load left of x.
        if x <= self.start_position:
            return 0.0, 0.0
        x_end = min(x, self.end_position)
        force, first_moment = trapezoid_resultant(
            self.start_position, x_end, self.start_magnitude, self.magnitude_at(x_end)
        )
        sign = _direction_sign(self.direction)
        return sign * force, sign * first_moment

    def shear_contribution_at(self, x: float) -> float:
        force, _ = self._partial(x)
        return -force

    def moment_contribution_at(self, x: float) -> float:
        force, first_moment = self._partial(x)
        return -(force * x - first_moment)


@dataclass(frozen=True)
class MomentLoad:
    """Applied couple; positive magnitude is counter-clockwise."""
    position: float
    magnitude: float

    def __post_init__(self) -> None:
        if self.position < 0:
            raise InvalidGeometry(f"Position must be non-negative, got {self.position}")

    @property
    def positions(self) -> Tuple[float, ...]:
        return (self.position,)

    def equivalent_force(self) -> float:
        return 0.0

    def horizontal_force(self) -> float:
        return 0.0

    def equivalent_moment_at(self, ref: float) -> float:
        # A couple has the same moment about every point (clockwise positive here).
        return -self.magnitude

    def shear_contribution_at(self, x: float) -> float:
        return 0.0

    def moment_contribution_at(self, x: float) -> float:
        if self.position <= x:
            return -self.magnitude
        return 0.0


Load = Union[PointLoad, AngledPointLoad, DistributedLoad, MomentLoad]
