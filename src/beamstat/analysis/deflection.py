from __future__ import annotations

import warnings
from typing import Optional

import numpy as np

from ..core.beam import Beam
from ..core.math import gauss_jordan
from ..core.results import Diagram
from ..core.supports import FixedSupport
from .sections import SectionAnalyzer
from .solver import Reactions


def _cumulative_trapezoid(values: np.ndarray, step: float) -> np.ndarray:
    out = np.zeros_like(values)
    out[1:] = np.cumsum((values[:-1] + values[1:]) * step / 2.0)
    return out


def estimate_deflection(
    beam: Beam,
    reactions: Optional[Reactions] = None,
    flexural_rigidity: float = 1.0,
    points: int = 101,
) -> Diagram:
    """
    Approximate deflection curve by double integration of M / EI.

    The bending moment is sampled at `points` evenly spaced positions and
    integrated twice with the trapezoidal rule (slope and deflection both start
    at 0 at x = 0). A linear correction a*x + b then enforces the boundary
    conditions:
        - no supports: raw double integral
        - one support: zero deflection there (a fixed support also gets zero slope)
        - two or more: zero deflection at the first two supports by position

    Deflection is positive upward.
    """
    if flexural_rigidity <= 0.0:
        raise ValueError(f"flexural_rigidity must be positive, got {flexural_rigidity}")
    if points < 2:
        raise ValueError(f"points must be at least 2, got {points}")

    analyzer = SectionAnalyzer(beam, reactions)
    xs = np.linspace(0.0, beam.length, points)
    step = xs[1] - xs[0]
    moments = np.array([analyzer.bending_moment_at(float(x)) for x in xs])
    # Far end approached from the left: a support sitting there would close the diagram.
    moments[-1] = analyzer.bending_moment_at(beam.length - analyzer.settings.epsilon)

    slope = _cumulative_trapezoid(moments, step) / flexural_rigidity
    deflection = _cumulative_trapezoid(slope, step)

    supports = sorted(beam.supports, key=lambda s: s.position)
    if not supports:
        return Diagram("deflection", xs, deflection)

    if len(supports) == 1:
        support = supports[0]
        p = support.position
        a = 0.0
        if isinstance(support, FixedSupport):
            a = -float(np.interp(p, xs, slope))
        b = -float(np.interp(p, xs, deflection)) - a * p
    else:
        if len(supports) > 2:
            warnings.warn(
                f"Deflection correction uses only the first two of {len(supports)} supports; "
                "the curve is not guaranteed to vanish at the others.",
                RuntimeWarning,
            )
        p1, p2 = supports[0].position, supports[1].position
        y1 = float(np.interp(p1, xs, deflection))
        y2 = float(np.interp(p2, xs, deflection))
        a, b = gauss_jordan([[p1, 1.0, -y1], [p2, 1.0, -y2]])

    return Diagram("deflection", xs, deflection + a * xs + b)
