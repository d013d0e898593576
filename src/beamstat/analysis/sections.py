"""
Internal forces by the method of sections.

Everything at or to the left of the cut is summed:
    V(x) = Σ upward forces - Σ downward forces
    M(x) = sagging-positive moment of those actions about the cut
"""

from __future__ import annotations

import math
from typing import List, Optional

from ..core.beam import Beam
from ..core.results import Diagram, DiagramKind
from .settings import AnalysisSettings
from .solver import Reactions


class SectionAnalyzer:
    """
    Shear force and bending moment of a solved beam.

    Args:
        beam: The beam (loads and supports).
        reactions: Reactions by support position, as returned by `solve`. When
            omitted the reactions stored on the supports are used.
        settings: Sampling configuration.
    """

    def __init__(self, beam: Beam, reactions: Optional[Reactions] = None,
                 settings: Optional[AnalysisSettings] = None) -> None:
        self.beam = beam
        self.settings = settings if settings is not None else AnalysisSettings()
        self.settings.validate()
        if reactions is None:
            unsolved = [s for s in beam.supports if not s.is_solved]
            if unsolved:
                raise RuntimeError(f"supports {unsolved} have no reactions; solve the beam first")
            reactions = {s.position: s.reactions for s in beam.supports}
        missing = [s.position for s in beam.supports if s.position not in reactions]
        if missing:
            raise ValueError(f"no reactions given for supports at {missing}")
        self.reactions = reactions

    def shear_force_at(self, x: float) -> float:
        v = 0.0
        for support in self.beam.supports:
            v += support.shear_contribution_at(x, self.reactions[support.position])
        for load in self.beam.loads:
            v += load.shear_contribution_at(x)
        return v

    def bending_moment_at(self, x: float) -> float:
        m = 0.0
        for support in self.beam.supports:
            m += support.moment_contribution_at(x, self.reactions[support.position])
        for load in self.beam.loads:
            m += load.moment_contribution_at(x)
        return m

    def critical_positions(self) -> List[float]:
        """Beam ends, support positions and load positions, sorted."""
        points = {0.0, self.beam.length}
        points.update(s.position for s in self.beam.supports)
        for load in self.beam.loads:
            points.update(float(p) for p in load.positions)
        return sorted(points)

    def sample_positions(self, sample_count: Optional[int] = None) -> List[float]:
        n = self.settings.sample_count if sample_count is None else int(sample_count)
        if n < 1:
            raise ValueError("sample_count must be at least 1")
        length = self.beam.length
        eps = self.settings.epsilon
        tol = self.settings.dedup_tolerance
        critical = self.critical_positions()

        # Values just before and after each critical point capture the jumps.
        positions = set()
        for p in critical:
            if p > 0.0:
                positions.add(max(0.0, p - eps))
            positions.add(p)
            if p < length:
                positions.add(min(length, p + eps))

        regular = []
        for start, end in zip(critical[:-1], critical[1:]):
            seg = end - start
            count = max(2, math.ceil(seg / length * n))
            for j in range(1, count - 1):
                regular.append(start + seg * j / (count - 1))

        taken = sorted(positions)
        for x in regular:
            if all(abs(x - t) >= tol for t in taken):
                taken.append(x)
        return sorted(taken)

    def generate_distribution(self, kind: DiagramKind, sample_count: Optional[int] = None) -> Diagram:
        if kind == "shear":
            fn = self.shear_force_at
        elif kind == "moment":
            fn = self.bending_moment_at
        else:
            raise ValueError(f"kind must be 'shear' or 'moment', got '{kind}'")
        xs = self.sample_positions(sample_count)
        return Diagram.from_points(kind, ((x, fn(x)) for x in xs))

    def shear_force_diagram(self, sample_count: Optional[int] = None) -> Diagram:
        return self.generate_distribution("shear", sample_count)

    def bending_moment_diagram(self, sample_count: Optional[int] = None) -> Diagram:
        return self.generate_distribution("moment", sample_count)

    def max_absolute_shear(self) -> float:
        length = self.beam.length
        eps = self.settings.epsilon
        best = 0.0
        for p in self.critical_positions():
            best = max(best, abs(self.shear_force_at(p)))
            if p > 0.0:
                best = max(best, abs(self.shear_force_at(p - eps)))
            if p < length:
                best = max(best, abs(self.shear_force_at(p + eps)))
        return best

    def max_absolute_bending_moment(self) -> float:
        """Largest |M| at critical points and at shear zero crossings between them."""
        eps = self.settings.epsilon
        critical = self.critical_positions()
        best = 0.0
        for p in critical:
            best = max(best, abs(self.bending_moment_at(p)))
            if p > 0.0:
                best = max(best, abs(self.bending_moment_at(p - eps)))

        for start, end in zip(critical[:-1], critical[1:]):
            a, b = start + eps, end - eps
            if b <= a:
                continue
            va, vb = self.shear_force_at(a), self.shear_force_at(b)
            if va * vb < 0.0:
                x0 = self.find_zero_shear(a, b)
                best = max(best, abs(self.bending_moment_at(x0)))
        return best

    def find_zero_shear(self, start: float, end: float, tolerance: Optional[float] = None) -> float:
        """Bisect for V(x) = 0 inside [start, end] (V must change sign there)."""
        tol = self.settings.bisection_tolerance if tolerance is None else tolerance
        left, right = start, end
        v_left = self.shear_force_at(left)
        while right - left > tol:
            mid = (left + right) / 2.0
            v_mid = self.shear_force_at(mid)
            if abs(v_mid) < tol:
                return mid
            if v_mid * v_left > 0.0:
                left, v_left = mid, v_mid
            else:
                right = mid
        return (left + right) / 2.0
