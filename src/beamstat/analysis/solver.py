"""
Equilibrium solver for statically determinate beams.

Sign convention:
    - loads: downward forces, rightward forces and counter-clockwise couples positive
    - reactions: upward, rightward and counter-clockwise positive
    - moments about a point (`equivalent_moment_at`) are clockwise positive

The three equilibrium equations (ΣFx = 0, ΣFy = 0, ΣM = 0) are written as an
augmented matrix and reduced with Gauss-Jordan elimination.
"""

from __future__ import annotations

import warnings
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.beam import Beam, BeamType, classify
from ..core.loads import Load
from ..core.math import EPSILON, gauss_jordan
from ..core.supports import ReactionForces, Support
from ..errors import InvalidGeometry, UnstableStructure, UnsupportedStructure
from .settings import AnalysisSettings

Reactions = Dict[float, ReactionForces]


class SolverState(str, Enum):
    UNSOLVED = "unsolved"
    SOLVABLE = "solvable"
    UNSTABLE = "unstable"
    INDETERMINATE = "indeterminate"
    SOLVED = "solved"


def load_totals(loads: Sequence[Load], ref: float) -> Tuple[float, float, float]:
    """(ΣFx, ΣFy, ΣM about ref) of the applied loads."""
    fx = sum(load.horizontal_force() for load in loads)
    fy = sum(load.equivalent_force() for load in loads)
    m = sum(load.equivalent_moment_at(ref) for load in loads)
    return fx, fy, m


class EquilibriumSolver:
    """
    Compute support reactions of a determinate beam.

    States: UNSOLVED -> check_determinacy() -> SOLVABLE | UNSTABLE | INDETERMINATE
    -> solve() -> SOLVED. Editing the beam clears the reactions stored on its
    supports but not the solver state; call `solve` again after editing.
    """

    def __init__(self, beam: Beam, settings: Optional[AnalysisSettings] = None) -> None:
        self.beam = beam
        self.settings = settings if settings is not None else AnalysisSettings()
        self.settings.validate()
        self.state = SolverState.UNSOLVED
        self.beam_type: Optional[BeamType] = None
        self.reactions: Reactions = {}

    def check_determinacy(self) -> SolverState:
        self.beam_type = classify(self.beam.supports)
        if self.beam_type == BeamType.UNSTABLE:
            self.state = SolverState.UNSTABLE
        elif self.beam_type == BeamType.INDETERMINATE:
            self.state = SolverState.INDETERMINATE
        else:
            self.state = SolverState.SOLVABLE
        return self.state

    def solve(self) -> Reactions:
        """
        Solve the reactions and allocate them onto the beam's supports.

        Returns:
            Mapping of support position -> ReactionForces.

        Raises:
            UnstableStructure: fewer than three usable constraints
            UnsupportedStructure: statically indeterminate support arrangement
        """
        state = self.check_determinacy()
        supports = self.beam.supports
        if state == SolverState.UNSTABLE:
            total = sum(s.constraint_count() for s in supports)
            raise UnstableStructure(
                f"Beam with supports {list(supports)} is unstable ({total} constraints); "
                "need one fixed support or one pinned + one roller support"
            )
        if state == SolverState.INDETERMINATE:
            total = sum(s.constraint_count() for s in supports)
            raise UnsupportedStructure(
                f"Beam is statically indeterminate ({total} constraints > 3); "
                "only cantilever and simple beams are supported"
            )

        if self.beam_type == BeamType.CANTILEVER:
            solved = self._solve_cantilever(supports[0])
        else:
            solved = self._solve_simple(supports)

        # Every reaction is known before any support is touched.
        for support, forces in solved:
            support.allocate_reactions(forces)

        self.reactions = {support.position: support.reactions for support, _ in solved}
        if self.settings.check_equilibrium:
            self._check_equilibrium()
        self.state = SolverState.SOLVED
        return dict(self.reactions)

    def _solve_cantilever(self, fixed: Support) -> List[Tuple[Support, ReactionForces]]:
        fx, fy, m = load_totals(self.beam.loads, fixed.position)
        # Unknowns: (Rh, Rv, M)
        augmented = [
            [1.0, 0.0, 0.0, -fx],
            [0.0, 1.0, 0.0, fy],
            [0.0, 0.0, 1.0, m],
        ]
        rh, rv, mr = gauss_jordan(augmented)
        return [(fixed, ReactionForces(vertical_force=float(rv), horizontal_force=float(rh), moment=float(mr)))]

    def _solve_simple(self, supports: Sequence[Support]) -> List[Tuple[Support, ReactionForces]]:
        pinned = next(s for s in supports if s.constraint_count() == 2)
        roller = next(s for s in supports if s.constraint_count() == 1)
        lever_arm = roller.position - pinned.position
        if abs(lever_arm) < EPSILON:
            raise InvalidGeometry("Pinned and roller supports cannot share a position")

        fx, fy, m = load_totals(self.beam.loads, pinned.position)
        # Unknowns: (Rh_pinned, Rv_pinned, Rv_roller)
        augmented = [
            [1.0, 0.0, 0.0, -fx],
            [0.0, 1.0, 1.0, fy],
            [0.0, 0.0, lever_arm, m],
        ]
        rh, rv_pinned, rv_roller = gauss_jordan(augmented)
        return [
            (pinned, ReactionForces(vertical_force=float(rv_pinned), horizontal_force=float(rh))),
            (roller, ReactionForces(vertical_force=float(rv_roller))),
        ]

    def _check_equilibrium(self) -> None:
        loads = self.beam.loads
        fx, fy, m = load_totals(loads, 0.0)
        rh = sum(r.horizontal_force for r in self.reactions.values())
        rv = sum(r.vertical_force for r in self.reactions.values())
        # Clockwise moment of the reactions about x = 0.
        rm = sum(-r.vertical_force * x - r.moment for x, r in self.reactions.items())

        scale = max(
            1.0,
            sum(abs(load.equivalent_force()) + abs(load.horizontal_force()) for load in loads),
            abs(m) + abs(rm),
        )
        resid = max(abs(fx + rh), abs(rv - fy), abs(m + rm))
        if resid / scale > self.settings.equilibrium_tolerance:
            warnings.warn(
                f"Global equilibrium residual {resid / scale:.2e} exceeds tolerance "
                f"{self.settings.equilibrium_tolerance:.0e}.",
                RuntimeWarning,
            )


def solve(beam: Beam, settings: Optional[AnalysisSettings] = None) -> Reactions:
    """Solve the support reactions of `beam` (see `EquilibriumSolver.solve`)."""
    return EquilibriumSolver(beam, settings).solve()
