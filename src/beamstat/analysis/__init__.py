from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from beamstat.analysis.deflection import estimate_deflection
from beamstat.analysis.sections import SectionAnalyzer
from beamstat.analysis.settings import AnalysisSettings
from beamstat.analysis.solver import EquilibriumSolver, Reactions, SolverState, solve
from beamstat.core.beam import Beam, BeamType
from beamstat.core.results import Diagram
from beamstat.core.supports import ReactionForces


@dataclass
class BeamAnalysis:
    """Everything a caller needs to draw a beam's diagrams."""
    beam_type: BeamType
    reactions: Dict[float, ReactionForces]
    shear: Diagram
    moment: Diagram
    deflection: Diagram
    max_shear: float
    max_moment: float
    warnings: List[str] = field(default_factory=list)

    def reaction_at(self, position: float) -> ReactionForces:
        if position not in self.reactions:
            raise KeyError(f"reaction for support at x={position} not found")
        return self.reactions[position]


def analyze_beam(beam: Beam, settings: Optional[AnalysisSettings] = None) -> BeamAnalysis:
    """Solve reactions, then generate shear, moment and deflection diagrams."""
    settings = settings if settings is not None else AnalysisSettings()
    settings.validate()

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        solver = EquilibriumSolver(beam, settings)
        reactions = solver.solve()
        analyzer = SectionAnalyzer(beam, reactions, settings)
        shear = analyzer.shear_force_diagram()
        moment = analyzer.bending_moment_diagram()
        deflection = estimate_deflection(
            beam,
            reactions,
            flexural_rigidity=settings.flexural_rigidity,
            points=settings.deflection_points,
        )
        max_shear = analyzer.max_absolute_shear()
        max_moment = analyzer.max_absolute_bending_moment()

    return BeamAnalysis(
        beam_type=solver.beam_type,
        reactions=reactions,
        shear=shear,
        moment=moment,
        deflection=deflection,
        max_shear=max_shear,
        max_moment=max_moment,
        warnings=[str(w.message) for w in caught],
    )


def shear_force_diagram(beam: Beam, sample_count: Optional[int] = None,
                        settings: Optional[AnalysisSettings] = None) -> Diagram:
    reactions = solve(beam, settings)
    return SectionAnalyzer(beam, reactions, settings).shear_force_diagram(sample_count)


def bending_moment_diagram(beam: Beam, sample_count: Optional[int] = None,
                           settings: Optional[AnalysisSettings] = None) -> Diagram:
    reactions = solve(beam, settings)
    return SectionAnalyzer(beam, reactions, settings).bending_moment_diagram(sample_count)


def deflection_diagram(beam: Beam, flexural_rigidity: float = 1.0, points: int = 101) -> Diagram:
    reactions = solve(beam)
    return estimate_deflection(beam, reactions, flexural_rigidity=flexural_rigidity, points=points)


__all__ = [
    "AnalysisSettings",
    "BeamAnalysis",
    "EquilibriumSolver",
    "Reactions",
    "SectionAnalyzer",
    "SolverState",
    "analyze_beam",
    "bending_moment_diagram",
    "deflection_diagram",
    "estimate_deflection",
    "shear_force_diagram",
    "solve",
]
