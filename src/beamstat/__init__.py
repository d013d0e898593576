"""
beamstat - Static analysis of 2D determinate beams.

What is covered:
- Beams with point, angled point, distributed (trapezoidal) and moment loads
- Roller, pinned and fixed supports
- Reactions of cantilever and simply supported beams (Gauss-Jordan on the
  equilibrium equations)
- Shear force and bending moment by the method of sections
- Approximate deflection by double integration of M / EI
- JSON / CSV export and matplotlib diagrams

Left out on purpose:
- Statically indeterminate and continuous beams
- 3D frames, dynamics, material nonlinearity
- Unit conversion
"""

from beamstat.analysis import (
    AnalysisSettings,
    BeamAnalysis,
    EquilibriumSolver,
    SectionAnalyzer,
    SolverState,
    analyze_beam,
    bending_moment_diagram,
    deflection_diagram,
    estimate_deflection,
    shear_force_diagram,
    solve,
)
from beamstat.core import (
    AngledPointLoad,
    Beam,
    BeamType,
    Diagram,
    DiagramPoint,
    DistributedLoad,
    FixedSupport,
    MomentLoad,
    PinnedSupport,
    PointLoad,
    ReactionForces,
    RollerSupport,
    classify,
    gauss_jordan,
)
from beamstat.errors import (
    BeamError,
    InvalidGeometry,
    InvalidReactionAssignment,
    UnstableStructure,
    UnsupportedStructure,
)

__all__ = [
    "Beam",
    "BeamType",
    "classify",
    "PointLoad",
    "AngledPointLoad",
    "DistributedLoad",
    "MomentLoad",
    "RollerSupport",
    "PinnedSupport",
    "FixedSupport",
    "ReactionForces",
    "Diagram",
    "DiagramPoint",
    "AnalysisSettings",
    "BeamAnalysis",
    "EquilibriumSolver",
    "SectionAnalyzer",
    "SolverState",
    "analyze_beam",
    "solve",
    "shear_force_diagram",
    "bending_moment_diagram",
    "deflection_diagram",
    "estimate_deflection",
    "gauss_jordan",
    "BeamError",
    "InvalidGeometry",
    "UnstableStructure",
    "UnsupportedStructure",
    "InvalidReactionAssignment",
]
