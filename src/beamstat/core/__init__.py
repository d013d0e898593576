from .beam import Beam, BeamType, classify
from .loads import AngledPointLoad, DistributedLoad, Load, MomentLoad, PointLoad
from .math import gauss_jordan
from .results import Diagram, DiagramPoint
from .supports import (
    FixedSupport,
    PinnedSupport,
    ReactionForces,
    RollerSupport,
    Support,
    make_support,
)

__all__ = [
    "Beam", "BeamType", "classify",
    "PointLoad", "AngledPointLoad", "DistributedLoad", "MomentLoad", "Load",
    "RollerSupport", "PinnedSupport", "FixedSupport", "Support", "ReactionForces", "make_support",
    "Diagram", "DiagramPoint",
    "gauss_jordan",
]
