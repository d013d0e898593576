"""
Ready-made determinate beams for demos and quick checks.

Every builder returns a fresh, unsolved `Beam`.
"""

from __future__ import annotations

from .core.beam import Beam
from .core.loads import DistributedLoad, MomentLoad, PointLoad
from .core.supports import FixedSupport, PinnedSupport, RollerSupport


def _simply_supported(length: float) -> Beam:
    beam = Beam(length)
    beam.add_support(PinnedSupport(0.0))
    beam.add_support(RollerSupport(length))
    return beam


def simple_beam_example(length: float = 10.0, load_magnitude: float = 10.0) -> Beam:
    """Pinned-roller beam with a point load at midspan."""
    beam = _simply_supported(length)
    beam.add_load(PointLoad(length / 2.0, load_magnitude))
    return beam


def cantilever_example(length: float = 5.0, load_magnitude: float = 10.0) -> Beam:
    """Beam fixed at x=0 with a point load at the free end."""
    beam = Beam(length)
    beam.add_support(FixedSupport(0.0))
    beam.add_load(PointLoad(length, load_magnitude))
    return beam


def distributed_load_example(length: float = 10.0, load_magnitude: float = 2.0) -> Beam:
    """Pinned-roller beam with a uniform load over the full span."""
    beam = _simply_supported(length)
    beam.add_load(DistributedLoad(0.0, length, load_magnitude))
    return beam


def moment_load_example(length: float = 10.0, moment_magnitude: float = 20.0) -> Beam:
    """Pinned-roller beam with a counter-clockwise couple at midspan."""
    beam = _simply_supported(length)
    beam.add_load(MomentLoad(length / 2.0, moment_magnitude))
    return beam


def combined_load_example() -> Beam:
    # 12 m span: 10 @ 3, 15 @ 8 and 2/m over [5, 9]
    beam = _simply_supported(12.0)
    beam.add_load(PointLoad(3.0, 10.0))
    beam.add_load(PointLoad(8.0, 15.0))
    beam.add_load(DistributedLoad(5.0, 9.0, 2.0))
    return beam


__all__ = [
    "simple_beam_example",
    "cantilever_example",
    "distributed_load_example",
    "moment_load_example",
    "combined_load_example",
]
