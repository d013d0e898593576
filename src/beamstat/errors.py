from __future__ import annotations


class BeamError(Exception):
    """Base class for beam model and analysis errors."""


class InvalidGeometry(BeamError, ValueError):
    """Beam length or element placement is not valid."""


class UnstableStructure(BeamError, RuntimeError):
    """Supports provide fewer constraints than the three equilibrium equations need."""


class UnsupportedStructure(BeamError, RuntimeError):
    """Statically indeterminate structure; only determinate beams can be solved."""


class InvalidReactionAssignment(RuntimeWarning):
    """A reaction component was assigned to a support that cannot provide it."""
