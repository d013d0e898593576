from __future__ import annotations

import warnings
from dataclasses import dataclass, field, replace
from typing import ClassVar, Optional, Tuple, Union

from ..errors import InvalidGeometry, InvalidReactionAssignment

SupportKind = str


@dataclass
class ReactionForces:
    """
    Reaction components at a support.

    vertical_force > 0: upward
    horizontal_force > 0: rightward
    moment > 0: counter-clockwise
    """
    vertical_force: float = 0.0
    horizontal_force: float = 0.0
    moment: float = 0.0

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.vertical_force, self.horizontal_force, self.moment)


@dataclass(eq=False)
class _Support:
    position: float
    reactions: Optional[ReactionForces] = field(default=None, repr=False)

    kind: ClassVar[SupportKind] = ""
    # Which of (vertical, horizontal, moment) this support can resist.
    restrains: ClassVar[Tuple[bool, bool, bool]] = (False, False, False)

    def __post_init__(self) -> None:
        self.position = float(self.position)
        if self.position < 0:
            raise InvalidGeometry(f"Position must be non-negative, got {self.position}")

    def constraint_count(self) -> int:
        return sum(self.restrains)

    @property
    def is_solved(self) -> bool:
        return self.reactions is not None

    @property
    def vertical_force(self) -> float:
        return self.reactions.vertical_force if self.reactions is not None else 0.0

    @property
    def horizontal_force(self) -> float:
        return self.reactions.horizontal_force if self.reactions is not None else 0.0

    @property
    def moment(self) -> float:
        return self.reactions.moment if self.reactions is not None else 0.0

    def allocate_reactions(self, forces: ReactionForces) -> None:
        """Overwrite the stored reactions.

        Components the support cannot resist are forced to zero; a non-zero
        value for one of them triggers an `InvalidReactionAssignment` warning.
        """
        self.reactions = self.filter_reactions(forces)

    def filter_reactions(self, forces: ReactionForces) -> ReactionForces:
        _, resists_h, resists_m = self.restrains
        accepted = replace(forces)
        if not resists_h and forces.horizontal_force != 0.0:
            warnings.warn(
                f"{self.kind} support at x={self.position} cannot carry a horizontal reaction "
                f"(got {forces.horizontal_force}); set to 0.",
                InvalidReactionAssignment,
                stacklevel=3,
            )
        if not resists_m and forces.moment != 0.0:
            warnings.warn(
                f"{self.kind} support at x={self.position} cannot carry a moment reaction "
                f"(got {forces.moment}); set to 0.",
                InvalidReactionAssignment,
                stacklevel=3,
            )
        if not resists_h:
            accepted.horizontal_force = 0.0
        if not resists_m:
            accepted.moment = 0.0
        return accepted

    def reset_reactions(self) -> None:
        self.reactions = None

    def _reactions_for(self, reactions: Optional[ReactionForces]) -> ReactionForces:
        r = self.reactions if reactions is None else reactions
        if r is None:
            raise RuntimeError(f"{self!r} has no reactions; solve the beam first")
        return r

    def shear_contribution_at(self, x: float, reactions: Optional[ReactionForces] = None) -> float:
        r = self._reactions_for(reactions)
        if self.position <= x:
            return r.vertical_force
        return 0.0

    def moment_contribution_at(self, x: float, reactions: Optional[ReactionForces] = None) -> float:
        r = self._reactions_for(reactions)
        if self.position <= x:
            # A counter-clockwise reaction couple left of the cut produces hogging.
            return r.vertical_force * (x - self.position) - r.moment
        return 0.0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self.position})"


@dataclass(eq=False, repr=False)
class RollerSupport(_Support):
    kind: ClassVar[SupportKind] = "roller"
    restrains: ClassVar[Tuple[bool, bool, bool]] = (True, False, False)


@dataclass(eq=False, repr=False)
class PinnedSupport(_Support):
    kind: ClassVar[SupportKind] = "pinned"
    restrains: ClassVar[Tuple[bool, bool, bool]] = (True, True, False)


@dataclass(eq=False, repr=False)
class FixedSupport(_Support):
    kind: ClassVar[SupportKind] = "fixed"
    restrains: ClassVar[Tuple[bool, bool, bool]] = (True, True, True)


Support = Union[RollerSupport, PinnedSupport, FixedSupport]

SUPPORT_TYPES = {cls.kind: cls for cls in (RollerSupport, PinnedSupport, FixedSupport)}


def make_support(kind: str, position: float) -> Support:
    """Build a support from its kind name ('roller', 'pinned' or 'fixed')."""
    if kind not in SUPPORT_TYPES:
        raise ValueError(f"support kind must be one of {sorted(SUPPORT_TYPES)}, got '{kind}'")
    return SUPPORT_TYPES[kind](position)
