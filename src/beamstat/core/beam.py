from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Sequence, Union

from ..errors import InvalidGeometry
from .loads import Load
from .supports import Support


class BeamType(str, Enum):
    CANTILEVER = "cantilever"
    SIMPLE = "simple"
    INDETERMINATE = "indeterminate"
    UNSTABLE = "unstable"


def classify(beam_or_supports: Union["Beam", Iterable[Support]]) -> BeamType:
    """
    Classify a support arrangement.

    - CANTILEVER: a single fixed support
    - SIMPLE: exactly one 2-constraint (pinned) and one 1-constraint (roller) support
    - INDETERMINATE: more than 3 constraints in total
    - UNSTABLE: anything else (fewer than 3 constraints, or 3 constraints in a
      non-standard arrangement such as three rollers)

    Read-only: supports are never modified.
    """
    supports = beam_or_supports.supports if isinstance(beam_or_supports, Beam) else tuple(beam_or_supports)
    counts = sorted(s.constraint_count() for s in supports)
    total = sum(counts)

    if counts == [3]:
        return BeamType.CANTILEVER
    if counts == [1, 2]:
        return BeamType.SIMPLE
    if total > 3:
        return BeamType.INDETERMINATE
    return BeamType.UNSTABLE


class Beam:
    """
    Straight beam along x in [0, length] carrying loads and supports.

    Supports occupy unique positions. Every load and support must lie within
    the beam; placement is checked when elements are added and when the length
    changes.
    """

    def __init__(self, length: float, loads: Optional[Sequence[Load]] = None,
                 supports: Optional[Sequence[Support]] = None) -> None:
        self._length = self._validate_length(length)
        self._loads: List[Load] = []
        self._supports: List[Support] = []
        for support in supports or ():
            self.add_support(support)
        for load in loads or ():
            self.add_load(load)

    @staticmethod
    def _validate_length(length: float) -> float:
        length = float(length)
        if not length > 0.0:
            raise InvalidGeometry(f"Beam length must be positive, got {length}")
        return length

    @property
    def length(self) -> float:
        return self._length

    @property
    def loads(self) -> tuple:
        return tuple(self._loads)

    @property
    def supports(self) -> tuple:
        return tuple(self._supports)

    def _check_position(self, position: float, what: str, length: Optional[float] = None) -> None:
        length = self._length if length is None else length
        if position < 0.0 or position > length:
            raise InvalidGeometry(f"{what} position {position} lies outside the beam [0, {length}]")

    def add_support(self, support: Support) -> None:
        self._check_position(support.position, "Support")
        if any(s.position == support.position for s in self._supports):
            raise InvalidGeometry(f"A support already exists at x={support.position}")
        self._supports.append(support)
        self._invalidate()

    def add_load(self, load: Load) -> None:
        for position in load.positions:
            self._check_position(position, "Load")
        self._loads.append(load)
        self._invalidate()

    def remove_support(self, support_or_position: Union[Support, float]) -> Support:
        if isinstance(support_or_position, (int, float)):
            for s in self._supports:
                if s.position == float(support_or_position):
                    self._supports.remove(s)
                    self._invalidate()
                    s.reset_reactions()
                    return s
            raise KeyError(f"no support at x={support_or_position}")
        for i, s in enumerate(self._supports):
            if s is support_or_position:
                self._invalidate()
                return self._supports.pop(i)
        raise KeyError(f"support {support_or_position!r} not found")

    def remove_load(self, load: Load) -> Load:
        for i, existing in enumerate(self._loads):
            if existing is load:
                self._invalidate()
                return self._loads.pop(i)
        raise KeyError(f"load {load!r} not found")

    def support_at(self, position: float) -> Support:
        for s in self._supports:
            if s.position == position:
                return s
        raise KeyError(f"no support at x={position}")

    def change_length(self, length: float) -> None:
        """Change the beam length.

        Rejects the change (beam untouched) if any load or support would end up
        outside the new length.
        """
        length = self._validate_length(length)
        for s in self._supports:
            self._check_position(s.position, "Support", length)
        for load in self._loads:
            for position in load.positions:
                self._check_position(position, "Load", length)
        self._length = length
        self._invalidate()

    def _invalidate(self) -> None:
        # Stored reactions belong to the previous configuration.
        for s in self._supports:
            s.reset_reactions()

    def classify(self) -> BeamType:
        return classify(self._supports)

    def __repr__(self) -> str:
        return f"Beam(length={self._length}, {len(self._loads)} loads, {len(self._supports)} supports)"
