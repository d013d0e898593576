from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Literal, NamedTuple, Tuple
import numpy as np

DiagramKind = Literal["shear", "moment", "deflection"]


class DiagramPoint(NamedTuple):
    position: float
    value: float


@dataclass
class Diagram:
    """
    Ordered (position, value) samples of a shear force, bending moment or
    deflection distribution.

    Positions are non-decreasing; a position may repeat where the diagram
    jumps (values just before and just after a concentrated action).
    """
    kind: DiagramKind
    _x: np.ndarray
    _values: np.ndarray

    def __post_init__(self) -> None:
        self._x = np.asarray(self._x, dtype=float)
        self._values = np.asarray(self._values, dtype=float)
        if self._x.shape != self._values.shape:
            raise ValueError(f"positions and values must match, got {self._x.shape} and {self._values.shape}")

    @classmethod
    def from_points(cls, kind: DiagramKind, points: Iterable[Tuple[float, float]]) -> "Diagram":
        pts = list(points)
        xs = [p[0] for p in pts]
        vs = [p[1] for p in pts]
        return cls(kind, np.array(xs, dtype=float), np.array(vs, dtype=float))

    def __iter__(self):
        return (DiagramPoint(x, v) for x, v in zip(self._x.tolist(), self._values.tolist()))

    def __len__(self) -> int:
        return int(self._x.size)

    def __getitem__(self, idx):
        if isinstance(idx, slice):
            return list(self)[idx]
        return DiagramPoint(float(self._x[idx]), float(self._values[idx]))

    @property
    def points(self) -> List[DiagramPoint]:
        return list(self)

    @property
    def positions(self) -> np.ndarray:
        return self._x.copy()

    @property
    def values(self) -> np.ndarray:
        return self._values.copy()

    @property
    def max(self) -> float:
        return float(np.max(self._values))

    @property
    def min(self) -> float:
        return float(np.min(self._values))

    @property
    def abs_max(self) -> float:
        return float(np.max(np.abs(self._values)))

    def at(self, x_loc: float) -> float:
        """Interpolate the value at a specific position."""
        return float(np.interp(x_loc, self._x, self._values))
