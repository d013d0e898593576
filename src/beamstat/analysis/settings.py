from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AnalysisSettings:
    sample_count: int = 100
    epsilon: float = 1e-9
    dedup_tolerance: float = 1e-4
    bisection_tolerance: float = 1e-4
    flexural_rigidity: float = 1.0
    deflection_points: int = 101
    check_equilibrium: bool = True
    equilibrium_tolerance: float = 1e-6

    def validate(self) -> None:
        if self.sample_count < 1:
            raise ValueError("sample_count must be at least 1")
        if self.epsilon <= 0.0:
            raise ValueError("epsilon must be positive")
        if self.dedup_tolerance < 0.0:
            raise ValueError("dedup_tolerance cannot be negative")
        if self.bisection_tolerance <= 0.0:
            raise ValueError("bisection_tolerance must be positive")
        if self.flexural_rigidity <= 0.0:
            raise ValueError("flexural_rigidity must be positive")
        if self.deflection_points < 2:
            raise ValueError("deflection_points must be at least 2")
        if self.equilibrium_tolerance <= 0.0:
            raise ValueError("equilibrium_tolerance must be positive")
