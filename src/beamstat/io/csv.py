from __future__ import annotations

import csv
from pathlib import Path
from typing import Mapping

from beamstat.core.results import Diagram
from beamstat.core.supports import ReactionForces


def export_reactions(reactions: Mapping[float, ReactionForces], path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["position", "vertical_force", "horizontal_force", "moment"])
        for position in sorted(reactions):
            r = reactions[position]
            writer.writerow([position, r.vertical_force, r.horizontal_force, r.moment])


def export_diagram(diagram: Diagram, path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["position", diagram.kind])
        for point in diagram:
            writer.writerow([point.position, point.value])
