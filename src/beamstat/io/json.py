from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from beamstat.core.beam import Beam
from beamstat.core.loads import AngledPointLoad, DistributedLoad, Load, MomentLoad, PointLoad
from beamstat.core.supports import Support, make_support

SCHEMA_VERSION = "0.1.0"


def save_beam(beam: Beam, path: str) -> None:
    data = beam_to_dict(beam)
    _write_json(path, data)


def load_beam(path: str) -> Beam:
    data = _read_json(path)
    return beam_from_dict(data)


def beam_to_dict(beam: Beam) -> Dict[str, Any]:
    return {
        "schema": SCHEMA_VERSION,
        "length": beam.length,
        "supports": [_support_to_dict(s) for s in beam.supports],
        "loads": [_load_to_dict(load) for load in beam.loads],
    }


def beam_from_dict(data: Dict[str, Any]) -> Beam:
    """Build a Beam from plain data (e.g. a UI form payload).

    Placement is validated exactly as when elements are added by hand.
    """
    if "length" not in data:
        raise ValueError("invalid beam json: missing length")
    beam = Beam(data["length"])
    supports_raw = data["supports"] if "supports" in data else []
    loads_raw = data["loads"] if "loads" in data else []
    for item in supports_raw:
        beam.add_support(_support_from_dict(item))
    for item in loads_raw:
        beam.add_load(_load_from_dict(item))
    return beam


def _support_to_dict(support: Support) -> Dict[str, Any]:
    return {"type": support.kind, "position": support.position}


def _support_from_dict(item: Dict[str, Any]) -> Support:
    if "type" not in item or "position" not in item:
        raise ValueError("support dict needs 'type' and 'position'")
    return make_support(item["type"], item["position"])


def _load_to_dict(load: Load) -> Dict[str, Any]:
    if isinstance(load, PointLoad):
        return {"type": "point_load", "position": load.position, "magnitude": load.magnitude, "direction": load.direction}
    if isinstance(load, AngledPointLoad):
        return {"type": "angled_point_load", "position": load.position, "magnitude": load.magnitude, "angle": load.angle}
    if isinstance(load, MomentLoad):
        return {"type": "moment_load", "position": load.position, "magnitude": load.magnitude}
    if isinstance(load, DistributedLoad):
        return {
            "type": "distributed_load",
            "start_position": load.start_position,
            "end_position": load.end_position,
            "start_magnitude": load.start_magnitude,
            "end_magnitude": load.end_magnitude,
            "direction": load.direction,
        }
    raise ValueError(f"unknown load type {type(load).__name__}")


def _load_from_dict(item: Dict[str, Any]) -> Load:
    if "type" not in item:
        raise ValueError("load dict missing type")
    direction = item["direction"] if "direction" in item else "downward"
    if item["type"] == "point_load":
        return PointLoad(position=item["position"], magnitude=item["magnitude"], direction=direction)
    if item["type"] == "angled_point_load":
        return AngledPointLoad(position=item["position"], magnitude=item["magnitude"], angle=item["angle"])
    if item["type"] == "moment_load":
        return MomentLoad(position=item["position"], magnitude=item["magnitude"])
    if item["type"] == "distributed_load":
        end_magnitude = item["end_magnitude"] if "end_magnitude" in item else item["start_magnitude"]
        return DistributedLoad(
            start_position=item["start_position"],
            end_position=item["end_position"],
            start_magnitude=item["start_magnitude"],
            end_magnitude=end_magnitude,
            direction=direction,
        )
    raise ValueError(f"unknown load type {item['type']}")


def _write_json(path: str, data: Dict[str, Any]) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _read_json(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
