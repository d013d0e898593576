from __future__ import annotations

import csv
import json
import math

import pytest

from beamstat import (
    AngledPointLoad,
    Beam,
    DistributedLoad,
    FixedSupport,
    InvalidGeometry,
    MomentLoad,
    PinnedSupport,
    PointLoad,
    RollerSupport,
    shear_force_diagram,
    solve,
)
from beamstat.io import beam_from_dict, beam_to_dict, export_diagram, export_reactions, load_beam, save_beam
from beamstat.io.json import SCHEMA_VERSION


def _beam() -> Beam:
    beam = Beam(10.0, supports=[PinnedSupport(0.0), RollerSupport(10.0)])
    beam.add_load(PointLoad(2.0, 5.0, direction="upward"))
    beam.add_load(AngledPointLoad(4.0, 10.0, math.pi / 3))
    beam.add_load(DistributedLoad(5.0, 9.0, 1.0, 3.0))
    beam.add_load(MomentLoad(7.0, 12.0))
    return beam


def test_save_and_load_beam(tmp_path) -> None:
    path = tmp_path / "models" / "beam.json"
    original = _beam()
    save_beam(original, str(path))

    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    assert raw["schema"] == SCHEMA_VERSION
    assert [s["type"] for s in raw["supports"]] == ["pinned", "roller"]

    loaded = load_beam(str(path))
    assert loaded.length == 10.0
    assert loaded.loads == original.loads
    assert [type(s) for s in loaded.supports] == [PinnedSupport, RollerSupport]

    expected = solve(original)
    actual = solve(loaded)
    for position, forces in expected.items():
        assert actual[position].as_tuple() == pytest.approx(forces.as_tuple())


def test_beam_from_dict_defaults() -> None:
    beam = beam_from_dict({
        "length": 6,
        "supports": [{"type": "fixed", "position": 0}],
        "loads": [{"type": "distributed_load", "start_position": 0, "end_position": 6, "start_magnitude": 2}],
    })
    assert isinstance(beam.supports[0], FixedSupport)
    load = beam.loads[0]
    assert load.end_magnitude == 2
    assert load.direction == "downward"
    assert beam_to_dict(beam)["loads"][0]["end_magnitude"] == 2


def test_beam_from_dict_errors() -> None:
    with pytest.raises(ValueError):
        beam_from_dict({"supports": []})
    with pytest.raises(ValueError):
        beam_from_dict({"length": 5, "loads": [{"type": "torque", "position": 1}]})
    with pytest.raises(ValueError):
        beam_from_dict({"length": 5, "supports": [{"position": 1}]})
    with pytest.raises(InvalidGeometry):
        beam_from_dict({"length": 5, "supports": [{"type": "roller", "position": 7}]})
    with pytest.raises(InvalidGeometry):
        beam_from_dict({"length": -5})


def test_export_reactions(tmp_path) -> None:
    beam = Beam(10.0, supports=[RollerSupport(10.0), PinnedSupport(0.0)], loads=[PointLoad(2.0, 100.0)])
    path = tmp_path / "reactions.csv"
    export_reactions(solve(beam), str(path))

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["position", "vertical_force", "horizontal_force", "moment"]
    assert [float(r[0]) for r in rows[1:]] == [0.0, 10.0]
    assert float(rows[1][1]) == pytest.approx(80.0)
    assert float(rows[2][1]) == pytest.approx(20.0)


def test_export_diagram(tmp_path) -> None:
    beam = Beam(10.0, supports=[PinnedSupport(0.0), RollerSupport(10.0)], loads=[PointLoad(5.0, 20.0)])
    diagram = shear_force_diagram(beam, sample_count=20)
    path = tmp_path / "shear.csv"
    export_diagram(diagram, str(path))

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["position", "shear"]
    assert len(rows) == len(diagram) + 1
    assert float(rows[1][0]) == 0.0
    assert float(rows[1][1]) == pytest.approx(10.0)
