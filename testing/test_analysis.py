from __future__ import annotations

import pytest

from beamstat import (
    AnalysisSettings,
    Beam,
    BeamType,
    RollerSupport,
    UnstableStructure,
    analyze_beam,
    bending_moment_diagram,
)
from beamstat.examples import (
    cantilever_example,
    combined_load_example,
    distributed_load_example,
    moment_load_example,
    simple_beam_example,
)


def test_analyze_uniform_load() -> None:
    beam = distributed_load_example(length=8.0, load_magnitude=4.0)
    result = analyze_beam(beam)

    assert result.beam_type == BeamType.SIMPLE
    assert result.reaction_at(0.0).vertical_force == pytest.approx(16.0)
    assert result.reaction_at(8.0).vertical_force == pytest.approx(16.0)
    assert result.max_moment == pytest.approx(32.0, abs=1e-3)
    assert result.max_shear == pytest.approx(16.0)
    assert result.shear.kind == "shear"
    assert result.moment.kind == "moment"
    assert result.deflection.kind == "deflection"
    assert len(result.deflection) == AnalysisSettings().deflection_points
    assert result.warnings == []
    with pytest.raises(KeyError):
        result.reaction_at(3.0)


def test_analyze_uses_settings() -> None:
    settings = AnalysisSettings(sample_count=10, deflection_points=11, flexural_rigidity=4.0)
    stiff = analyze_beam(cantilever_example(), settings)
    soft = analyze_beam(cantilever_example())
    assert len(stiff.deflection) == 11
    assert stiff.deflection.at(5.0) == pytest.approx(soft.deflection.at(5.0) / 4.0, rel=1e-2)
    assert stiff.beam_type == BeamType.CANTILEVER


def test_invalid_settings_rejected() -> None:
    with pytest.raises(ValueError):
        analyze_beam(simple_beam_example(), AnalysisSettings(sample_count=0))
    with pytest.raises(ValueError):
        AnalysisSettings(flexural_rigidity=-1.0).validate()


def test_analyze_unstable_beam() -> None:
    beam = Beam(4.0, supports=[RollerSupport(0.0)])
    with pytest.raises(UnstableStructure):
        analyze_beam(beam)


def test_example_beams() -> None:
    simple = analyze_beam(simple_beam_example())
    assert simple.reaction_at(0.0).vertical_force == pytest.approx(5.0)
    assert simple.max_moment == pytest.approx(25.0)

    cantilever = analyze_beam(cantilever_example())
    assert cantilever.reaction_at(0.0).moment == pytest.approx(50.0)
    assert cantilever.max_moment == pytest.approx(50.0)

    moment = analyze_beam(moment_load_example())
    assert moment.reaction_at(0.0).vertical_force == pytest.approx(2.0)
    assert moment.reaction_at(10.0).vertical_force == pytest.approx(-2.0)

    combined = analyze_beam(combined_load_example())
    assert combined.reaction_at(12.0).vertical_force == pytest.approx(206.0 / 12.0)
    assert combined.reaction_at(0.0).vertical_force == pytest.approx(33.0 - 206.0 / 12.0)


def test_examples_return_fresh_beams() -> None:
    first = simple_beam_example()
    analyze_beam(first)
    second = simple_beam_example()
    assert all(not s.is_solved for s in second.supports)


def test_module_level_diagram() -> None:
    diagram = bending_moment_diagram(simple_beam_example(), sample_count=50)
    assert diagram.max == pytest.approx(25.0)
    assert diagram.at(0.0) == pytest.approx(0.0)
