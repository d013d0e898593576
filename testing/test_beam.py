from __future__ import annotations

import pytest

from beamstat import (
    Beam,
    BeamType,
    DistributedLoad,
    FixedSupport,
    InvalidGeometry,
    PinnedSupport,
    PointLoad,
    RollerSupport,
    classify,
    solve,
)


def test_length_must_be_positive() -> None:
    with pytest.raises(InvalidGeometry):
        Beam(-1.0)
    with pytest.raises(InvalidGeometry):
        Beam(0.0)


def test_elements_must_lie_on_beam() -> None:
    beam = Beam(10.0)
    with pytest.raises(InvalidGeometry):
        beam.add_support(RollerSupport(10.5))
    with pytest.raises(InvalidGeometry):
        beam.add_load(PointLoad(11.0, 1.0))
    with pytest.raises(InvalidGeometry):
        beam.add_load(DistributedLoad(5.0, 12.0, 1.0))
    assert beam.supports == ()
    assert beam.loads == ()


def test_duplicate_support_position_rejected() -> None:
    beam = Beam(10.0)
    beam.add_support(PinnedSupport(0.0))
    with pytest.raises(InvalidGeometry):
        beam.add_support(RollerSupport(0.0))
    assert len(beam.supports) == 1


def test_constructor_accepts_elements() -> None:
    beam = Beam(6.0, loads=[PointLoad(3.0, 2.0)], supports=[PinnedSupport(0.0), RollerSupport(6.0)])
    assert len(beam.loads) == 1
    assert [s.position for s in beam.supports] == [0.0, 6.0]


def test_remove_elements() -> None:
    load = PointLoad(3.0, 2.0)
    same_values = PointLoad(3.0, 2.0)
    beam = Beam(6.0, loads=[load, same_values], supports=[PinnedSupport(0.0), RollerSupport(6.0)])

    assert beam.remove_load(load) is load
    assert beam.loads == (same_values,)
    with pytest.raises(KeyError):
        beam.remove_load(load)

    removed = beam.remove_support(6.0)
    assert isinstance(removed, RollerSupport)
    with pytest.raises(KeyError):
        beam.remove_support(6.0)
    beam.remove_support(beam.support_at(0.0))
    assert beam.supports == ()


def test_change_length_rejects_stranded_elements() -> None:
    beam = Beam(10.0, loads=[PointLoad(8.0, 1.0)], supports=[FixedSupport(0.0)])
    with pytest.raises(InvalidGeometry):
        beam.change_length(5.0)
    assert beam.length == 10.0

    beam.change_length(8.0)
    assert beam.length == 8.0
    beam.change_length(12.0)
    assert beam.length == 12.0


@pytest.mark.parametrize(
    "supports, expected",
    [
        ([FixedSupport(0.0)], BeamType.CANTILEVER),
        ([FixedSupport(10.0)], BeamType.CANTILEVER),
        ([PinnedSupport(0.0), RollerSupport(10.0)], BeamType.SIMPLE),
        ([RollerSupport(0.0), PinnedSupport(10.0)], BeamType.SIMPLE),
        ([], BeamType.UNSTABLE),
        ([RollerSupport(0.0)], BeamType.UNSTABLE),
        ([PinnedSupport(0.0)], BeamType.UNSTABLE),
        ([RollerSupport(0.0), RollerSupport(10.0)], BeamType.UNSTABLE),
        ([RollerSupport(0.0), RollerSupport(5.0), RollerSupport(10.0)], BeamType.UNSTABLE),
        ([PinnedSupport(0.0), PinnedSupport(10.0)], BeamType.INDETERMINATE),
        ([FixedSupport(0.0), RollerSupport(10.0)], BeamType.INDETERMINATE),
        ([PinnedSupport(0.0), RollerSupport(5.0), RollerSupport(10.0)], BeamType.INDETERMINATE),
    ],
)
def test_classify(supports, expected) -> None:
    beam = Beam(10.0, supports=supports)
    assert classify(beam) == expected
    assert beam.classify() == expected


def test_classify_is_pure() -> None:
    beam = Beam(10.0, supports=[PinnedSupport(0.0), RollerSupport(10.0)])
    first = classify(beam)
    second = classify(beam.supports)
    assert first == second == BeamType.SIMPLE
    assert all(not s.is_solved for s in beam.supports)


def _solved_simple() -> Beam:
    beam = Beam(10.0, supports=[PinnedSupport(0.0), RollerSupport(10.0)], loads=[PointLoad(5.0, 20.0)])
    solve(beam)
    assert all(s.is_solved for s in beam.supports)
    return beam


def test_every_edit_clears_stored_reactions() -> None:
    beam = _solved_simple()
    beam.add_load(PointLoad(5.0, 20.0))
    assert all(not s.is_solved for s in beam.supports)

    beam = _solved_simple()
    beam.remove_load(beam.loads[0])
    assert all(not s.is_solved for s in beam.supports)

    beam = _solved_simple()
    beam.change_length(12.0)
    assert all(not s.is_solved for s in beam.supports)

    beam = _solved_simple()
    beam.add_support(RollerSupport(5.0))
    assert all(not s.is_solved for s in beam.supports)

    beam = _solved_simple()
    removed = beam.remove_support(10.0)
    assert not removed.is_solved
    assert not beam.supports[0].is_solved


def test_rejected_edit_keeps_reactions() -> None:
    beam = _solved_simple()
    with pytest.raises(InvalidGeometry):
        beam.change_length(4.0)
    with pytest.raises(InvalidGeometry):
        beam.add_load(PointLoad(11.0, 1.0))
    assert all(s.is_solved for s in beam.supports)
