from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from beamstat import analyze_beam
from beamstat.examples import combined_load_example
from beamstat.viz import plot_diagrams


def test_plot_diagrams_saves_svg(tmp_path) -> None:
    analysis = analyze_beam(combined_load_example())
    fig = plot_diagrams(analysis, save_path=str(tmp_path / "diagrams.png"), show=False)
    assert len(fig.axes) == 3
    assert (tmp_path / "diagrams.svg").exists()
    plt.close(fig)


def test_plot_diagrams_with_beam_schematic() -> None:
    beam = combined_load_example()
    analysis = analyze_beam(beam)
    fig = plot_diagrams(analysis, beam=beam, show=False, units={"length": "m", "force": "kN"})
    assert len(fig.axes) == 4
    assert fig.axes[1].get_ylabel() == "Force (kN)"
    plt.close(fig)
