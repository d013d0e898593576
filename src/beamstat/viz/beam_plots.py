"""
viz - Matplotlib quick-look plots of beam analysis results (read-only).
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Dict, Optional
import os
import matplotlib.pyplot as plt

if TYPE_CHECKING:
    from ..analysis import BeamAnalysis
    from ..core.beam import Beam


def _normalize_svg_path(save_path: str) -> str:
    root, ext = os.path.splitext(save_path)
    if ext.lower() != ".svg":
        return f"{root}.svg"
    return save_path


def _style(ax, title: str, xlabel: str, ylabel: str) -> None:
    ax.set_title(title); ax.set_xlabel(xlabel); ax.set_ylabel(ylabel)
    ax.grid(True, ls=':', alpha=0.6); ax.axhline(0, c='k', lw=0.5)


def plot_supports(ax, beam: Beam, unit: str = "m") -> None:
    L = beam.length
    ax.plot([0, L], [0, 0], color='black', lw=2, zorder=1)
    if beam.supports:
        xs = [s.position for s in beam.supports]
        ax.scatter(xs, [0]*len(xs), marker='^', color='red', s=100, zorder=2)
        for s in beam.supports:
            ax.annotate(s.kind, (s.position, 0), xytext=(0, 12), textcoords='offset points', ha='center')
            ax.annotate(f"{s.position:g} {unit}", (s.position, 0), xytext=(0, -18), textcoords='offset points', ha='center', va='top')
    ax.set_xlim(-L*0.1, L*1.1); ax.set_ylim(-1, 1); ax.axis('off')


def plot_diagrams(analysis: BeamAnalysis, beam: Optional[Beam] = None, save_path=None, show=True,
                  units: Optional[Dict[str, str]] = None):
    """Shear force, bending moment and deflection of an analysis, stacked vertically."""
    u = units or {}
    ul, uf, um, ud = [f" ({u[k]})" if k in u else "" for k in ['length', 'force', 'moment', 'deflection']]
    n_rows = 4 if beam is not None else 3
    fig, axes = plt.subplots(n_rows, 1, figsize=(10, 2.6 * n_rows), sharex=beam is None)
    if beam is not None:
        plot_supports(axes[0], beam, unit=u.get('length', 'm'))
        axes = axes[1:]
    ax1, ax2, ax3 = axes

    ax1.plot(analysis.shear.positions, analysis.shear.values, color="tab:blue")
    ax1.fill_between(analysis.shear.positions, analysis.shear.values, alpha=0.2, color="tab:blue")
    _style(ax1, "Shear Force", f"Position{ul}", f"Force{uf}")
    ax2.plot(analysis.moment.positions, analysis.moment.values, color="tab:green")
    ax2.fill_between(analysis.moment.positions, analysis.moment.values, alpha=0.2, color="tab:green")
    _style(ax2, "Bending Moment", f"Position{ul}", f"Moment{um}")
    ax3.plot(analysis.deflection.positions, analysis.deflection.values, color="tab:red")
    _style(ax3, "Deflection", f"Position{ul}", f"Displacement{ud}")

    plt.tight_layout()
    if save_path:
        save_path = _normalize_svg_path(str(save_path))
        plt.savefig(save_path, bbox_inches='tight', dpi=300)
    if show: plt.show()
    return fig
