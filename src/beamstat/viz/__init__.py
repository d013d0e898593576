from .beam_plots import plot_diagrams, plot_supports

__all__ = ["plot_diagrams", "plot_supports"]
