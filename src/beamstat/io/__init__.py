from beamstat.io.json import beam_from_dict, beam_to_dict, load_beam, save_beam
from beamstat.io.csv import export_diagram, export_reactions

__all__ = [
    "beam_to_dict",
    "beam_from_dict",
    "save_beam",
    "load_beam",
    "export_reactions",
    "export_diagram",
]
