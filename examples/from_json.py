"""
JSON Round Trip Example

Builds a beam from a plain dict (the same payload a form would post), saves it
to JSON, loads it back and prints the support reactions.
"""

from pathlib import Path
from beamstat import solve, classify
from beamstat.io import beam_from_dict, save_beam, load_beam

gallery_dir = Path("gallery")
gallery_dir.mkdir(exist_ok=True)

payload = {
    "length": 12.0,
    "supports": [
        {"type": "pinned", "position": 2.0},
        {"type": "roller", "position": 10.0},
    ],
    "loads": [
        {"type": "point_load", "position": 0.0, "magnitude": 8.0},
        {"type": "angled_point_load", "position": 6.0, "magnitude": 20.0, "angle": 1.0472},
        {"type": "distributed_load", "start_position": 2.0, "end_position": 10.0,
         "start_magnitude": 0.0, "end_magnitude": 4.0},
        {"type": "moment_load", "position": 12.0, "magnitude": -15.0},
    ],
}

path = gallery_dir / "overhang_beam.json"
save_beam(beam_from_dict(payload), str(path))
beam = load_beam(str(path))

print(f"Beam type: {classify(beam).value}")
for position, r in sorted(solve(beam).items()):
    print(f"  x = {position:5.2f} m  V = {r.vertical_force:8.3f}  H = {r.horizontal_force:8.3f}  M = {r.moment:8.3f}")
