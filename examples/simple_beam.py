"""
Simple Beam Example

Pinned-roller beam with an off-centre point load and a partial uniform load.
Prints the reactions and peak internal forces, then saves the diagrams.
"""

from pathlib import Path
from beamstat import Beam, PinnedSupport, RollerSupport, PointLoad, DistributedLoad, analyze_beam
from beamstat.io import export_reactions, export_diagram
from beamstat.viz import plot_diagrams

# Create gallery directory
gallery_dir = Path("gallery")
gallery_dir.mkdir(exist_ok=True)

# 1. Beam and supports (10 m, pinned at 0, roller at 10)
beam = Beam(10.0)
beam.add_support(PinnedSupport(0.0))
beam.add_support(RollerSupport(10.0))

# 2. Loads
beam.add_load(PointLoad(2.0, 100.0))                 # 100 kN at 2 m
beam.add_load(DistributedLoad(4.0, 10.0, 5.0))       # 5 kN/m over [4, 10]

# 3. Solve
result = analyze_beam(beam)

# 4. Results
print("Simple Beam Results:")
for position, r in sorted(result.reactions.items()):
    print(f"  Support at {position:g} m: V = {r.vertical_force:.2f} kN, H = {r.horizontal_force:.2f} kN")
print(f"Max Shear Force: {result.max_shear:.2f} kN")
print(f"Max Bending Moment: {result.max_moment:.2f} kN⋅m")

# 5. Export and visualize
export_reactions(result.reactions, str(gallery_dir / "simple_beam_reactions.csv"))
export_diagram(result.moment, str(gallery_dir / "simple_beam_moment.csv"))
plot_diagrams(
    result,
    beam=beam,
    units={"length": "m", "force": "kN", "moment": "kN⋅m"},
    save_path=str(gallery_dir / "simple_beam.svg"),
)

print(f"\nPlot saved to: {gallery_dir / 'simple_beam.svg'}")
