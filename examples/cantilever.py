"""
Cantilever Beam Example

Beam fixed at x=0 with a point load at the free end and an applied couple.
Demonstrates the fixed-support moment reaction and hogging moments.
"""

from pathlib import Path
from beamstat import Beam, FixedSupport, PointLoad, MomentLoad, analyze_beam, AnalysisSettings
from beamstat.viz import plot_diagrams

gallery_dir = Path("gallery")
gallery_dir.mkdir(exist_ok=True)

L = 5.0
beam = Beam(L)
beam.add_support(FixedSupport(0.0))
beam.add_load(PointLoad(L, 10.0))         # 10 kN downward at the tip
beam.add_load(MomentLoad(2.5, 5.0))       # 5 kN⋅m counter-clockwise at midspan

# EI in kN⋅m² so deflection comes out in metres
settings = AnalysisSettings(flexural_rigidity=8_000.0)
result = analyze_beam(beam, settings)

fixed = result.reaction_at(0.0)
print("Cantilever Beam Results:")
print(f"Vertical reaction: {fixed.vertical_force:.2f} kN")
print(f"Moment reaction:   {fixed.moment:.2f} kN⋅m")
print(f"Moment at x=1 m:   {result.moment.at(1.0):.2f} kN⋅m")
print(f"Tip deflection:    {result.deflection.at(L) * 1000:.3f} mm")

plot_diagrams(result, beam=beam, save_path=str(gallery_dir / "cantilever.svg"), show=False)
print(f"\nPlot saved to: {gallery_dir / 'cantilever.svg'}")
