"""Fit-test hole plate.

One hole per trial clearance, stepping up from the nominal diameter. A row
of index dots beside each hole (one dot for the first, two for the second,
...) identifies the step once printed.
"""

import pythonopenscad as poscad

from ..config import FIT_TEST, FitTestDimensions
from ..shapes import ScrewHole
from .base import PrintedPart


class HolePlate(PrintedPart):
    """Plate spanning [0, plate_length] x [0, plate_width] on z = 0."""

    def __init__(self, dims: FitTestDimensions = FIT_TEST):
        self.dims = dims

    def markers(self, index: int, x: float):
        d = self.dims
        eps = d.tol.epsilon
        count = index + 1
        return [
            poscad.Translate([
                x + (j - (count - 1) / 2) * d.marker_spacing,
                d.marker_y,
                d.plate_thickness - d.marker_depth,
            ])(
                poscad.Cylinder(
                    h=d.marker_depth + eps, r=d.marker_diameter / 2, _fn=d.tol.fn
                )
            )
            for j in range(count)
        ]

    def build(self):
        d = self.dims
        plate = poscad.Cube([d.plate_length, d.plate_width, d.plate_thickness])
        cuts = []
        for i, (x, diameter) in enumerate(zip(d.positions, d.hole_diameters)):
            cuts.append(
                poscad.Translate([x, d.plate_width / 2, 0])(
                    ScrewHole(diameter, d.plate_thickness, fn=d.tol.fn).build()
                )
            )
            cuts.extend(self.markers(i, x))
        return poscad.Difference()(plate, *cuts)
