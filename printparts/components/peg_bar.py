"""Fit-test peg bar -- nominal-diameter pegs matching the hole plate."""

import pythonopenscad as poscad

from ..config import FIT_TEST, FitTestDimensions
from ..shapes import Peg
from .base import PrintedPart


class PegBar(PrintedPart):
    """Bar spanning [0, plate_length] x [0, plate_width], pegs pointing up."""

    def __init__(self, dims: FitTestDimensions = FIT_TEST):
        self.dims = dims

    def build(self):
        d = self.dims
        bar = poscad.Cube([d.plate_length, d.plate_width, d.bar_thickness])
        pegs = [
            poscad.Translate([x, d.plate_width / 2, d.bar_thickness])(
                Peg(d.peg_diameter, d.peg_height, d.peg_chamfer, fn=d.tol.fn).build()
            )
            for x in d.positions
        ]
        return poscad.Union()(bar, *pegs)
