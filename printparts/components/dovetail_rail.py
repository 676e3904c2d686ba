"""Dovetail rail -- screwed to a surface, the accessory clip slides onto it.

Base plate with a dovetail running its full length and two counterbored
mounting screws through the dovetail.
"""

import pythonopenscad as poscad

from ..config import MOUNT, AccessoryMountDimensions
from ..shapes import Dovetail, ScrewHole
from .base import PrintedPart


class DovetailRail(PrintedPart):
    """Rail centred on x = 0, running along +Y, base plate on z = 0."""

    def __init__(self, dims: AccessoryMountDimensions = MOUNT):
        self.dims = dims

    def build(self):
        d = self.dims
        plate = poscad.Translate([-d.rail_width / 2, 0, 0])(
            poscad.Cube([d.rail_width, d.rail_length, d.rail_thickness])
        )
        tail = poscad.Translate([0, 0, d.rail_thickness])(
            Dovetail(
                d.dovetail_narrow, d.dovetail_wide, d.dovetail_height, d.rail_length
            ).build()
        )
        screws = [
            poscad.Translate([0, y, 0])(
                ScrewHole(
                    d.screw_diameter,
                    d.rail_height,
                    head_diameter=d.screw_head_diameter,
                    head_depth=d.screw_head_depth,
                    fn=d.tol.fn,
                ).build()
            )
            for y in d.screw_positions
        ]
        return poscad.Difference()(poscad.Union()(plate, tail), *screws)
