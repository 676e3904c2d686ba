"""Enclosure lid -- plate with a lap-joint lip and a slotted vent grid."""

import pythonopenscad as poscad

from ..config import ENCLOSURE, EnclosureDimensions
from ..shapes import CutoutGrid, LapJoint, RoundedBox
from .base import PrintedPart


class EnclosureLid(PrintedPart):
    """Lid as installed: lip on z = 0 hanging below the plate."""

    def __init__(self, dims: EnclosureDimensions = ENCLOSURE):
        self.dims = dims

    def vents(self) -> CutoutGrid:
        d = self.dims
        return CutoutGrid.fit(
            d.vent_area,
            d.vent_slot,
            d.vent_spacing,
            depth=d.lid_thickness + 2 * d.tol.epsilon,
            rounded=True,
        )

    def build(self):
        d = self.dims
        eps = d.tol.epsilon
        plate = poscad.Translate([0, 0, d.lip_height])(
            RoundedBox(
                [d.outer_width, d.outer_depth, d.lid_thickness],
                radius=d.corner_radius,
                fn=d.tol.fn,
            ).build()
        )
        lip = LapJoint(
            [d.outer_width, d.outer_depth],
            inset=d.lip_inset,
            thickness=d.lip_thickness,
            height=d.lip_height,
            radius=d.corner_radius,
            fn=d.tol.fn,
        ).build()
        lid = poscad.Union()(plate, lip)
        vents = self.vents()
        if not len(vents):
            return lid
        return poscad.Difference()(
            lid,
            poscad.Translate(
                [d.outer_width / 2, d.outer_depth / 2, d.lip_height - eps]
            )(vents.build()),
        )

    def build_print(self):
        # Plate on the bed, lip up.
        d = self.dims
        return poscad.Translate([0, d.outer_depth, d.lip_height + d.lid_thickness])(
            poscad.Rotate([180, 0, 0])(self.build())
        )
