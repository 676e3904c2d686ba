"""Enclosure assembly -- base, PCB on its standoffs, and the lid closed on top.

Supports an `explode` parameter for exploded-view variants.
"""

import pythonopenscad as poscad

from ..components.base import PrintedPart
from ..components.enclosure_base import EnclosureBase
from ..components.enclosure_lid import EnclosureLid
from ..config import ENCLOSURE, EnclosureDimensions
from ..registry import register_design, register_part
from ..scad_file import to_poscad
from ..vitamins.pcb import Pcb


@register_part("enclosure-assembly", part_type="assembly")
class EnclosureAssembly(PrintedPart):
    """Complete enclosure assembly."""

    def __init__(self, dims: EnclosureDimensions = ENCLOSURE, explode: float = 0.0):
        self.dims = dims
        self.explode = explode

    def pcb(self) -> Pcb:
        p = self.dims.pcb
        return Pcb(
            width=p.width,
            depth=p.depth,
            thickness=p.thickness,
            hole_inset=p.hole_inset,
            component_height=p.component_height,
            connector_width=p.connector_width,
            connector_depth=p.connector_depth,
            connector_height=p.connector_height,
        )

    def build(self):
        d = self.dims
        x0, y0 = d.pcb_origin
        # The vitamin is modelled about its centre.
        pcb = poscad.Translate([
            x0 + d.pcb.width / 2,
            y0 + d.pcb.depth / 2,
            d.pcb_z + d.pcb.thickness / 2 + self.explode,
        ])(to_poscad(self.pcb()))
        lid = poscad.Translate([0, 0, d.base_height - d.lip_height + 2 * self.explode])(
            EnclosureLid(d).build()
        )
        return poscad.Union()(EnclosureBase(d).build(), pcb, lid)


@register_part("enclosure-exploded", part_type="assembly")
def enclosure_exploded():
    """Factory for exploded-view variant."""
    return EnclosureAssembly(explode=15.0)


@register_design("enclosure")
def enclosure():
    return {
        "assembly": EnclosureAssembly,
        "print_base": lambda: EnclosureBase().build_print(),
        "print_lid": lambda: EnclosureLid().build_print(),
    }
