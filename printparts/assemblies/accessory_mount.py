"""Accessory mount -- clip slid halfway along its dovetail rail."""

import pythonopenscad as poscad

from ..components.accessory_clip import AccessoryClip
from ..components.base import PrintedPart
from ..components.dovetail_rail import DovetailRail
from ..config import MOUNT, AccessoryMountDimensions
from ..registry import register_design, register_part


@register_part("accessory-mount-assembly", part_type="assembly")
class AccessoryMountAssembly(PrintedPart):
    """Complete accessory mount assembly."""

    def __init__(self, dims: AccessoryMountDimensions = MOUNT, explode: float = 0.0):
        self.dims = dims
        self.explode = explode

    def build(self):
        d = self.dims
        return poscad.Union()(
            DovetailRail(d).build(),
            poscad.Translate([0, d.clip_offset, d.rail_thickness + self.explode])(
                AccessoryClip(d).build()
            ),
        )


@register_design("accessory_mount")
def accessory_mount():
    return {
        "assembly": AccessoryMountAssembly,
        "print_rail": lambda: DovetailRail().build_print(),
        "print_clip": lambda: AccessoryClip().build_print(),
    }
