"""Accessory clip -- block with a dovetail socket that slides onto the rail.

The socket is the rail's dovetail grown by the sliding clearance. A through
hole in the roof takes the accessory's 1/4"-20 screw.
"""

import pythonopenscad as poscad

from ..config import MOUNT, AccessoryMountDimensions
from ..shapes import Dovetail, ScrewHole
from .base import PrintedPart


class AccessoryClip(PrintedPart):
    """Clip centred on x = 0, socket opening on z = 0, running along +Y."""

    def __init__(self, dims: AccessoryMountDimensions = MOUNT):
        self.dims = dims

    def build(self):
        d = self.dims
        eps = d.tol.epsilon
        block = poscad.Translate([-d.clip_width / 2, 0, 0])(
            poscad.Cube([d.clip_width, d.clip_length, d.clip_height])
        )
        socket = poscad.Translate([0, -eps, -eps])(
            Dovetail(
                d.socket_narrow,
                d.socket_width_at(d.socket_height + eps),
                d.socket_height + eps,
                d.clip_length + 2 * eps,
            ).build()
        )
        mount_hole = poscad.Translate([0, d.clip_length / 2, d.socket_height])(
            ScrewHole(d.accessory_hole_diameter, d.clip_roof, fn=d.tol.fn).build()
        )
        return poscad.Difference()(block, socket, mount_hole)

    def build_print(self):
        # Roof down so the socket needs no support.
        d = self.dims
        return poscad.Translate([0, d.clip_length, d.clip_height])(
            poscad.Rotate([180, 0, 0])(self.build())
        )
