"""Enclosure base -- rounded shell holding the PCB.

Floor with four PCB standoffs, a connector port in the front wall, and a
rabbet around the top of the walls for the lid's lap joint.
"""

import pythonopenscad as poscad

from ..config import ENCLOSURE, EnclosureDimensions
from ..shapes import LapJoint, RoundedBox
from .base import PrintedPart


class EnclosureBase(PrintedPart):
    """Open-top shell spanning [0, outer_width] x [0, outer_depth]."""

    def __init__(self, dims: EnclosureDimensions = ENCLOSURE):
        self.dims = dims

    def shell(self):
        d = self.dims
        eps = d.tol.epsilon
        outer = RoundedBox(
            [d.outer_width, d.outer_depth, d.base_height],
            radius=d.corner_radius,
            fn=d.tol.fn,
        )
        cavity = RoundedBox(
            [d.inner_width, d.inner_depth, d.inner_height + eps],
            radius=d.inner_radius,
            fn=d.tol.fn,
        )
        rabbet = LapJoint(
            [d.outer_width, d.outer_depth],
            inset=d.lap_inset,
            thickness=d.lap_thickness + eps,
            height=d.lap_height + eps,
            radius=d.corner_radius,
            fn=d.tol.fn,
        )
        port = poscad.Cube([d.port_width, d.wall + 2 * eps, d.port_height])
        return poscad.Difference()(
            outer.build(),
            poscad.Translate([d.wall, d.wall, d.floor])(cavity.build()),
            poscad.Translate([0, 0, d.base_height - d.lap_height])(rabbet.build()),
            poscad.Translate(
                [(d.outer_width - d.port_width) / 2, -eps, d.port_z]
            )(port),
        )

    def build(self):
        d = self.dims
        eps = d.tol.epsilon
        standoffs = [
            poscad.Translate([x, y, d.floor - eps])(
                poscad.Cylinder(
                    h=d.standoff_height + eps, r=d.standoff_diameter / 2, _fn=d.tol.fn
                )
            )
            for x, y in d.standoff_positions
        ]
        pilots = [
            poscad.Translate([x, y, d.floor])(
                poscad.Cylinder(
                    h=d.standoff_height + eps,
                    r=d.standoff_hole_diameter / 2,
                    _fn=d.tol.fn,
                )
            )
            for x, y in d.standoff_positions
        ]
        return poscad.Difference()(
            poscad.Union()(self.shell(), *standoffs),
            *pilots,
        )
