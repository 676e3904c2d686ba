"""Cylindrical peg with an optional lead-in chamfer."""

import pythonopenscad as poscad

from ..config import TOL
from .base import ScadPart


class Peg(ScadPart):
    """A peg standing on z = 0."""

    def __init__(self, diameter: float, height: float, chamfer: float = 0.0,
                 fn: int = TOL.fn):
        if chamfer < 0 or chamfer >= min(diameter / 2, height):
            raise ValueError(f"chamfer {chamfer} does not fit the peg")
        self.diameter = diameter
        self.height = height
        self.chamfer = chamfer
        self.fn = fn

    def build(self):
        r = self.diameter / 2
        if not self.chamfer:
            return poscad.Cylinder(h=self.height, r=r, _fn=self.fn)
        c = self.chamfer
        return poscad.Union()(
            poscad.Cylinder(h=self.height - c, r=r, _fn=self.fn),
            poscad.Translate([0, 0, self.height - c])(
                poscad.Cylinder(h=c, r1=r, r2=r - c, _fn=self.fn)
            ),
        )
