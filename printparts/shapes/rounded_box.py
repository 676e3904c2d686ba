"""Box with rounded vertical edges."""

import pythonopenscad as poscad

from ..config import TOL
from .base import ScadPart


class RoundedBox(ScadPart):
    """Box spanning [0, x] x [0, y] x [0, z] with rounded vertical edges.

    A non-positive radius gives a plain cube.
    """

    def __init__(self, size, radius: float = 0.0, fn: int = TOL.fn):
        x, y, z = size
        if radius > min(x, y) / 2:
            raise ValueError(
                f"corner radius {radius} does not fit a {x} x {y} footprint"
            )
        self.size = [x, y, z]
        self.radius = radius
        self.fn = fn

    def corner_centres(self):
        x, y, _ = self.size
        r = self.radius
        return [(r, r), (x - r, r), (r, y - r), (x - r, y - r)]

    def build(self):
        if self.radius <= 0:
            return poscad.Cube(self.size)
        height = self.size[2]
        corners = [
            poscad.Translate([cx, cy, 0])(
                poscad.Cylinder(h=height, r=self.radius, _fn=self.fn)
            )
            for cx, cy in self.corner_centres()
        ]
        return poscad.Hull()(*corners)
