"""Half-wall ring for lap-jointed lids.

Cut from the top of a box wall it forms the rabbet; added under a lid, with
clearance taken off, it forms the lip that drops into that rabbet.
"""

import pythonopenscad as poscad

from ..config import TOL
from .base import ScadPart
from .rounded_box import RoundedBox


class LapJoint(ScadPart):
    """Ring ``inset`` in from the edge of a ``size`` footprint.

    The ring is ``thickness`` wide and ``height`` tall, starting at z = 0.
    ``radius`` is the corner radius of the footprint; the ring's corners
    follow it concentrically.
    """

    def __init__(
        self,
        size,
        inset: float,
        thickness: float,
        height: float,
        radius: float = 0.0,
        fn: int = TOL.fn,
        epsilon: float = TOL.epsilon,
    ):
        x, y = size
        opening = (x - 2 * (inset + thickness), y - 2 * (inset + thickness))
        if thickness <= 0 or height <= 0:
            raise ValueError("lap joint thickness and height must be positive")
        if min(opening) <= 0:
            raise ValueError(
                f"lap joint ring {inset} + {thickness} closes a {x} x {y} footprint"
            )
        self.size = [x, y]
        self.inset = inset
        self.thickness = thickness
        self.height = height
        self.radius = radius
        self.fn = fn
        self.epsilon = epsilon

    def build(self):
        x, y = self.size
        i = self.inset
        t = self.thickness
        eps = self.epsilon
        outer = RoundedBox(
            [x - 2 * i, y - 2 * i, self.height],
            radius=max(self.radius - i, 0.0),
            fn=self.fn,
        )
        inner = RoundedBox(
            [x - 2 * (i + t), y - 2 * (i + t), self.height + 2 * eps],
            radius=max(self.radius - i - t, 0.0),
            fn=self.fn,
        )
        return poscad.Difference()(
            poscad.Translate([i, i, 0])(outer.build()),
            poscad.Translate([i + t, i + t, -eps])(inner.build()),
        )
