"""Dovetail prism for sliding joints.

The same generator produces the male rail and, with clearance added to its
dimensions, the female socket cut from the mating part.
"""

import math

import pythonopenscad as poscad

from .base import ScadPart


class Dovetail(ScadPart):
    """Trapezoidal prism extruded along +Y.

    The profile lies in the XZ plane, centred on x = 0: ``narrow`` wide at
    z = 0 and ``wide`` wide at z = ``height``. The prism spans y in
    [0, ``length``].
    """

    def __init__(self, narrow: float, wide: float, height: float, length: float):
        if min(narrow, wide, height, length) <= 0:
            raise ValueError("dovetail dimensions must be positive")
        if wide <= narrow:
            raise ValueError(
                f"dovetail must flare: wide ({wide}) <= narrow ({narrow})"
            )
        self.narrow = narrow
        self.wide = wide
        self.height = height
        self.length = length

    @property
    def flank_angle(self) -> float:
        """Angle of each flank from vertical, in degrees."""
        return math.degrees(math.atan((self.wide - self.narrow) / 2 / self.height))

    def profile(self):
        n, w, h = self.narrow / 2, self.wide / 2, self.height
        return [[-n, 0], [n, 0], [w, h], [-w, h]]

    def build(self):
        prism = poscad.Polygon(self.profile()).linear_extrude(height=self.length)
        # Profile Y becomes Z; extrusion runs along -Y until shifted back.
        return poscad.Translate([0, self.length, 0])(
            poscad.Rotate([90, 0, 0])(prism)
        )
