"""Through hole with an optional counterbore or countersink."""

from typing import Optional

import pythonopenscad as poscad

from ..config import TOL
from .base import ScadPart


class ScrewHole(ScadPart):
    """Hole along Z over [0, length], head recess at the top.

    The hole is overcut by ``epsilon`` at both ends so it breaks through
    cleanly when subtracted from a part exactly ``length`` thick.
    """

    def __init__(
        self,
        diameter: float,
        length: float,
        head_diameter: Optional[float] = None,
        head_depth: float = 0.0,
        countersink: bool = False,
        fn: int = TOL.fn,
        epsilon: float = TOL.epsilon,
    ):
        if head_diameter is not None:
            if head_diameter <= diameter:
                raise ValueError("screw head must be wider than the shank")
            if not 0 < head_depth < length:
                raise ValueError(
                    f"head depth {head_depth} must lie within hole length {length}"
                )
        self.diameter = diameter
        self.length = length
        self.head_diameter = head_diameter
        self.head_depth = head_depth
        self.countersink = countersink
        self.fn = fn
        self.epsilon = epsilon

    def build(self):
        eps = self.epsilon
        shaft = poscad.Translate([0, 0, -eps])(
            poscad.Cylinder(h=self.length + 2 * eps, r=self.diameter / 2, _fn=self.fn)
        )
        if self.head_diameter is None:
            return shaft
        if self.countersink:
            head = poscad.Cylinder(
                h=self.head_depth + eps,
                r1=self.diameter / 2,
                r2=self.head_diameter / 2,
                _fn=self.fn,
            )
        else:
            head = poscad.Cylinder(
                h=self.head_depth + eps, r=self.head_diameter / 2, _fn=self.fn
            )
        return poscad.Union()(
            shaft,
            poscad.Translate([0, 0, self.length - self.head_depth])(head),
        )
