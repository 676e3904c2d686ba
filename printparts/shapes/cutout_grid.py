"""Grid of rectangular or slot-shaped cutouts (vents, weight relief)."""

import math
from typing import List, Tuple

import pythonopenscad as poscad

from ..config import TOL
from .base import ScadPart


class CutoutGrid(ScadPart):
    """``rows`` x ``cols`` cutouts centred on the origin, ``depth`` tall.

    Meant to be subtracted: translate it to the centre of the area it vents.
    With ``rounded`` each cutout is a slot with semicircular ends.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        cutout: Tuple[float, float],
        pitch: Tuple[float, float],
        depth: float,
        rounded: bool = False,
        fn: int = TOL.fn,
    ):
        self.rows = rows
        self.cols = cols
        self.cutout = tuple(cutout)
        self.pitch = tuple(pitch)
        self.depth = depth
        self.rounded = rounded
        self.fn = fn

    @classmethod
    def fit(cls, area, cutout, spacing: float, depth: float, rounded: bool = False):
        """Largest grid of ``cutout`` with ``spacing`` between them inside ``area``."""
        w, h = cutout
        cols = math.floor((area[0] + spacing) / (w + spacing))
        rows = math.floor((area[1] + spacing) / (h + spacing))
        if cols < 1 or rows < 1:
            rows = cols = 0
        return cls(rows, cols, cutout, (w + spacing, h + spacing), depth, rounded)

    def __len__(self):
        return self.rows * self.cols

    @property
    def extent(self) -> Tuple[float, float]:
        """Overall size covered by the cutouts."""
        if not len(self):
            return (0.0, 0.0)
        return (
            (self.cols - 1) * self.pitch[0] + self.cutout[0],
            (self.rows - 1) * self.pitch[1] + self.cutout[1],
        )

    def positions(self) -> List[Tuple[float, float]]:
        """Cutout centres, row by row."""
        px, py = self.pitch
        x0 = (self.cols - 1) / 2
        y0 = (self.rows - 1) / 2
        return [
            ((c - x0) * px, (r - y0) * py)
            for r in range(self.rows)
            for c in range(self.cols)
        ]

    def _cutout(self):
        w, h = self.cutout
        if not self.rounded:
            return poscad.Translate([-w / 2, -h / 2, 0])(
                poscad.Cube([w, h, self.depth])
            )
        r = min(w, h) / 2
        # Slot along the longer side.
        dx = w / 2 - r
        dy = h / 2 - r
        return poscad.Hull()(
            poscad.Translate([-dx, -dy, 0])(
                poscad.Cylinder(h=self.depth, r=r, _fn=self.fn)
            ),
            poscad.Translate([dx, dy, 0])(
                poscad.Cylinder(h=self.depth, r=r, _fn=self.fn)
            ),
        )

    def build(self):
        if not len(self):
            raise ValueError("cutout grid is empty")
        return poscad.Union()(*[
            poscad.Translate([x, y, 0])(self._cutout())
            for x, y in self.positions()
        ])
