"""Shared library of small parametric shape generators."""

from .base import ScadPart
from .cutout_grid import CutoutGrid
from .dovetail import Dovetail
from .lap_joint import LapJoint
from .peg import Peg
from .rounded_box import RoundedBox
from .screw_hole import ScrewHole

__all__ = [
    "CutoutGrid",
    "Dovetail",
    "LapJoint",
    "Peg",
    "RoundedBox",
    "ScadPart",
    "ScrewHole",
]
