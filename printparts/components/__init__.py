"""Auto-register all component modules."""

from ..registry import auto_register_module
from . import (
    accessory_clip,
    dovetail_rail,
    enclosure_base,
    enclosure_lid,
    hole_plate,
    l_bracket,
    peg_bar,
)

auto_register_module(accessory_clip)
auto_register_module(dovetail_rail)
auto_register_module(enclosure_base)
auto_register_module(enclosure_lid)
auto_register_module(hole_plate)
auto_register_module(l_bracket)
auto_register_module(peg_bar)
