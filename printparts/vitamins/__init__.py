"""Auto-register all vitamin modules."""

from ..registry import auto_register_module
from . import pcb

auto_register_module(pcb, part_type="vitamin")
