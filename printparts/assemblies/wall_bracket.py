"""Wall bracket -- a single printed L-bracket."""

import pythonopenscad as poscad

from ..components.l_bracket import LBracket
from ..registry import register_design
from ..scad_file import to_poscad


def bracket_print():
    """Bracket lying on its base leg; the shape is modelled about the base centre."""
    bracket = LBracket()
    return poscad.Translate([0, 0, bracket.thickness / 2])(to_poscad(bracket))


@register_design("wall_bracket")
def wall_bracket():
    return {
        "print_bracket": bracket_print,
    }
