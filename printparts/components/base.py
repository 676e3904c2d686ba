"""Base class for printable parts built with pythonopenscad."""

from ..shapes.base import ScadPart


class PrintedPart(ScadPart):
    """A printable part.

    ``build()`` returns the part as installed; ``build_print()`` lays it on
    the build plate (z >= 0) in the orientation it should be printed.
    """

    def build_print(self):
        return self.build()
