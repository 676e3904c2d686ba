"""Parametric 3D-printable parts described in Python and exported via OpenSCAD."""

__version__ = "0.1.0"
