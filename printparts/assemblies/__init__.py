"""Assemblies and the designs they are exported through."""

from . import accessory_mount, enclosure, fit_test, wall_bracket  # noqa: F401
