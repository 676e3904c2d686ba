"""Part and design auto-discovery and registration.

Follows the AnchorSCAD registry pattern:
- _PART_REGISTRY stores name -> (factory, part_type) tuples
- register_part() decorator for manual registration
- auto_register_module() for scanning modules
- _DESIGN_REGISTRY stores design name -> display modes
- list_parts() outputs JSON-compatible part and design metadata

A design is what gets exported: an ordered mapping of display mode name to
a part factory. ``assembly`` shows everything in place; each ``print_<part>``
mode lays one printable part on the build plate.
"""

import inspect
import logging
import re
from typing import Callable, Dict, List

from .config import SETTINGS

logger = logging.getLogger(__name__)

_PART_REGISTRY: Dict[str, tuple[Callable, str]] = {}
_DESIGN_REGISTRY: Dict[str, Callable[[], Dict[str, Callable]]] = {}

ASSEMBLY_MODE = "assembly"


def camel_to_snake(name: str) -> str:
    """Convert CamelCase to kebab-case."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1-\2", name)
    return re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", s1).lower()


def register_part(name: str, part_type: str = "component"):
    """Decorator to register a part factory with its type."""
    def decorator(cls):
        _PART_REGISTRY[name] = (cls, part_type)
        return cls
    return decorator


def auto_register_module(module, part_type: str = "component"):
    """Scan a module for shape classes and register those with no required args."""
    for attr_name in dir(module):
        obj = getattr(module, attr_name)
        if not inspect.isclass(obj):
            continue
        if getattr(obj, "__module__", None) != module.__name__:
            continue
        # Check if instantiable with no required args
        try:
            sig = inspect.signature(obj.__init__)
            required = [
                p for p in sig.parameters.values()
                if p.name != "self"
                and p.default is inspect.Parameter.empty
                and p.kind not in (p.VAR_POSITIONAL, p.VAR_KEYWORD)
            ]
            if required:
                continue
        except (ValueError, TypeError):
            continue

        name = camel_to_snake(attr_name)
        if name not in _PART_REGISTRY:
            _PART_REGISTRY[name] = (obj, part_type)


def validate_modes(design: str, modes: Dict[str, Callable]) -> None:
    """Raise ValueError unless every mode name is exportable."""
    if not modes:
        raise ValueError(f"design '{design}' has no display modes")
    for mode in modes:
        if mode != ASSEMBLY_MODE and not re.fullmatch(SETTINGS.mode_pattern, mode):
            raise ValueError(
                f"design '{design}': mode '{mode}' must be '{ASSEMBLY_MODE}' "
                f"or match {SETTINGS.mode_pattern}"
            )
    if not any(mode != ASSEMBLY_MODE for mode in modes):
        raise ValueError(f"design '{design}' has no print_ modes")


def register_design(name: str):
    """Decorator to register a factory returning a design's display modes."""
    def decorator(func):
        _DESIGN_REGISTRY[name] = func
        return func
    return decorator


def _discover():
    # Trigger auto-discovery by importing all packages
    from . import vitamins    # noqa: F401
    from . import components  # noqa: F401
    from . import assemblies  # noqa: F401


def get_registry() -> Dict[str, tuple[Callable, str]]:
    """Return the full part registry."""
    _discover()
    return dict(_PART_REGISTRY)


def get_designs() -> Dict[str, Callable[[], Dict[str, Callable]]]:
    """Return the design registry."""
    _discover()
    return dict(_DESIGN_REGISTRY)


def design_modes(name: str) -> Dict[str, Callable]:
    """Display modes of one design, validated."""
    designs = get_designs()
    if name not in designs:
        raise KeyError(name)
    modes = designs[name]()
    validate_modes(name, modes)
    logger.debug("Design %s modes: %s", name, ", ".join(modes))
    return modes


def list_parts() -> List[dict]:
    """Return JSON-serializable list of registered parts and designs."""
    registry = get_registry()
    parts = [
        {"name": name, "type": ptype, "stl": ptype == "component"}
        for name, (factory, ptype) in sorted(registry.items())
    ]
    designs = [
        {"name": name, "type": "design", "modes": list(design_modes(name))}
        for name in sorted(get_designs())
    ]
    return parts + designs
