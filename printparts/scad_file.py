"""OpenSCAD source generation for designs, and print-mode discovery.

A design file carries a ``display_mode`` variable, one module per mode and
an if/else dispatch, so a single file yields every printable part when
OpenSCAD is run with ``-D display_mode="<mode>"``.
"""

import logging
import re
from pathlib import Path
from typing import Callable, Dict, List, Union

from .config import SETTINGS

logger = logging.getLogger(__name__)


def to_poscad(part):
    """Return a pythonopenscad object for an anchorscad shape or a built part."""
    import anchorscad as ad

    if isinstance(part, ad.Shape):
        return ad.render(part).rendered_shape
    if hasattr(part, "build"):
        return part.build()
    return part


def _indent(text: str, prefix: str = "  ") -> List[str]:
    return [prefix + line if line.strip() else line for line in text.splitlines()]


def design_source(
    name: str,
    modes: Dict[str, Callable],
    variable: str = SETTINGS.mode_variable,
) -> str:
    """OpenSCAD source for a design; the first mode is the default."""
    names = list(modes)
    lines = [
        f"// {name}: generated by printparts, edit the Python design instead",
        f'{variable} = "{names[0]}"; // [{", ".join(names)}]',
        "",
    ]
    for mode, factory in modes.items():
        logger.debug("Rendering %s/%s", name, mode)
        body = to_poscad(factory()).dumps()
        lines.append(f"module {mode}() {{")
        lines.extend(_indent(body))
        lines.append("}")
        lines.append("")
    for i, mode in enumerate(names):
        keyword = "if" if i == 0 else "else if"
        lines.append(f'{keyword} ({variable} == "{mode}") {mode}();')
    return "\n".join(lines) + "\n"


def write_design(name: str, modes: Dict[str, Callable], build_dir) -> Path:
    """Write ``<build_dir>/<name>.scad`` and return its path."""
    build_dir = Path(build_dir)
    build_dir.mkdir(parents=True, exist_ok=True)
    scad_path = build_dir / f"{name}.scad"
    scad_path.write_text(design_source(name, modes))
    logger.info("Wrote %s", scad_path)
    return scad_path


def print_modes_in(text: str, pattern: str = SETTINGS.mode_pattern) -> List[str]:
    """Distinct print modes mentioned anywhere in OpenSCAD source, sorted."""
    return sorted(set(re.findall(pattern, text)))


def find_print_modes(
    scad_file: Union[str, Path], pattern: str = SETTINGS.mode_pattern
) -> List[str]:
    """Print modes of a .scad file; works for hand-written files too."""
    return print_modes_in(Path(scad_file).read_text(), pattern)
