"""Batch mesh export through the OpenSCAD command line.

One OpenSCAD run per print mode:

    openscad -o <out>/<base>_<mode>.<fmt> -D display_mode="<mode>" <file>

OpenSCAD's own console output is passed through untouched; a failing run
surfaces as OpenScadFailed carrying OpenSCAD's exit status.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .config import SETTINGS
from .scad_file import find_print_modes

logger = logging.getLogger(__name__)


class ExportError(Exception):
    """Base class for export failures."""

    exit_code = 1


class ScadFileNotFound(ExportError):
    def __init__(self, path):
        super().__init__(f"File '{path}' not found")
        self.path = path


class NoPrintModesFound(ExportError):
    def __init__(self, path):
        super().__init__(f"No print_ modes found in '{path}'")
        self.path = path


class UnknownPrintMode(ExportError):
    def __init__(self, path, modes: Sequence[str]):
        super().__init__(f"Mode(s) {', '.join(modes)} not found in '{path}'")
        self.path = path
        self.modes = list(modes)


class UnsupportedFormat(ExportError):
    def __init__(self, fmt: str):
        super().__init__(
            f"Unsupported format '{fmt}' (expected one of: {', '.join(SETTINGS.formats)})"
        )
        self.fmt = fmt


class OpenScadNotFound(ExportError):
    def __init__(self, binary: str):
        super().__init__(f"OpenSCAD not found: '{binary}'")
        self.binary = binary


class OpenScadFailed(ExportError):
    """OpenSCAD exited non-zero; ``exit_code`` is its status."""

    def __init__(self, mode: str, returncode: int):
        super().__init__(f"OpenSCAD failed for mode '{mode}' (exit status {returncode})")
        self.mode = mode
        self.exit_code = returncode


class OpenScadExporter:
    """Exports every print mode of a .scad file to mesh files."""

    def __init__(
        self,
        output_dir: Path,
        fmt: str = SETTINGS.default_format,
        openscad: Optional[str] = None,
        defines: Optional[Dict[str, str]] = None,
    ):
        """Initialize exporter.

        Args:
            output_dir: Directory to write mesh files to
            fmt: Mesh format, one of SETTINGS.formats
            openscad: OpenSCAD binary; defaults to SETTINGS.openscad_bin
            defines: Extra ``-D name=value`` overrides, values as OpenSCAD
                expressions (strings must carry their own quotes)
        """
        fmt = fmt.lower()
        if fmt not in SETTINGS.formats:
            raise UnsupportedFormat(fmt)
        self.output_dir = Path(output_dir)
        self.fmt = fmt
        self.openscad = openscad or SETTINGS.openscad_bin
        self.defines = dict(defines or {})

    def check_openscad(self) -> bool:
        """Check if OpenSCAD is available."""
        try:
            result = subprocess.run(
                [self.openscad, "--version"], capture_output=True, text=True
            )
        except OSError:
            return False
        return result.returncode == 0

    def output_path(self, scad_file: Path, mode: str) -> Path:
        return self.output_dir / f"{Path(scad_file).stem}_{mode}.{self.fmt}"

    def command(self, scad_file: Path, mode: str) -> List[str]:
        cmd = [
            self.openscad,
            "-o", str(self.output_path(scad_file, mode)),
            "-D", f'{SETTINGS.mode_variable}="{mode}"',
        ]
        for name, value in self.defines.items():
            cmd.extend(["-D", f"{name}={value}"])
        cmd.append(str(scad_file))
        return cmd

    def resolve_modes(self, scad_file: Path, modes: Optional[Sequence[str]] = None) -> List[str]:
        """Modes to export: those requested, or every mode in the file."""
        if not scad_file.is_file():
            raise ScadFileNotFound(scad_file)
        available = find_print_modes(scad_file)
        if not available:
            raise NoPrintModesFound(scad_file)
        if not modes:
            return available
        missing = [m for m in modes if m not in available]
        if missing:
            raise UnknownPrintMode(scad_file, missing)
        return list(dict.fromkeys(modes))

    def run_openscad(self, scad_file: Path, mode: str) -> Path:
        """One OpenSCAD invocation; all-or-nothing for this mode."""
        cmd = self.command(scad_file, mode)
        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd)
        except OSError as e:
            raise OpenScadNotFound(self.openscad) from e
        if result.returncode != 0:
            raise OpenScadFailed(mode, result.returncode)
        return self.output_path(scad_file, mode)

    def export(
        self,
        scad_file,
        modes: Optional[Sequence[str]] = None,
        keep_going: bool = False,
    ) -> List[Path]:
        """Export each mode in turn and return the written mesh paths.

        Stops at the first OpenSCAD failure unless ``keep_going``, in which
        case every mode is attempted and the first failure is raised last.
        """
        scad_file = Path(scad_file)
        selected = self.resolve_modes(scad_file, modes)
        if not self.check_openscad():
            raise OpenScadNotFound(self.openscad)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        print(f"Exporting {self.fmt.upper()}s from {scad_file} to {self.output_dir}/")

        written: List[Path] = []
        first_failure: Optional[OpenScadFailed] = None
        for mode in selected:
            print(f"  {self.output_path(scad_file, mode).name}...", flush=True)
            try:
                written.append(self.run_openscad(scad_file, mode))
            except OpenScadFailed as e:
                logger.warning("%s", e)
                if not keep_going:
                    raise
                first_failure = first_failure or e
        if first_failure is not None:
            raise first_failure
        return written
