"""CLI entry point for printparts.

Usage:
    python -m printparts list                         Output JSON registry of parts and designs
    python -m printparts render [NAME ...]            Write .scad files for designs
    python -m printparts modes SCAD_FILE              List the print_ modes of a .scad file
    python -m printparts export SCAD_FILE OUTPUT_DIR  Export a mesh per print_ mode
    python -m printparts build [NAME ...]             Render and export every design
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import SETTINGS
from .exporter import ExportError, OpenScadExporter, OpenScadFailed
from .logging_config import setup_logging
from .scad_file import find_print_modes


def parse_define(text: str):
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got '{text}'")
    return name, value


def selected_designs(names):
    """Design names to act on; all of them when none are given."""
    from .registry import get_designs

    designs = get_designs()
    unknown = [n for n in names if n not in designs]
    if unknown:
        raise KeyError(", ".join(unknown))
    return names or sorted(designs)


def render_designs(names, build_dir: Path):
    """Render designs to SCAD files."""
    from .registry import design_modes
    from .scad_file import write_design

    paths = []
    for name in names:
        try:
            scad_path = write_design(name, design_modes(name), build_dir)
        except Exception as e:
            print(f"Failed to render {name}: {e}", file=sys.stderr)
            raise
        print(f"Rendered: {scad_path}")
        paths.append(scad_path)
    return paths


def export_file(scad_file: Path, output_dir: Path, args) -> None:
    exporter = OpenScadExporter(
        output_dir,
        fmt=args.format,
        openscad=args.openscad,
        defines=dict(args.define or []),
    )
    exporter.export(scad_file, modes=args.mode, keep_going=args.keep_going)


def cmd_list(args) -> int:
    from .registry import list_parts

    print(json.dumps(list_parts(), indent=2))
    return 0


def cmd_render(args) -> int:
    try:
        names = selected_designs(args.names)
    except KeyError as e:
        print(f"Error: Unknown design(s): {e.args[0]}", file=sys.stderr)
        return 1
    render_designs(names, args.build_dir)
    return 0


def cmd_modes(args) -> int:
    if not args.scad_file.is_file():
        print(f"Error: File '{args.scad_file}' not found", file=sys.stderr)
        return 1
    modes = find_print_modes(args.scad_file)
    if not modes:
        print(f"Error: No print_ modes found in '{args.scad_file}'", file=sys.stderr)
        return 1
    for mode in modes:
        print(mode)
    return 0


def cmd_export(args) -> int:
    export_file(args.scad_file, args.output_dir, args)
    print("Done!")
    return 0


def cmd_build(args) -> int:
    try:
        names = selected_designs(args.names)
    except KeyError as e:
        print(f"Error: Unknown design(s): {e.args[0]}", file=sys.stderr)
        return 1
    for scad_path in render_designs(names, args.build_dir):
        export_file(scad_path, args.output_dir / scad_path.stem, args)
    print("Done!")
    return 0


def add_export_options(parser):
    parser.add_argument(
        "--format", default=SETTINGS.default_format, choices=SETTINGS.formats,
        help="Mesh format (default: %(default)s)",
    )
    parser.add_argument(
        "--openscad", default=None,
        help="OpenSCAD binary (default: $OPENSCAD or 'openscad')",
    )
    parser.add_argument(
        "-D", "--define", action="append", type=parse_define, metavar="NAME=VALUE",
        help="Extra OpenSCAD variable override, repeatable",
    )
    parser.add_argument(
        "--keep-going", action="store_true",
        help="Export remaining modes after a failure",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="printparts", description="Parametric 3D-printable parts"
    )
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="More log output (-v info, -vv debug)")
    parser.add_argument("--log-file", default=None, help="Also write logs to a file")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("list", help="List all parts and designs as JSON")
    p.set_defaults(func=cmd_list)

    p = sub.add_parser("render", help="Render designs to SCAD")
    p.add_argument("names", nargs="*", help="Designs to render (default: all)")
    p.add_argument("--build-dir", type=Path, default=Path(SETTINGS.build_dir))
    p.set_defaults(func=cmd_render)

    p = sub.add_parser("modes", help="List the print_ modes of a SCAD file")
    p.add_argument("scad_file", type=Path)
    p.set_defaults(func=cmd_modes)

    p = sub.add_parser("export", help="Export a mesh for every print_ mode of a SCAD file")
    p.add_argument("scad_file", type=Path)
    p.add_argument("output_dir", type=Path)
    p.add_argument("--mode", action="append", help="Only export this mode, repeatable")
    add_export_options(p)
    p.set_defaults(func=cmd_export)

    p = sub.add_parser("build", help="Render and export designs")
    p.add_argument("names", nargs="*", help="Designs to build (default: all)")
    p.add_argument("--build-dir", type=Path, default=Path(SETTINGS.build_dir))
    p.add_argument("--output-dir", type=Path, default=Path(SETTINGS.output_dir))
    add_export_options(p)
    p.set_defaults(func=cmd_build, mode=None)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    setup_logging(level, args.log_file)

    try:
        return args.func(args)
    except OpenScadFailed as e:
        # OpenSCAD has already reported why on its own output.
        return e.exit_code
    except ExportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
