"""Tests for the OpenSCAD batch exporter. OpenSCAD itself is never run."""

import pytest

from printparts.exporter import (
    NoPrintModesFound,
    OpenScadExporter,
    OpenScadFailed,
    OpenScadNotFound,
    ScadFileNotFound,
    UnknownPrintMode,
    UnsupportedFormat,
)


class TestCommand:

    def test_command_matches_openscad_contract(self, tmp_path):
        exporter = OpenScadExporter(tmp_path / "stl", openscad="openscad")
        cmd = exporter.command(tmp_path / "accessory_mount.scad", "print_rail")
        assert cmd == [
            "openscad",
            "-o", str(tmp_path / "stl" / "accessory_mount_print_rail.stl"),
            "-D", 'display_mode="print_rail"',
            str(tmp_path / "accessory_mount.scad"),
        ]

    def test_extra_defines_follow_mode(self, tmp_path):
        exporter = OpenScadExporter(
            tmp_path, openscad="openscad", defines={"$fn": "128", "label": '"A"'}
        )
        cmd = exporter.command(tmp_path / "part.scad", "print_part")
        assert cmd[3:9] == ["-D", 'display_mode="print_part"', "-D", "$fn=128", "-D", 'label="A"']

    def test_format_sets_extension(self, tmp_path):
        exporter = OpenScadExporter(tmp_path, fmt="3MF")
        assert exporter.output_path(tmp_path / "part.scad", "print_a").name == "part_print_a.3mf"

    def test_unsupported_format(self, tmp_path):
        with pytest.raises(UnsupportedFormat):
            OpenScadExporter(tmp_path, fmt="gcode")

    def test_binary_from_settings(self, tmp_path, monkeypatch):
        from printparts import exporter as exporter_module

        monkeypatch.setattr(exporter_module.SETTINGS, "openscad_bin", "/opt/openscad")
        assert OpenScadExporter(tmp_path).openscad == "/opt/openscad"


class TestCheckOpenScad:

    def test_available(self, tmp_path, fake_openscad):
        assert OpenScadExporter(tmp_path).check_openscad()

    def test_missing(self, tmp_path, fake_openscad):
        fake_openscad.installed = False
        assert not OpenScadExporter(tmp_path).check_openscad()

    def test_not_executable(self, tmp_path, fake_openscad):
        fake_openscad.error = PermissionError(13, "Permission denied")
        assert not OpenScadExporter(tmp_path).check_openscad()


class TestExport:

    def test_exports_every_mode_in_order(self, tmp_path, mount_scad, fake_openscad):
        out = tmp_path / "stl"
        written = OpenScadExporter(out).export(mount_scad)
        assert written == [
            out / "accessory_mount_print_clip.stl",
            out / "accessory_mount_print_rail.stl",
        ]
        modes = [fake_openscad.mode_of(c) for c in fake_openscad.export_calls]
        assert modes == ["print_clip", "print_rail"]
        assert out.is_dir()

    def test_progress_lines(self, tmp_path, mount_scad, fake_openscad, capsys):
        OpenScadExporter(tmp_path / "stl").export(mount_scad)
        out = capsys.readouterr().out
        assert "  accessory_mount_print_clip.stl...\n" in out
        assert "  accessory_mount_print_rail.stl...\n" in out

    def test_selected_modes_only(self, tmp_path, mount_scad, fake_openscad):
        OpenScadExporter(tmp_path).export(mount_scad, modes=["print_rail", "print_rail"])
        modes = [fake_openscad.mode_of(c) for c in fake_openscad.export_calls]
        assert modes == ["print_rail"]

    def test_unknown_mode(self, tmp_path, mount_scad, fake_openscad):
        with pytest.raises(UnknownPrintMode) as exc:
            OpenScadExporter(tmp_path).export(mount_scad, modes=["print_lid"])
        assert exc.value.modes == ["print_lid"]
        assert fake_openscad.calls == []

    def test_missing_file(self, tmp_path, fake_openscad, capsys):
        with pytest.raises(ScadFileNotFound):
            OpenScadExporter(tmp_path).export(tmp_path / "nope.scad")
        assert fake_openscad.calls == []
        assert capsys.readouterr().out == ""

    def test_no_modes(self, tmp_path, fake_openscad):
        path = tmp_path / "plain.scad"
        path.write_text("cube(10);\n")
        with pytest.raises(NoPrintModesFound):
            OpenScadExporter(tmp_path / "out").export(path)
        assert not (tmp_path / "out").exists()

    def test_openscad_not_installed(self, tmp_path, mount_scad, fake_openscad):
        fake_openscad.installed = False
        with pytest.raises(OpenScadNotFound):
            OpenScadExporter(tmp_path / "stl").export(mount_scad)

    def test_run_not_executable(self, tmp_path, fake_openscad):
        fake_openscad.error = PermissionError(13, "Permission denied")
        with pytest.raises(OpenScadNotFound):
            OpenScadExporter(tmp_path, openscad="/tmp/openscad").run_openscad(
                tmp_path / "part.scad", "print_part"
            )

    def test_banner_after_validation(self, tmp_path, mount_scad, fake_openscad, capsys):
        out_dir = tmp_path / "stl"
        OpenScadExporter(out_dir).export(mount_scad)
        out = capsys.readouterr().out
        assert out.startswith(f"Exporting STLs from {mount_scad} to {out_dir}/\n")

    def test_stops_at_first_failure(self, tmp_path, mount_scad, fake_openscad):
        fake_openscad.returncodes["print_clip"] = 3
        with pytest.raises(OpenScadFailed) as exc:
            OpenScadExporter(tmp_path).export(mount_scad)
        assert exc.value.exit_code == 3
        assert exc.value.mode == "print_clip"
        assert len(fake_openscad.export_calls) == 1

    def test_keep_going_tries_every_mode(self, tmp_path, mount_scad, fake_openscad):
        fake_openscad.returncodes["print_clip"] = 1
        with pytest.raises(OpenScadFailed) as exc:
            OpenScadExporter(tmp_path).export(mount_scad, keep_going=True)
        assert exc.value.mode == "print_clip"
        assert len(fake_openscad.export_calls) == 2
