"""Tests for the printparts command line."""

import json

import pytest

from printparts.__main__ import main, parse_define


class TestExportCommand:

    def test_export(self, tmp_path, mount_scad, fake_openscad, capsys):
        out_dir = tmp_path / "stls"
        assert main(["export", str(mount_scad), str(out_dir)]) == 0
        out = capsys.readouterr().out
        assert out.startswith(f"Exporting STLs from {mount_scad} to {out_dir}/\n")
        assert out.rstrip().endswith("Done!")
        assert len(fake_openscad.export_calls) == 2

    def test_argument_count(self, mount_scad):
        with pytest.raises(SystemExit) as exc:
            main(["export", str(mount_scad)])
        assert exc.value.code == 2

    def test_missing_file(self, tmp_path, fake_openscad, capsys):
        code = main(["export", str(tmp_path / "nope.scad"), str(tmp_path)])
        assert code == 1
        captured = capsys.readouterr()
        assert "Error: File" in captured.err
        assert "Exporting" not in captured.out
        assert fake_openscad.calls == []

    def test_no_modes(self, tmp_path, fake_openscad, capsys):
        path = tmp_path / "plain.scad"
        path.write_text("cube(10);\n")
        assert main(["export", str(path), str(tmp_path / "out")]) == 1
        assert "No print_ modes found" in capsys.readouterr().err

    def test_openscad_status_propagates(self, tmp_path, mount_scad, fake_openscad, capsys):
        fake_openscad.returncodes["print_clip"] = 4
        assert main(["export", str(mount_scad), str(tmp_path / "out")]) == 4
        assert "Done!" not in capsys.readouterr().out

    def test_mode_format_and_defines(self, tmp_path, mount_scad, fake_openscad):
        code = main([
            "export", str(mount_scad), str(tmp_path / "out"),
            "--mode", "print_rail", "--format", "3mf", "-D", "$fn=96",
            "--openscad", "/usr/local/bin/openscad",
        ])
        assert code == 0
        (cmd,) = fake_openscad.export_calls
        assert cmd[0] == "/usr/local/bin/openscad"
        assert cmd[2].endswith("accessory_mount_print_rail.3mf")
        assert "$fn=96" in cmd

    def test_bad_define(self, tmp_path, mount_scad):
        with pytest.raises(SystemExit):
            main(["export", str(mount_scad), str(tmp_path), "-D", "novalue"])


class TestModesCommand:

    def test_lists_modes(self, mount_scad, capsys):
        assert main(["modes", str(mount_scad)]) == 0
        assert capsys.readouterr().out.split() == ["print_clip", "print_rail"]

    def test_missing_file(self, tmp_path, capsys):
        assert main(["modes", str(tmp_path / "nope.scad")]) == 1
        assert "not found" in capsys.readouterr().err


class TestRegistryCommands:

    def test_list(self, capsys):
        assert main(["list"]) == 0
        entries = json.loads(capsys.readouterr().out)
        designs = {e["name"]: e for e in entries if e["type"] == "design"}
        assert designs["fit_test"]["modes"] == [
            "assembly", "print_hole_plate", "print_peg_bar",
        ]

    def test_render_unknown_design(self, tmp_path, capsys):
        assert main(["render", "no_such_design", "--build-dir", str(tmp_path)]) == 1
        assert "no_such_design" in capsys.readouterr().err

    def test_render_design(self, tmp_path, capsys):
        assert main(["render", "fit_test", "--build-dir", str(tmp_path)]) == 0
        scad = tmp_path / "fit_test.scad"
        assert f"Rendered: {scad}" in capsys.readouterr().out
        assert 'display_mode = "assembly";' in scad.read_text()

    def test_build_renders_then_exports(self, tmp_path, fake_openscad):
        code = main([
            "build", "accessory_mount",
            "--build-dir", str(tmp_path / "build"),
            "--output-dir", str(tmp_path / "stl"),
        ])
        assert code == 0
        outputs = [c[2] for c in fake_openscad.export_calls]
        assert outputs == [
            str(tmp_path / "stl" / "accessory_mount" / "accessory_mount_print_clip.stl"),
            str(tmp_path / "stl" / "accessory_mount" / "accessory_mount_print_rail.stl"),
        ]


def test_parse_define_keeps_equals_in_value():
    assert parse_define('label="a=b"') == ("label", '"a=b"')
