"""Shared fixtures: a hand-written design file and a stand-in OpenSCAD."""

import subprocess

import pytest

from printparts import exporter

MOUNT_SCAD = """\
// Accessory mount
display_mode = "assembly"; // [assembly, print_rail, print_clip]

module rail() { cube([30, 60, 4]); }
module clip() { cube([22, 30, 9]); }

if (display_mode == "print_rail") rail();
else if (display_mode == "print_clip") clip();
else if (display_mode == "print_rail") rail();
else { rail(); translate([0, 15, 4]) clip(); }
"""


class FakeOpenScad:
    """Records every command; exit status per mode is configurable."""

    def __init__(self):
        self.calls = []
        self.returncodes = {}
        self.installed = True
        self.error = None

    def mode_of(self, cmd):
        for arg in cmd:
            if arg.startswith("display_mode="):
                return arg.split('"')[1]
        return None

    def __call__(self, cmd, **kwargs):
        if not self.installed:
            raise FileNotFoundError(cmd[0])
        if self.error is not None:
            raise self.error
        self.calls.append(list(cmd))
        if "--version" in cmd:
            return subprocess.CompletedProcess(cmd, 0, "OpenSCAD version 2021.01\n", "")
        return subprocess.CompletedProcess(cmd, self.returncodes.get(self.mode_of(cmd), 0))

    @property
    def export_calls(self):
        return [c for c in self.calls if "--version" not in c]


@pytest.fixture
def fake_openscad(monkeypatch):
    fake = FakeOpenScad()
    monkeypatch.setattr(exporter.subprocess, "run", fake)
    return fake


@pytest.fixture
def mount_scad(tmp_path):
    path = tmp_path / "accessory_mount.scad"
    path.write_text(MOUNT_SCAD)
    return path
