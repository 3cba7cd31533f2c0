"""Tests for the ``nscaps classify`` command."""

from __future__ import annotations

import json

from nscaps.cli.main import cli
from tests.helpers import N2, U1


def _classify(runner, snapshot_file, proc_root, *args: str):
    return runner.invoke(cli, [
        "classify", "-s", str(snapshot_file), "--proc-root", str(proc_root), *args,
    ])


class TestClassify:

    def test_text(self, runner, snapshot_file, proc_root) -> None:
        result = _classify(runner, snapshot_file, proc_root, "-p", "200", f"net:[{N2}]")
        assert result.exit_code == 0, result.output
        assert "FULL" in result.output
        assert "(ALL capabilities)" in result.output

    def test_json(self, runner, snapshot_file, proc_root) -> None:
        result = _classify(
            runner, snapshot_file, proc_root, "-p", "300", "--format", "json", f"net:[{N2}]",
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {
            "pid": 300,
            "namespace": f"net:[{N2}]",
            "level": "NONE",
            "euid": 1000,
        }

    def test_membership(self, runner, snapshot_file, proc_root) -> None:
        result = _classify(
            runner, snapshot_file, proc_root, "-p", "200", "--format", "json", f"user:[{U1}]",
        )
        assert json.loads(result.output)["level"] == "EFFECTIVE"

    def test_unknown_uid(self, runner, snapshot_file, proc_root) -> None:
        result = _classify(runner, snapshot_file, proc_root, "-p", "400", f"net:[{N2}]")
        assert result.exit_code == 2
        assert "cannot query effective UID of process PID 400" in result.output

    def test_uid_from_status(self, runner, snapshot_file, proc_root) -> None:
        (proc_root / "400").mkdir()
        (proc_root / "400" / "status").write_text("Name:\tzombie\nUid:\t0\t1000\t0\t1000\n")
        result = _classify(
            runner, snapshot_file, proc_root, "-p", "400", "--format", "json", f"net:[{N2}]",
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["level"] == "FULL"
        assert json.loads(result.output)["euid"] == 1000

    def test_invalid_reference(self, runner, snapshot_file, proc_root) -> None:
        result = _classify(runner, snapshot_file, proc_root, "-p", "200", "bogus")
        assert result.exit_code == 2
        assert "Error: not a valid namespace" in result.output
