"""Shared fixtures for CLI tests.

Provides a snapshot file on disk and a CliRunner. Every command that could
read process status gets ``--proc-root`` pointing at the fake proc tree, so
no test depends on the host's processes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def snapshot_file(tmp_path: Path, snapshot_data: dict[str, Any]) -> Path:
    """Write the shared snapshot document as YAML."""
    path = tmp_path / "snapshot.yaml"
    path.write_text(yaml.safe_dump(snapshot_data))
    return path
