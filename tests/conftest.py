"""Shared fixtures for nscaps tests."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Callable

import pytest

from nscaps.core.model import Namespace, NamespaceKind, Snapshot
from nscaps.snapshot import snapshot_from_dict
from tests.helpers import GOOD_STATUS, SNAPSHOT_DATA


@pytest.fixture
def snapshot_data() -> dict[str, Any]:
    """A fresh copy of the snapshot document from ``tests.helpers``."""
    return copy.deepcopy(SNAPSHOT_DATA)


@pytest.fixture
def snapshot(snapshot_data: dict[str, Any]) -> Snapshot:
    return snapshot_from_dict(snapshot_data)


@pytest.fixture
def userns(snapshot: Snapshot) -> Callable[[int], Namespace]:
    """Look up user namespaces of the snapshot by inode number."""
    def lookup(nsid: int) -> Namespace:
        return snapshot.namespace(NamespaceKind.USER, nsid)
    return lookup


@pytest.fixture
def netns(snapshot: Snapshot) -> Callable[[int], Namespace]:
    """Look up network namespaces of the snapshot by inode number."""
    def lookup(nsid: int) -> Namespace:
        return snapshot.namespace(NamespaceKind.NET, nsid)
    return lookup


@pytest.fixture
def proc_root(tmp_path: Path) -> Path:
    """A fake proc filesystem with status files for PIDs 200 and 666."""
    root = tmp_path / "proc"
    (root / "200").mkdir(parents=True)
    (root / "200" / "status").write_text(GOOD_STATUS)
    (root / "666").mkdir()
    (root / "666" / "status").write_text("Name:\tbroken\nCapEff:\tnot-hex\n")
    return root
