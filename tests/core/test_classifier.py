"""Tests for the capability classifier."""

from __future__ import annotations

import pytest

from nscaps.core import CapabilityLevel, classify
from nscaps.core.model import Namespace, NamespaceKind, Process, Snapshot
from nscaps.exceptions import (
    MissingNamespaceInfoError,
    MissingOwnerError,
    UnknownEffectiveUIDError,
)
from tests.helpers import N0, N1, N2, N3, N4, U0, U1, U2, U3, U5, U6

NONE = CapabilityLevel.NONE
EFFECTIVE = CapabilityLevel.EFFECTIVE
FULL = CapabilityLevel.FULL


class TestMembership:
    """Processes always get their effective capabilities at home."""

    def test_own_user_namespace(self, snapshot: Snapshot, userns) -> None:
        assert classify(snapshot.process(200), userns(U1)) == (EFFECTIVE, 1000)

    def test_namespace_owned_by_own_user_namespace(self, snapshot: Snapshot, netns) -> None:
        assert classify(snapshot.process(200), netns(N1)) == (EFFECTIVE, 1000)

    def test_uid_irrelevant_at_home(self, snapshot: Snapshot, userns) -> None:
        level, euid = classify(snapshot.process(400), userns(U0))
        assert level is EFFECTIVE
        assert euid is None


class TestOutsideHierarchy:

    @pytest.mark.parametrize("nsid", [N0, N1, N2, N3])
    def test_sibling_branch_gets_nothing(self, snapshot: Snapshot, netns, nsid: int) -> None:
        assert classify(snapshot.process(300), netns(nsid)) == (NONE, 1000)

    def test_ancestor_gets_nothing(self, snapshot: Snapshot, userns) -> None:
        assert classify(snapshot.process(200), userns(U0))[0] is NONE

    def test_unknown_uid_not_needed(self, snapshot: Snapshot, netns) -> None:
        proc = Process(pid=7, namespaces={NamespaceKind.USER: netns(N4).owner})
        assert classify(proc, netns(N0)) == (NONE, None)


class TestOwnerRule:

    def test_owner_of_child_gets_everything(self, snapshot: Snapshot, netns, userns) -> None:
        proc = snapshot.process(200)
        assert classify(proc, netns(N2)) == (FULL, 1000)
        assert classify(proc, userns(U2)) == (FULL, 1000)

    def test_owner_rule_applies_to_deeper_descendants(self, snapshot: Snapshot, userns) -> None:
        # U5 is owned by root, but the child below U1 on the way is U2.
        assert classify(snapshot.process(200), userns(U5)) == (FULL, 1000)

    def test_non_owner_keeps_effective(self, snapshot: Snapshot, netns, userns) -> None:
        proc = snapshot.process(200)
        assert classify(proc, netns(N3)) == (EFFECTIVE, 1000)
        assert classify(proc, userns(U6)) == (EFFECTIVE, 1000)

    def test_from_initial_namespace(self, snapshot: Snapshot, netns, userns) -> None:
        assert classify(snapshot.process(100), netns(N2)) == (FULL, 1000)
        assert classify(snapshot.process(100), userns(U3)) == (FULL, 1000)
        assert classify(snapshot.process(1), netns(N2)) == (EFFECTIVE, 0)
        assert classify(snapshot.process(1), netns(N4)) == (EFFECTIVE, 0)


class TestErrors:

    def test_missing_user_namespace(self, snapshot: Snapshot, netns) -> None:
        with pytest.raises(MissingNamespaceInfoError) as excinfo:
            classify(snapshot.process(500), netns(N0))
        assert excinfo.value.pid == 500

    def test_unknown_uid_for_owner_rule(self, snapshot: Snapshot, netns) -> None:
        with pytest.raises(UnknownEffectiveUIDError, match="PID 400") as excinfo:
            classify(snapshot.process(400), netns(N2))
        assert excinfo.value.pid == 400

    def test_target_without_owner(self, snapshot: Snapshot) -> None:
        orphan = Namespace(NamespaceKind.IPC, 4026532777)
        with pytest.raises(MissingOwnerError, match=r"ipc:\[4026532777\]"):
            classify(snapshot.process(200), orphan)
