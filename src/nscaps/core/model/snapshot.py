"""Read-only discovery snapshot: all namespaces and processes at one time."""

from __future__ import annotations

from typing import Iterable, Iterator

from nscaps.core.model.namespaces import (
    Namespace,
    NamespaceKind,
    Process,
    parse_namespace_ref,
)
from nscaps.exceptions import SnapshotError


class Snapshot:
    """Namespaces and processes captured by a single discovery run.

    The snapshot is never modified after construction, so any number of
    queries may run against it at the same time.

    Example::

        snap = Snapshot(namespaces, processes)
        proc = snap.process(4242)
        netns = snap.lookup("net:[4026531905]")
    """

    def __init__(
        self,
        namespaces: Iterable[Namespace],
        processes: Iterable[Process],
    ) -> None:
        self._namespaces: dict[tuple[NamespaceKind, int], Namespace] = {
            (ns.kind, ns.nsid): ns for ns in namespaces
        }
        self._processes: dict[int, Process] = {
            proc.pid: proc for proc in processes
        }

    def process(self, pid: int) -> Process:
        """Return the process with the given PID.

        Raises:
            SnapshotError: If the process was not discovered.
        """
        try:
            return self._processes[pid]
        except KeyError:
            raise SnapshotError(f"unknown process PID {pid}") from None

    def namespace(self, kind: NamespaceKind, nsid: int) -> Namespace:
        """Return the namespace of the given kind and inode number.

        Raises:
            SnapshotError: If the namespace was not discovered.
        """
        try:
            return self._namespaces[(kind, nsid)]
        except KeyError:
            raise SnapshotError(
                f"unknown namespace {kind.value}:[{nsid}]"
            ) from None

    def lookup(self, ref: str) -> Namespace:
        """Return the namespace for a ``type:[inode]`` reference.

        Raises:
            SnapshotError: If the reference is invalid or unknown.
        """
        try:
            kind, nsid = parse_namespace_ref(ref)
        except ValueError as exc:
            raise SnapshotError(str(exc)) from None
        return self.namespace(kind, nsid)

    def namespaces(self, kind: NamespaceKind | None = None) -> Iterator[Namespace]:
        """Iterate over all namespaces, optionally of a single kind."""
        for (nskind, _), ns in self._namespaces.items():
            if kind is None or nskind is kind:
                yield ns

    def processes(self) -> Iterator[Process]:
        """Iterate over all processes, in PID order."""
        for pid in sorted(self._processes):
            yield self._processes[pid]

    def __repr__(self) -> str:
        return (
            f"Snapshot(namespaces={len(self._namespaces)}, "
            f"processes={len(self._processes)})"
        )
