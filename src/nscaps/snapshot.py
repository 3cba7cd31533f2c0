"""Loading namespace discovery snapshots from YAML or JSON documents.

Namespace discovery itself happens elsewhere; this module only turns its
serialized result into the read-only ``Snapshot`` model. Since JSON is a
subset of YAML, one loader handles both.

Document layout::

    namespaces:
      - {id: 4026531837, type: user, owner_uid: 0, leaders: [1]}
      - {id: 4026532342, type: user, parent: 4026531837, owner_uid: 1000}
      - {id: 4026532353, type: net, owner: 4026532342}
    processes:
      - pid: 1
        name: systemd
        euid: 0
        namespaces: {user: 4026531837, net: 4026531905}
        capabilities: [cap_chown, cap_kill]

``parent`` and ``owner`` name user namespaces, either by inode number or as
``user:[inode]``. Process memberships accept the same two forms. The
optional ``capabilities`` list names the effective capabilities recorded at
discovery time; without it they are read from the live process status.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from nscaps.core.capabilities.names import caps_to_names, names_to_caps
from nscaps.core.model.namespaces import (
    Namespace,
    NamespaceKind,
    Process,
    parse_namespace_ref,
)
from nscaps.core.model.snapshot import Snapshot
from nscaps.exceptions import SnapshotError

logger = logging.getLogger(__name__)


def _inode(value: Any, kind: NamespaceKind, where: str) -> int:
    """Return the inode number of a namespace reference of the given kind."""
    if isinstance(value, bool):
        raise SnapshotError(f"{where}: invalid namespace reference {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.isascii() and text.isdigit():
            return int(text)
        try:
            refkind, nsid = parse_namespace_ref(text)
        except ValueError as exc:
            raise SnapshotError(f"{where}: {exc}") from None
        if refkind is not kind:
            raise SnapshotError(
                f"{where}: expected a {kind.value} namespace, got {text!r}"
            )
        return nsid
    raise SnapshotError(f"{where}: invalid namespace reference {value!r}")


def _optional_int(entry: dict[str, Any], key: str, where: str) -> int | None:
    value = entry.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise SnapshotError(f"{where}: {key} must be an integer, got {value!r}")
    return value


def _capabilities(entry: dict[str, Any], where: str) -> tuple[str, ...] | None:
    """Return the recorded capability names in bit order, if any."""
    names = entry.get("capabilities")
    if names is None:
        return None
    if not isinstance(names, list) or not all(isinstance(name, str) for name in names):
        raise SnapshotError(f"{where}: capabilities must be a list of names")
    try:
        words = names_to_caps(names)
    except ValueError as exc:
        raise SnapshotError(f"{where}: {exc}") from None
    return tuple(caps_to_names(words))


def _entries(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    entries = data.get(key) or []
    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        raise SnapshotError(f"'{key}' must be a list of mappings")
    return entries


def _load_namespaces(entries: list[dict[str, Any]]) -> dict[tuple[NamespaceKind, int], Namespace]:
    """Create all namespaces, then wire up parent and owner relations."""
    namespaces: dict[tuple[NamespaceKind, int], Namespace] = {}
    created: list[Namespace] = []
    for pos, entry in enumerate(entries):
        where = f"namespaces[{pos}]"
        try:
            kind = NamespaceKind.from_name(str(entry.get("type", "")))
        except ValueError as exc:
            raise SnapshotError(f"{where}: {exc}") from None
        nsid = _inode(entry.get("id"), kind, where)
        if (kind, nsid) in namespaces:
            raise SnapshotError(f"{where}: duplicate namespace {kind.value}:[{nsid}]")
        leaders = entry.get("leaders") or []
        if not isinstance(leaders, list) or not all(
            isinstance(pid, int) and not isinstance(pid, bool) for pid in leaders
        ):
            raise SnapshotError(f"{where}: leaders must be a list of PIDs")
        ns = Namespace(
            kind=kind,
            nsid=nsid,
            owner_uid=_optional_int(entry, "owner_uid", where),
            leaders=list(leaders),
        )
        namespaces[(kind, nsid)] = ns
        created.append(ns)

    def user_namespace(value: Any, where: str) -> Namespace:
        nsid = _inode(value, NamespaceKind.USER, where)
        try:
            return namespaces[(NamespaceKind.USER, nsid)]
        except KeyError:
            raise SnapshotError(f"{where}: unknown user namespace user:[{nsid}]") from None

    for pos, (entry, ns) in enumerate(zip(entries, created)):
        where = f"namespaces[{pos}]"
        if ns.is_user:
            if entry.get("owner") is not None:
                logger.warning("%s: ignoring owner of user namespace %s", where, ns.ref())
            if entry.get("parent") is not None:
                ns.parent = user_namespace(entry["parent"], f"{where}.parent")
        else:
            if entry.get("parent") is not None:
                logger.warning("%s: ignoring parent of %s", where, ns.ref())
            if entry.get("owner") is not None:
                ns.owner = user_namespace(entry["owner"], f"{where}.owner")
    return namespaces


def _load_processes(
    entries: list[dict[str, Any]],
    namespaces: dict[tuple[NamespaceKind, int], Namespace],
) -> list[Process]:
    processes: list[Process] = []
    seen: set[int] = set()
    for pos, entry in enumerate(entries):
        where = f"processes[{pos}]"
        pid = _optional_int(entry, "pid", where)
        if pid is None:
            raise SnapshotError(f"{where}: missing pid")
        if pid in seen:
            raise SnapshotError(f"{where}: duplicate process PID {pid}")
        seen.add(pid)
        memberships = entry.get("namespaces") or {}
        if not isinstance(memberships, dict):
            raise SnapshotError(f"{where}: namespaces must be a mapping")
        joined: dict[NamespaceKind, Namespace] = {}
        for kindname, ref in memberships.items():
            try:
                kind = NamespaceKind.from_name(str(kindname))
            except ValueError as exc:
                raise SnapshotError(f"{where}: {exc}") from None
            nsid = _inode(ref, kind, f"{where}.namespaces.{kind.value}")
            try:
                joined[kind] = namespaces[(kind, nsid)]
            except KeyError:
                raise SnapshotError(
                    f"{where}: unknown namespace {kind.value}:[{nsid}]"
                ) from None
        processes.append(Process(
            pid=pid,
            name=str(entry.get("name", "")),
            ppid=_optional_int(entry, "ppid", where) or 0,
            euid=_optional_int(entry, "euid", where),
            namespaces=joined,
            capabilities=_capabilities(entry, where),
        ))
    return processes


def snapshot_from_dict(data: Any) -> Snapshot:
    """Build a snapshot from an already parsed document.

    Raises:
        SnapshotError: If the document is malformed or has dangling
            references.
    """
    if not isinstance(data, dict):
        raise SnapshotError("snapshot document must be a mapping")
    namespaces = _load_namespaces(_entries(data, "namespaces"))
    processes = _load_processes(_entries(data, "processes"), namespaces)
    return Snapshot(namespaces.values(), processes)


def load_snapshot(path: str | Path) -> Snapshot:
    """Load a snapshot from a YAML or JSON file.

    Raises:
        SnapshotError: If the file cannot be read or parsed.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"cannot read snapshot {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SnapshotError(f"malformed snapshot {path}: {exc}") from exc
    return snapshot_from_dict(data)
