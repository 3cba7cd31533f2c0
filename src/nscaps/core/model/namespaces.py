"""Namespace and process views over a discovery snapshot.

The Linux kernel knows eight namespace kinds. User namespaces are special:
they form their own parent/child hierarchy and *own* every namespace of the
other kinds. A process is joined to exactly one namespace of each kind.

Namespaces compare by object identity. A snapshot holds exactly one
``Namespace`` object per kernel namespace, so identity is the same as
comparing the nsfs inode numbers, just cheaper.

Textual References
------------------
Namespaces are referenced the way ``readlink /proc/self/ns/net`` prints
them, for example ``net:[4026531905]``. ``parse_namespace_ref`` turns such
a reference into a ``(NamespaceKind, inode)`` pair.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


class NamespaceKind(str, Enum):
    """The Linux kernel namespace kinds, by their procfs names."""

    MNT = "mnt"
    CGROUP = "cgroup"
    UTS = "uts"
    IPC = "ipc"
    USER = "user"
    PID = "pid"
    NET = "net"
    TIME = "time"

    @classmethod
    def from_name(cls, name: str) -> NamespaceKind:
        """Look up a kind by its procfs name (``"net"``, ``"user"``, ...).

        Raises:
            ValueError: If the name is not a known namespace kind.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"not a valid namespace type: {name!r}") from None


_NSREF_PATTERN = re.compile(r"^\s*([a-z]+):\[(\d+)\]\s*$")


def parse_namespace_ref(text: str) -> tuple[NamespaceKind, int]:
    """Parse a ``type:[inode]`` namespace reference.

    Args:
        text: Reference such as ``"net:[4026531905]"``.

    Returns:
        The namespace kind and its inode number.

    Raises:
        ValueError: If the text is not a valid namespace reference.
    """
    match = _NSREF_PATTERN.match(text)
    if match is None:
        raise ValueError(f"not a valid namespace: {text!r}")
    return NamespaceKind.from_name(match.group(1)), int(match.group(2))


@dataclass(eq=False)
class Namespace:
    """A single Linux kernel namespace.

    Attributes:
        kind: The namespace kind.
        nsid: Identity of the namespace (its nsfs inode number).
        owner: The owning user namespace; set for non-user kinds only.
        parent: The parent user namespace; set for user namespaces below
            the initial one only.
        owner_uid: UID of the user that created a user namespace.
        leaders: PIDs of the topmost processes joined to this namespace.
    """

    kind: NamespaceKind
    nsid: int
    owner: Namespace | None = None
    parent: Namespace | None = None
    owner_uid: int | None = None
    leaders: list[int] = field(default_factory=list)

    @property
    def is_user(self) -> bool:
        return self.kind is NamespaceKind.USER

    def ref(self) -> str:
        """Return the ``type:[inode]`` text of this namespace."""
        return f"{self.kind.value}:[{self.nsid}]"

    def __repr__(self) -> str:
        return f"Namespace({self.ref()})"


@dataclass(eq=False)
class Process:
    """A process as seen by namespace discovery.

    Attributes:
        pid: Process ID in the initial PID namespace.
        name: Process name, for display only.
        ppid: Parent process ID; not used by classification.
        euid: Effective UID, or None if it could not be determined.
        namespaces: The namespaces this process is currently joined to.
        capabilities: Names of its effective capabilities as recorded by
            discovery, in bit order; None when not recorded.
    """

    pid: int
    name: str = ""
    ppid: int = 0
    euid: int | None = None
    namespaces: dict[NamespaceKind, Namespace] = field(default_factory=dict)
    capabilities: tuple[str, ...] | None = None

    @property
    def user_namespace(self) -> Namespace | None:
        """Return the user namespace this process is joined to, if known."""
        return self.namespaces.get(NamespaceKind.USER)

    def __repr__(self) -> str:
        return f"Process(pid={self.pid}, name={self.name!r})"
