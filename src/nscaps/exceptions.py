"""nscaps exception hierarchy.

All public exceptions inherit from NscapsError, giving callers a single
base class to catch when they want to handle any nscaps-specific failure
without swallowing unrelated errors.

Capability listing never raises: an unreadable or malformed process status
degrades to an empty capability list. Everything here aborts a single
classification or tree resolution.
"""

from __future__ import annotations


class NscapsError(Exception):
    """Base exception for all nscaps errors."""


class MissingNamespaceInfoError(NscapsError):
    """Raised when a process's user namespace membership is unknown.

    Without the user namespace a process is joined to, neither the
    classification rules nor the process branch can be evaluated.
    """

    def __init__(self, pid: int) -> None:
        self.pid = pid
        super().__init__(
            f"cannot access namespace information of process PID {pid}"
        )


class UnknownEffectiveUIDError(NscapsError):
    """Raised when the effective UID of a process is needed but unknown.

    This is distinct from a "no capabilities" classification: the owner
    UID rule simply cannot be decided.
    """

    def __init__(self, pid: int) -> None:
        self.pid = pid
        super().__init__(f"cannot query effective UID of process PID {pid}")


class InconsistentModelError(NscapsError):
    """Raised when the namespace snapshot contradicts the kernel model.

    Covers cyclic user namespace parent links and namespaces lacking the
    relations every namespace of their kind must have.
    """


class MissingOwnerError(InconsistentModelError):
    """Raised when a non-user namespace has no owning user namespace."""

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(
            "cannot access owning user namespace information of "
            f"target namespace {namespace}"
        )


class DisjointHierarchyError(NscapsError):
    """Raised when a process branch and a target branch share no root.

    A single discovery snapshot should never produce this, but nothing
    structurally prevents it, so merging reports it instead of inventing
    a common ancestor.
    """

    def __init__(self, process_root: str, target_root: str) -> None:
        self.process_root = process_root
        self.target_root = target_root
        super().__init__(
            f"process branch rooted at {process_root} and target branch "
            f"rooted at {target_root} share no common user namespace"
        )


class SnapshotError(NscapsError):
    """Raised when a namespace snapshot cannot be loaded or queried.

    Covers unreadable or malformed snapshot documents, dangling namespace
    references, and lookups of unknown processes or namespaces.
    """
