"""Read-only namespace model supplied by namespace discovery.

Submodules
----------
- ``namespaces``: NamespaceKind, Namespace, Process, parse_namespace_ref.
- ``snapshot``: Snapshot, the immutable collection queried by the engine.
"""

from nscaps.core.model.namespaces import (
    Namespace,
    NamespaceKind,
    Process,
    parse_namespace_ref,
)
from nscaps.core.model.snapshot import Snapshot

__all__ = [
    "Namespace",
    "NamespaceKind",
    "Process",
    "Snapshot",
    "parse_namespace_ref",
]
