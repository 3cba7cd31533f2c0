"""Single branches from the initial user namespace down to a process or target.

Both builders climb from the bottom of a branch up to the root, then read
the collected ancestors top-down. The resulting chains are lists of
childless nodes, one per level; ``merge_chains`` wires them up.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from nscaps.core.branch.models import BranchNode, NamespaceNode, ProcessNode
from nscaps.core.capabilities.levels import CapabilityLevel
from nscaps.core.capabilities.status import PROC_ROOT, capabilities_of
from nscaps.core.model.hierarchy import ancestry, owning_user_namespace
from nscaps.core.model.namespaces import Namespace, Process
from nscaps.exceptions import MissingNamespaceInfoError


def process_chain(
    process: Process,
    capabilities: Sequence[str] | None = None,
    proc_root: str | Path = PROC_ROOT,
) -> list[BranchNode]:
    """Return the branch from the initial user namespace down to ``process``.

    The branch consists of user namespace nodes ending in a single process
    node. The process's own user namespace is marked EFFECTIVE, as the
    process holds its effective capabilities there.

    Args:
        process: The process ending the branch.
        capabilities: The process's effective capability names; read from
            the process status when not given.
        proc_root: Mount point of the proc filesystem.

    Raises:
        MissingNamespaceInfoError: If the process's user namespace is unknown.
    """
    userns = process.user_namespace
    if userns is None:
        raise MissingNamespaceInfoError(process.pid)
    if capabilities is None:
        capabilities = capabilities_of(process.pid, proc_root)
    chain: list[BranchNode] = [NamespaceNode(ns) for ns in ancestry(userns)]
    chain[-1] = NamespaceNode(userns, level=CapabilityLevel.EFFECTIVE)
    chain.append(ProcessNode(process, tuple(capabilities), process.euid))
    return chain


def target_chain(target: Namespace, level: CapabilityLevel) -> list[BranchNode]:
    """Return the branch from the initial user namespace down to ``target``.

    For a user namespace target the branch ends in the target itself;
    otherwise it ends in the target below its owning user namespace. Either
    way the final node is flagged as target and carries ``level``.

    Raises:
        MissingOwnerError: If a non-user target has no owning user namespace.
    """
    userns = owning_user_namespace(target)
    chain: list[BranchNode] = [NamespaceNode(ns) for ns in ancestry(userns)]
    node = NamespaceNode(target, is_target=True, level=level)
    if target.is_user:
        chain[-1] = node
    else:
        chain.append(node)
    return chain
