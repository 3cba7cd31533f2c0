"""Merging a process branch and a target branch into one tree.

Both branches start at the initial user namespace. Walking them side by
side, they share nodes until they fork::

         U            shared user namespaces
         |\\
         P T          process branch, grafted target branch

Where the process's user namespace is an ancestor of the target, the
grafted branch shows how capabilities carry downwards: the user namespace
right below the fork is reached with the process's effective capabilities,
everything further down with all capabilities, and the target keeps its
classification.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from nscaps.core.branch.models import BranchNode, BranchTree, NamespaceNode, ProcessNode
from nscaps.core.capabilities.levels import CapabilityLevel
from nscaps.exceptions import DisjointHierarchyError

logger = logging.getLogger(__name__)


def _describe(node: BranchNode) -> str:
    if isinstance(node, NamespaceNode):
        return node.namespace.ref()
    return f"process PID {node.process.pid}"


def _propagate(grafted: list[BranchNode]) -> list[BranchNode]:
    """Mark the levels along a branch grafted below the process's namespace."""
    last = len(grafted) - 1
    marked: list[BranchNode] = []
    for pos, node in enumerate(grafted):
        if pos < last:
            level = CapabilityLevel.EFFECTIVE if pos == 0 else CapabilityLevel.FULL
            node = replace(node, level=level)
        marked.append(node)
    return marked


def _stack(links: Sequence[BranchNode], arena: list[BranchNode], below: tuple[int, ...] = ()) -> int:
    """Append ``links`` bottom-up to ``arena``; return the index of the top."""
    children = below
    for link in reversed(links):
        arena.append(replace(link, children=children))
        children = (len(arena) - 1,)
    return children[0]


def merge_chains(
    process_chain: Sequence[BranchNode],
    target_chain: Sequence[BranchNode],
) -> BranchTree:
    """Combine a process branch and a target branch into a single tree.

    Args:
        process_chain: Branch from ``process_chain()``.
        target_chain: Branch from ``target_chain()``.

    Returns:
        A tree with at most one fork, rooted at the shared initial user
        namespace.

    Raises:
        ValueError: If either branch is empty.
        DisjointHierarchyError: If the branches do not start at the same
            user namespace.
    """
    if not process_chain or not target_chain:
        raise ValueError("cannot merge empty branches")
    proot, troot = process_chain[0], target_chain[0]
    if not (
        isinstance(proot, NamespaceNode)
        and isinstance(troot, NamespaceNode)
        and proot.namespace is troot.namespace
    ):
        raise DisjointHierarchyError(_describe(proot), _describe(troot))

    shared: list[BranchNode] = []
    depth = 0
    while depth < len(process_chain) and depth < len(target_chain):
        pnode, tnode = process_chain[depth], target_chain[depth]
        if not isinstance(pnode, NamespaceNode) or pnode.namespace is not tnode.namespace:
            break
        if tnode.is_target:
            pnode = replace(pnode, is_target=True, level=tnode.level)
        shared.append(pnode)
        depth += 1

    process_rest = list(process_chain[depth:])
    target_rest = list(target_chain[depth:])
    if target_rest and process_rest and isinstance(process_rest[0], ProcessNode):
        target_rest = _propagate(target_rest)
    if target_rest:
        logger.debug(
            "Branches fork at %s towards %s",
            _describe(shared[-1]), _describe(target_rest[-1]),
        )

    arena: list[BranchNode] = []
    tops = tuple(
        _stack(rest, arena) for rest in (process_rest, target_rest) if rest
    )
    root = _stack(shared, arena, tops)
    return BranchTree(nodes=tuple(arena), root=root)
