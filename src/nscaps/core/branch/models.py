"""Branch nodes and the immutable tree arena they live in.

A branch tree shows at most two branches of the user namespace hierarchy:
one leading to the process under scrutiny, one leading to the target
namespace. Nodes are frozen values; a node refers to its children by their
integer index into the ``BranchTree.nodes`` arena, so trees are assembled
bottom-up and never patched in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from nscaps.core.capabilities.levels import CapabilityLevel
from nscaps.core.model.namespaces import Namespace, Process


@dataclass(frozen=True)
class NamespaceNode:
    """A namespace on a branch.

    Only user namespaces have children. A non-user namespace appears solely
    as the terminal target node of a branch.

    Attributes:
        namespace: The namespace this node stands for.
        is_target: True for the target namespace of the query.
        level: Capabilities the process has in this namespace, as far as
            the branch layout tells.
        children: Arena indices of the child nodes (0-2).
    """

    namespace: Namespace
    is_target: bool = False
    level: CapabilityLevel = CapabilityLevel.NONE
    children: tuple[int, ...] = ()


@dataclass(frozen=True)
class ProcessNode:
    """The process under scrutiny; always a leaf.

    Attributes:
        process: The process.
        capabilities: Names of its effective capabilities, in bit order.
        euid: Its effective UID, if known.
    """

    process: Process
    capabilities: tuple[str, ...] = ()
    euid: int | None = None
    children: tuple[int, ...] = ()


BranchNode = Union[NamespaceNode, ProcessNode]


@dataclass(frozen=True)
class BranchTree:
    """A merged process/target tree stored as an arena of nodes.

    Attributes:
        nodes: All nodes; each node appears exactly once.
        root: Arena index of the topmost node.
    """

    nodes: tuple[BranchNode, ...]
    root: int

    @property
    def root_node(self) -> BranchNode:
        return self.nodes[self.root]

    def children(self, node: BranchNode) -> list[BranchNode]:
        """Return the child nodes of ``node``, in order."""
        return [self.nodes[index] for index in node.children]

    def walk(self) -> Iterator[tuple[int, BranchNode]]:
        """Yield ``(depth, node)`` pairs in pre-order, children in order."""
        stack: list[tuple[int, int]] = [(0, self.root)]
        while stack:
            depth, index = stack.pop()
            node = self.nodes[index]
            yield depth, node
            for child in reversed(node.children):
                stack.append((depth + 1, child))

    @property
    def fork(self) -> NamespaceNode | None:
        """The node where process and target branches part, if any."""
        for node in self.nodes:
            if len(node.children) == 2:
                return node  # type: ignore[return-value]
        return None

    @property
    def process_node(self) -> ProcessNode | None:
        for node in self.nodes:
            if isinstance(node, ProcessNode):
                return node
        return None

    @property
    def target(self) -> NamespaceNode | None:
        for node in self.nodes:
            if isinstance(node, NamespaceNode) and node.is_target:
                return node
        return None

    def __len__(self) -> int:
        return len(self.nodes)
