"""Capability resolution engine.

The three operations offered to presentation layers::

    from nscaps.core import capabilities_of, classify, resolve_tree

    level, euid = classify(process, target)
    tree = resolve_tree(process, target)
    names = capabilities_of(pid)
"""

from nscaps.core.branch import BranchTree, NamespaceNode, ProcessNode, resolve_tree
from nscaps.core.capabilities import CapabilityLevel, capabilities_of
from nscaps.core.classifier import classify

__all__ = [
    "BranchTree",
    "CapabilityLevel",
    "NamespaceNode",
    "ProcessNode",
    "capabilities_of",
    "classify",
    "resolve_tree",
]
