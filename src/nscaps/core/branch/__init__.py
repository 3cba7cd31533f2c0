"""Process and target branches, and their merged tree.

Submodules
----------
- ``models``: NamespaceNode, ProcessNode, BranchTree arena.
- ``chains``: process_chain, target_chain.
- ``merge``: merge_chains.
- ``resolve``: resolve_tree, the end-to-end query.
"""

from nscaps.core.branch.chains import process_chain, target_chain
from nscaps.core.branch.merge import merge_chains
from nscaps.core.branch.models import BranchNode, BranchTree, NamespaceNode, ProcessNode
from nscaps.core.branch.resolve import resolve_tree

__all__ = [
    "BranchNode",
    "BranchTree",
    "NamespaceNode",
    "ProcessNode",
    "merge_chains",
    "process_chain",
    "resolve_tree",
    "target_chain",
]
