"""Resolving the combined process/target tree for a single query."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from nscaps.core.branch.chains import process_chain, target_chain
from nscaps.core.branch.merge import merge_chains
from nscaps.core.branch.models import BranchTree
from nscaps.core.capabilities.status import PROC_ROOT
from nscaps.core.classifier import classify
from nscaps.core.model.namespaces import Namespace, Process

logger = logging.getLogger(__name__)


def resolve_tree(
    process: Process,
    target: Namespace,
    capabilities: Sequence[str] | None = None,
    proc_root: str | Path = PROC_ROOT,
) -> BranchTree:
    """Classify ``process`` in ``target`` and build the combined tree.

    Args:
        process: The process whose capabilities are sought.
        target: The target namespace.
        capabilities: The process's effective capability names; read from
            its status when not given.
        proc_root: Mount point of the proc filesystem.

    Raises:
        NscapsError: Any classification or merge error, unchanged.
    """
    level, _ = classify(process, target)
    logger.debug("PID %d has %s capabilities in %s", process.pid, level.name, target.ref())
    return merge_chains(
        process_chain(process, capabilities, proc_root),
        target_chain(target, level),
    )
