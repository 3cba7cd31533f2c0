"""Capabilities of a process in a target namespace.

Applies the capability rules from user_namespaces(7) to decide whether a
process has no capabilities, its effective capabilities, or all
capabilities inside some target namespace:

1. "A process has a capability inside a user namespace if it is a member
   of that namespace and it has the capability in its effective capability
   set."
2. "If a process has a capability in a user namespace, then it has that
   capability in all child (and further removed descendant) namespaces as
   well."
3. "A process that resides in the parent of the user namespace and whose
   effective user ID matches the owner of the namespace has all
   capabilities in the namespace."

Capabilities in a non-user namespace are governed by the user namespace
owning it, so the rules are evaluated against that owner.
"""

from __future__ import annotations

import logging

from nscaps.core.capabilities.levels import CapabilityLevel
from nscaps.core.model.hierarchy import climb, owning_user_namespace
from nscaps.core.model.namespaces import Namespace, Process
from nscaps.exceptions import MissingNamespaceInfoError, UnknownEffectiveUIDError

logger = logging.getLogger(__name__)


def classify(process: Process, target: Namespace) -> tuple[CapabilityLevel, int | None]:
    """Classify the capabilities ``process`` has in ``target``.

    Args:
        process: The process whose capabilities are sought.
        target: The target namespace, of any kind.

    Returns:
        The capability level and the process's effective UID. The UID is
        None only when no rule needed it.

    Raises:
        MissingNamespaceInfoError: If the process's user namespace is unknown.
        MissingOwnerError: If a non-user target has no owning user namespace.
        UnknownEffectiveUIDError: If the owner UID rule has to be evaluated
            but the process's effective UID is unknown.
    """
    procns = process.user_namespace
    if procns is None:
        raise MissingNamespaceInfoError(process.pid)
    targetns = owning_user_namespace(target)

    # Rule 1: member of the governing user namespace.
    if procns is targetns:
        return CapabilityLevel.EFFECTIVE, process.euid

    # Rule 2: the governing user namespace must be a descendant of the
    # process's user namespace.
    child: Namespace | None = None
    for userns in climb(targetns):
        if userns is procns:
            break
        child = userns
    else:
        logger.debug(
            "PID %d: %s is outside the hierarchy below %s",
            process.pid, targetns.ref(), procns.ref(),
        )
        return CapabilityLevel.NONE, process.euid

    # Rule 3: owner of the user namespace one level below the process.
    if process.euid is None:
        raise UnknownEffectiveUIDError(process.pid)
    if child is not None and child.owner_uid == process.euid:
        return CapabilityLevel.FULL, process.euid
    return CapabilityLevel.EFFECTIVE, process.euid
