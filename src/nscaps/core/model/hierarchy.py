"""Walking the user namespace hierarchy.

User namespaces form a tree through their parent links, rooted at the
initial user namespace. Every other namespace hangs off this tree through
its owning user namespace.
"""

from __future__ import annotations

from typing import Iterator

from nscaps.core.model.namespaces import Namespace
from nscaps.exceptions import InconsistentModelError, MissingOwnerError


def owning_user_namespace(namespace: Namespace) -> Namespace:
    """Return the user namespace governing capabilities in ``namespace``.

    For a user namespace this is the namespace itself; for any other kind it
    is the recorded owner.

    Raises:
        MissingOwnerError: If a non-user namespace has no owner.
    """
    if namespace.is_user:
        return namespace
    if namespace.owner is None:
        raise MissingOwnerError(namespace.ref())
    return namespace.owner


def climb(userns: Namespace) -> Iterator[Namespace]:
    """Yield ``userns`` and then each of its ancestors up to the root.

    Raises:
        InconsistentModelError: If the parent links form a cycle.
    """
    seen: set[int] = set()
    current: Namespace | None = userns
    while current is not None:
        if id(current) in seen:
            raise InconsistentModelError(
                f"user namespace hierarchy above {userns.ref()} "
                f"loops at {current.ref()}"
            )
        seen.add(id(current))
        yield current
        current = current.parent


def ancestry(userns: Namespace) -> list[Namespace]:
    """Return the user namespaces from the root down to ``userns``."""
    chain = list(climb(userns))
    chain.reverse()
    return chain
