"""Capability levels of a process inside a target namespace.

This module defines the three-element classification
L_ns = ({NONE, EFFECTIVE, FULL}, <=) that summarises the privileges a
process has in some namespace, following the capability rules of
user_namespaces(7).

Level Structure
---------------
The levels form a chain (total order):

    NONE  <=  EFFECTIVE  <=  FULL

- **NONE**: the process has no capabilities in the namespace at all.
- **EFFECTIVE**: the process has exactly the capabilities of its own
  effective set (rules 1 and 2).
- **FULL**: the process has all capabilities, because it is joined to an
  ancestor of the namespace and its effective UID owns the user namespace
  one level below (rule 3).

References
----------
.. [UNS7] user_namespaces(7), "Capabilities" and "Effect of capabilities
   within a user namespace". http://man7.org/linux/man-pages/man7/user_namespaces.7.html
"""

from __future__ import annotations

from enum import IntEnum


class CapabilityLevel(IntEnum):
    """Three-element classification: NONE < EFFECTIVE < FULL.

    The integer encoding (0-2) enables direct comparison via the standard
    relational operators, so "at least effective" reads as
    ``level >= CapabilityLevel.EFFECTIVE``.
    """

    NONE = 0
    EFFECTIVE = 1
    FULL = 2

    @property
    def mark(self) -> str:
        """Single-character mark used when rendering branches."""
        return LEVEL_MARKS[self]

    @property
    def summary(self) -> str:
        """Short human-readable description of this level."""
        return LEVEL_SUMMARIES[self]


LEVEL_MARKS: dict[CapabilityLevel, str] = {
    CapabilityLevel.NONE: "⛔",
    CapabilityLevel.EFFECTIVE: "⛛",
    CapabilityLevel.FULL: "✓",
}

LEVEL_SUMMARIES: dict[CapabilityLevel, str] = {
    CapabilityLevel.NONE: "(no capabilities)",
    CapabilityLevel.EFFECTIVE: "(process effective capabilities)",
    CapabilityLevel.FULL: "(ALL capabilities)",
}
