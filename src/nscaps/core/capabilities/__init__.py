"""Linux capabilities: levels, names, and per-process effective sets.

Submodules
----------
- ``levels``: CapabilityLevel IntEnum (NONE < EFFECTIVE < FULL).
- ``names``: CAP_NAMES table, word <-> name mapping.
- ``status``: reading CapEff and Uid from ``/proc/<pid>/status``.

All public names are re-exported here::

    from nscaps.core.capabilities import CapabilityLevel, capabilities_of
"""

from nscaps.core.capabilities.levels import CapabilityLevel
from nscaps.core.capabilities.names import CAP_NAMES, caps_to_names, names_to_caps
from nscaps.core.capabilities.status import (
    PROC_ROOT,
    capabilities_of,
    parse_effective_caps,
    parse_effective_uid,
    process_effective_caps,
    process_effective_uid,
    read_status,
)

__all__ = [
    "CAP_NAMES",
    "CapabilityLevel",
    "PROC_ROOT",
    "capabilities_of",
    "caps_to_names",
    "names_to_caps",
    "parse_effective_caps",
    "parse_effective_uid",
    "process_effective_caps",
    "process_effective_uid",
    "read_status",
]
