"""Mapping between capability bitmask words and capability names.

Capability bits are numbered across 32-bit words: word 0 holds bits 0-31,
word 1 bits 32-63, and so on. ``CAP_NAMES`` lists the names the kernel
knows today, indexed by bit number; bits beyond the table are named
``cap_<index>`` so that capabilities added by newer kernels still show up.
"""

from __future__ import annotations

import re
from typing import Iterable

WORD_BITS: int = 32

CAP_NAMES: tuple[str, ...] = (
    "cap_chown",
    "cap_dac_override",
    "cap_dac_read_search",
    "cap_fowner",
    "cap_fsetid",
    "cap_kill",
    "cap_setgid",
    "cap_setuid",
    "cap_setpcap",
    "cap_linux_immutable",
    "cap_net_bind_service",
    "cap_net_broadcast",
    "cap_net_admin",
    "cap_net_raw",
    "cap_ipc_lock",
    "cap_ipc_owner",
    "cap_sys_module",
    "cap_sys_rawio",
    "cap_sys_chroot",
    "cap_sys_ptrace",
    "cap_sys_pacct",
    "cap_sys_admin",
    "cap_sys_boot",
    "cap_sys_nice",
    "cap_sys_resource",
    "cap_sys_time",
    "cap_sys_tty_config",
    "cap_mknod",
    "cap_lease",
    "cap_audit_write",
    "cap_audit_control",
    "cap_setfcap",
    "cap_mac_override",
    "cap_mac_admin",
    "cap_syslog",
    "cap_wake_alarm",
    "cap_block_suspend",
    "cap_audit_read",
    "cap_perfmon",
    "cap_bpf",
    "cap_checkpoint_restore",
)
"""Kernel capability names, indexed by capability bit number."""

_CAP_INDEX: dict[str, int] = {name: bit for bit, name in enumerate(CAP_NAMES)}
_SYNTHETIC_NAME = re.compile(r"cap_([0-9]+)")


def cap_name(bit: int) -> str:
    """Return the name of capability ``bit``, synthesizing unknown ones."""
    if 0 <= bit < len(CAP_NAMES):
        return CAP_NAMES[bit]
    return f"cap_{bit}"


def caps_to_names(words: Iterable[int]) -> list[str]:
    """Return the names of all capabilities set in the given words.

    Args:
        words: 32-bit capability words, least significant word first.

    Returns:
        Capability names in ascending bit order.
    """
    names: list[str] = []
    for wordno, word in enumerate(words):
        base = wordno * WORD_BITS
        for bit in range(WORD_BITS):
            if word & (1 << bit):
                names.append(cap_name(base + bit))
    return names


def names_to_caps(names: Iterable[str]) -> list[int]:
    """Encode capability names into 32-bit words, least significant first.

    Accepts both the known names and the synthesized ``cap_<index>`` form.

    Raises:
        ValueError: If a name is neither known nor of the ``cap_<index>``
            form.
    """
    bits: list[int] = []
    for name in names:
        bit = _CAP_INDEX.get(name)
        if bit is None:
            match = _SYNTHETIC_NAME.fullmatch(name)
            if match is None:
                raise ValueError(f"unknown capability name: {name!r}")
            bit = int(match.group(1))
        bits.append(bit)
    if not bits:
        return []
    words = [0] * (max(bits) // WORD_BITS + 1)
    for bit in bits:
        words[bit // WORD_BITS] |= 1 << (bit % WORD_BITS)
    return words
