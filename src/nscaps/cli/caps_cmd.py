"""``nscaps caps [PID]`` - List the effective capabilities of a process.

An unreadable process status is not an error: the process is then shown
without capabilities.

Exit Codes:
    0 - Always.
"""

from __future__ import annotations

import os

import click

from nscaps.cli.common import format_option, proc_root_option
from nscaps.cli.output import print_caps, print_json
from nscaps.core.capabilities import capabilities_of, process_effective_uid


@click.command("caps")
@click.argument("pid", type=int, required=False)
@proc_root_option
@format_option
def caps_command(pid: int | None, proc_root: str, output_format: str) -> None:
    """List the effective capabilities of process PID (default: this process)."""
    if pid is None:
        pid = os.getpid()
    caps = capabilities_of(pid, proc_root)

    if output_format == "json":
        print_json({
            "pid": pid,
            "euid": process_effective_uid(pid, proc_root),
            "capabilities": caps,
        })
    else:
        print_caps(pid, caps)
