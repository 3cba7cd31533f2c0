"""Options and lookups shared by the nscaps subcommands."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path

import click

from nscaps.core.capabilities import PROC_ROOT, process_effective_uid
from nscaps.core.model import Namespace, Process
from nscaps.snapshot import load_snapshot

snapshot_option = click.option(
    "--snapshot", "-s", "snapshot_path",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="YAML or JSON namespace discovery snapshot.",
)

pid_option = click.option(
    "--pid", "-p",
    type=int,
    default=None,
    help="PID of process for which to calculate capabilities (default: this process).",
)

proc_root_option = click.option(
    "--proc-root",
    type=click.Path(file_okay=False),
    default=PROC_ROOT,
    show_default=True,
    help="Mount point of the proc filesystem.",
)

format_option = click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)


def lookup_query(
    snapshot_path: str,
    namespace: str,
    pid: int | None,
    proc_root: str | Path,
) -> tuple[Process, Namespace]:
    """Load the snapshot and find the process and target namespace.

    A process without a recorded effective UID gets it from its status,
    if readable; the snapshot itself stays untouched.

    Raises:
        SnapshotError: If the snapshot, process or namespace are unusable.
    """
    snapshot = load_snapshot(snapshot_path)
    process = snapshot.process(pid if pid is not None else os.getpid())
    target = snapshot.lookup(namespace)
    if process.euid is None:
        euid = process_effective_uid(process.pid, proc_root)
        if euid is not None:
            process = dataclasses.replace(process, euid=euid)
    return process, target
