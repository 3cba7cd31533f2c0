"""``nscaps classify NAMESPACE`` - Classify a process's capabilities in a namespace.

Exit Codes:
    0 - Classification printed.
    2 - Snapshot, process or namespace unusable, or inconsistent model.
"""

from __future__ import annotations

import click

from nscaps.cli.common import (
    format_option,
    lookup_query,
    pid_option,
    proc_root_option,
    snapshot_option,
)
from nscaps.cli.output import exit_with_error, print_classification, print_json
from nscaps.core import classify
from nscaps.exceptions import NscapsError


@click.command("classify")
@click.argument("namespace")
@snapshot_option
@pid_option
@proc_root_option
@format_option
def classify_command(
    namespace: str,
    snapshot_path: str,
    pid: int | None,
    proc_root: str,
    output_format: str,
) -> None:
    """Tell whether a process has no, its effective, or all capabilities in NAMESPACE."""
    try:
        process, target = lookup_query(snapshot_path, namespace, pid, proc_root)
        level, euid = classify(process, target)
    except NscapsError as exc:
        exit_with_error(str(exc), output_format)

    if output_format == "json":
        print_json({
            "pid": process.pid,
            "namespace": target.ref(),
            "level": level.name,
            "euid": euid,
        })
    else:
        print_classification(process.pid, target.ref(), level, euid)
