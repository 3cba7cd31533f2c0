"""``nscaps resolve NAMESPACE`` - Show a process and a namespace in their hierarchy.

Renders a tree with at most two branches: one down to the process, one
down to the target namespace. User namespaces are marked with the
capabilities the process has in them, and the target lists the
capabilities gained there.

Exit Codes:
    0 - Tree rendered.
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
from nscaps.cli.output import exit_with_error, print_json, print_tree, tree_to_json
from nscaps.core import resolve_tree
from nscaps.exceptions import NscapsError


@click.command("resolve")
@click.argument("namespace")
@snapshot_option
@pid_option
@click.option(
    "--brief",
    is_flag=True,
    default=False,
    help="Show only a summary statement for the capabilities in the target namespace.",
)
@click.option(
    "--proccaps/--no-proccaps",
    "show_proccaps",
    default=True,
    help="Show the process's own effective capabilities (default: show).",
)
@proc_root_option
@format_option
def resolve_command(
    namespace: str,
    snapshot_path: str,
    pid: int | None,
    brief: bool,
    show_proccaps: bool,
    proc_root: str,
    output_format: str,
) -> None:
    """Show the capabilities of a process in NAMESPACE.

    NAMESPACE is a reference such as "net:[4026531905]", as printed by
    "readlink /proc/$$/ns/net".
    """
    try:
        process, target = lookup_query(snapshot_path, namespace, pid, proc_root)
        tree = resolve_tree(
            process, target, capabilities=process.capabilities, proc_root=proc_root,
        )
    except NscapsError as exc:
        exit_with_error(str(exc), output_format)

    if output_format == "json":
        print_json(tree_to_json(tree))
    else:
        print_tree(tree, brief=brief, show_proccaps=show_proccaps)
