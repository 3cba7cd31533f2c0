"""Rich output formatting helpers for the nscaps CLI.

Renders merged process/target trees, capability lists and classification
results, either as colored terminal output or as JSON.

Level Color Mapping:
    NONE = bold red, EFFECTIVE = yellow, FULL = bold green
"""

from __future__ import annotations

import json
import sys
from typing import Any, NoReturn

import click
from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from nscaps.core.branch import BranchTree, NamespaceNode, ProcessNode
from nscaps.core.capabilities import CAP_NAMES, CapabilityLevel
from nscaps.core.model import NamespaceKind

CAPS_PER_LINE: int = 4

_LEVEL_STYLES: dict[CapabilityLevel, str] = {
    CapabilityLevel.NONE: "bold red",
    CapabilityLevel.EFFECTIVE: "yellow",
    CapabilityLevel.FULL: "bold green",
}

_KIND_STYLES: dict[NamespaceKind, str] = {
    NamespaceKind.MNT: "blue",
    NamespaceKind.CGROUP: "magenta",
    NamespaceKind.UTS: "cyan",
    NamespaceKind.IPC: "bright_blue",
    NamespaceKind.PID: "bright_magenta",
    NamespaceKind.NET: "bright_cyan",
    NamespaceKind.TIME: "white",
}

console = Console()


def level_style(level: CapabilityLevel) -> str:
    """Return the Rich style string for a capability level."""
    return _LEVEL_STYLES.get(level, "white")


def format_caps(caps: list[str] | tuple[str, ...]) -> list[str]:
    """Lay out capability names in aligned columns, four per line."""
    if not caps:
        return []
    width = max(len(cap) for cap in caps)
    return [
        " ".join(cap.ljust(width) for cap in caps[pos:pos + CAPS_PER_LINE]).rstrip()
        for pos in range(0, len(caps), CAPS_PER_LINE)
    ]


def target_capabilities(tree: BranchTree, level: CapabilityLevel) -> list[str]:
    """Return the capabilities a process gains in a target of ``level``."""
    if level is CapabilityLevel.FULL:
        return list(CAP_NAMES)
    if level is CapabilityLevel.EFFECTIVE:
        proc = tree.process_node
        return list(proc.capabilities) if proc is not None else []
    return []


def _namespace_label(node: NamespaceNode) -> Text:
    ns = node.namespace
    label = Text()
    if ns.is_user:
        label.append(f"{node.level.mark} ")
        style = level_style(node.level)
    else:
        style = _KIND_STYLES.get(ns.kind, "white")
    if node.is_target:
        label.append("target ", style="bold")
    label.append(ns.ref(), style=style)
    if ns.is_user and ns.owner_uid is not None:
        label.append(f" owner UID {ns.owner_uid}", style="dim")
    return label


def _process_label(node: ProcessNode) -> Text:
    label = Text("process ")
    label.append(f'"{node.process.name}"', style="bold")
    label.append(f" ({node.process.pid})")
    if node.euid is not None:
        label.append(f" euid {node.euid}", style="dim")
    return label


def _properties(
    tree: BranchTree,
    node: NamespaceNode | ProcessNode,
    brief: bool,
    show_proccaps: bool,
) -> list[str]:
    if isinstance(node, ProcessNode):
        if not show_proccaps:
            return []
        return format_caps(node.capabilities) or [CapabilityLevel.NONE.summary]
    if not node.is_target:
        return []
    if brief or node.level is CapabilityLevel.NONE:
        return [node.level.summary]
    return format_caps(target_capabilities(tree, node.level)) or [
        CapabilityLevel.NONE.summary
    ]


def render_tree(tree: BranchTree, brief: bool = False, show_proccaps: bool = True) -> Tree:
    """Build a Rich tree for a merged branch tree.

    Args:
        tree: The merged process/target tree.
        brief: Summarize target capabilities instead of listing them.
        show_proccaps: List the process's own effective capabilities.
    """
    def label(node: NamespaceNode | ProcessNode) -> Text:
        text = (
            _process_label(node) if isinstance(node, ProcessNode)
            else _namespace_label(node)
        )
        for prop in _properties(tree, node, brief, show_proccaps):
            text.append(f"\n⋄─ {prop}", style="dim")
        return text

    root = Tree(label(tree.root_node), guide_style="dim")
    stack: list[tuple[Tree, int]] = [
        (root, child) for child in reversed(tree.root_node.children)
    ]
    while stack:
        parent, index = stack.pop()
        node = tree.nodes[index]
        branch = parent.add(label(node))
        stack.extend((branch, child) for child in reversed(node.children))
    return root


def print_tree(tree: BranchTree, brief: bool = False, show_proccaps: bool = True) -> None:
    """Print a merged branch tree to the console."""
    console.print(render_tree(tree, brief=brief, show_proccaps=show_proccaps))


def tree_to_json(tree: BranchTree, index: int | None = None) -> dict[str, Any]:
    """Convert a merged branch tree into a nested JSON-serializable dict."""
    node = tree.nodes[tree.root if index is None else index]
    if isinstance(node, ProcessNode):
        return {
            "type": "process",
            "pid": node.process.pid,
            "name": node.process.name,
            "euid": node.euid,
            "capabilities": list(node.capabilities),
        }
    return {
        "type": "namespace",
        "namespace": node.namespace.ref(),
        "target": node.is_target,
        "level": node.level.name,
        "children": [tree_to_json(tree, child) for child in node.children],
    }


def print_caps(pid: int, caps: list[str]) -> None:
    """Print the effective capabilities of a process."""
    console.print(Text.assemble(("process ", ""), (str(pid), "bold")))
    for line in format_caps(caps) or [CapabilityLevel.NONE.summary]:
        console.print(f"  ⋄─ {line}", markup=False, highlight=False)


def print_classification(pid: int, target: str, level: CapabilityLevel, euid: int | None) -> None:
    """Print a one-line classification result."""
    console.print(Text.assemble(
        ("PID ", ""), (str(pid), "bold"),
        (" in ", ""), (target, "bold"), (": ", ""),
        (level.name, level_style(level)), (f" {level.summary}", "dim"),
        (f"  euid {euid if euid is not None else '?'}", ""),
    ))


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout."""
    click.echo(json.dumps(data, indent=2))


def exit_with_error(message: str, output_format: str) -> NoReturn:
    """Report ``message`` in the requested format and exit with code 2."""
    if output_format == "json":
        click.echo(json.dumps({"error": message}))
    else:
        click.echo(f"Error: {message}")
    sys.exit(2)
