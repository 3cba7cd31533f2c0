"""nscaps CLI - Capabilities of a process in a Linux kernel namespace.

Entry point for the ``nscaps`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    resolve   - Show process and target namespace in their hierarchy.
    classify  - Classify a process's capabilities in a namespace.
    caps      - List the effective capabilities of a process.

Usage::

    nscaps resolve --snapshot snap.yaml --pid 4242 'net:[4026532353]'
    nscaps classify --snapshot snap.yaml 'user:[4026532342]'
    nscaps caps 4242
"""

from __future__ import annotations

import logging

import click

from nscaps import __version__
from nscaps.cli.caps_cmd import caps_command
from nscaps.cli.classify_cmd import classify_command
from nscaps.cli.resolve_cmd import resolve_command


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
def cli(debug: bool) -> None:
    """nscaps: Capabilities of a process in a Linux kernel namespace.

    Applies the user namespace capability rules to tell whether a process
    has no capabilities, its effective capabilities, or all capabilities
    in a target namespace.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register all subcommands
cli.add_command(resolve_command)
cli.add_command(classify_command)
cli.add_command(caps_command)
