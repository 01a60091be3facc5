"""
arplookup CLI - Main entry point for the command-line interface.
"""

import logging
import sys

import click
from rich.console import Console

from arplookup import __version__

console = Console()


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


@click.group()
@click.version_option(version=__version__, prog_name="arplookup")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """arplookup - Local neighbor table utilities

    Resolve IP addresses on the local segment to the link-layer
    addresses the kernel currently has for them.
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["console"] = console


# Import and register subcommand groups
from arplookup.neighbors.cli import neighbors

main.add_command(neighbors)


if __name__ == "__main__":
    main()
