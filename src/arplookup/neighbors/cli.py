"""
Neighbor table CLI commands.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import ipaddress
import json
import sys
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from arplookup.neighbors.config import NeighborConfig
from arplookup.neighbors.core import NeighborResolver, build_table
from arplookup.neighbors.errors import NeighborLookupError
from arplookup.neighbors.source import is_supported_platform


def _resolver(ctx: click.Context) -> NeighborResolver:
    config = ctx.obj["config"]
    return NeighborResolver(config=config)


def _fail(console: Console, error: NeighborLookupError) -> NoReturn:
    console.print(f"[red]Error ({error.kind.value}):[/red] {escape(str(error))}")
    raise SystemExit(2)


class IPAddressParam(click.ParamType):
    """Click parameter accepting an IPv4 or IPv6 address."""

    name = "ip"

    def convert(self, value, param, ctx):
        try:
            return ipaddress.ip_address(value)
        except ValueError:
            self.fail(f"{value!r} is not a valid IP address", param, ctx)


@click.group()
@click.option("--ip-command", envvar="ARPLOOKUP_IP_COMMAND", help="iproute2 binary to run")
@click.pass_context
def neighbors(ctx: click.Context, ip_command: str | None) -> None:
    """Local neighbor table (ARP / NDP cache) lookups."""
    ctx.ensure_object(dict)
    config = NeighborConfig.from_env()
    if ip_command:
        config.ip_command = ip_command
    ctx.obj["config"] = config
    ctx.obj.setdefault("console", Console())


@neighbors.command()
@click.option("--all", "-a", "show_all", is_flag=True, help="Include unresolved entries")
@click.option("--device", "-d", help="Only show entries on this interface")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def table(ctx: click.Context, show_all: bool, device: str | None, json_output: bool):
    """Show the current neighbor table.

    By default only neighbors with a resolved link-layer address
    are shown.

    Examples:
        arplookup neighbors table
        arplookup neighbors table --all -d eth0
        arplookup neighbors table --json
    """
    console = ctx.obj["console"]

    try:
        entries = _resolver(ctx).entries()
    except NeighborLookupError as e:
        _fail(console, e)

    if device:
        entries = [e for e in entries if e.dev == device]

    if json_output:
        if show_all:
            data = [e.to_dict() for e in entries]
        else:
            data = {str(ip): str(ll) for ip, ll in build_table(entries).items()}
        click.echo(json.dumps(data, indent=2))
        return

    if show_all:
        rows = [
            (str(e.dst), str(e.lladdr) if e.lladdr else "-", e.dev, ", ".join(s.value for s in e.state))
            for e in entries
        ]
    else:
        devices = {}
        for e in entries:
            if e.lladdr is not None:
                devices[e.dst] = e.dev
        rows = [
            (str(ip), str(ll), devices[ip], "")
            for ip, ll in build_table(entries).items()
        ]

    if not rows:
        console.print("[yellow]No neighbors found[/yellow]")
        return

    output = Table(box=None)
    output.add_column("IP Address", style="white")
    output.add_column("Link-Layer Address", style="cyan")
    output.add_column("Device", style="green")
    if show_all:
        output.add_column("State", style="dim")

    for ip, lladdr, dev, state in rows:
        if show_all:
            output.add_row(ip, lladdr, dev, state)
        else:
            output.add_row(ip, lladdr, dev)

    console.print(output)
    console.print(f"\n[dim]Total: {len(rows)} neighbor(s)[/dim]")


@neighbors.command()
@click.argument("ip", type=IPAddressParam())
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def lookup(ctx: click.Context, ip, json_output: bool):
    """Look up the link-layer address for an IP address.

    Exits with status 1 when no resolved neighbor matches.

    Examples:
        arplookup neighbors lookup 192.168.1.1
        arplookup neighbors lookup fe80::1 --json
    """
    console = ctx.obj["console"]

    try:
        lladdr = _resolver(ctx).lookup(ip)
    except NeighborLookupError as e:
        _fail(console, e)

    if json_output:
        click.echo(json.dumps({"ip": str(ip), "lladdr": str(lladdr) if lladdr else None}))
    elif lladdr is not None:
        click.echo(str(lladdr))
    else:
        console.print(f"[yellow]No neighbor found for {ip}[/yellow]")

    if lladdr is None:
        raise SystemExit(1)


@neighbors.command()
@click.pass_context
def check(ctx: click.Context):
    """Check whether neighbor lookups can run on this host."""
    console = ctx.obj["console"]
    config = ctx.obj["config"]

    if not is_supported_platform():
        console.print(f"[red]Unsupported platform:[/red] {sys.platform}")
        raise SystemExit(1)

    console.print(f"[cyan]Platform:[/cyan] {sys.platform}")
    console.print(f"[cyan]Command:[/cyan] {' '.join(config.command())}")

    errors = config.validate()
    for error in errors:
        console.print(f"[red]Error:[/red] {escape(error)}")
    if errors:
        raise SystemExit(1)

    console.print("[green]OK[/green]")
