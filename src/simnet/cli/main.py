"""Main CLI entry point for simnet."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import click
from rich.console import Console

from simnet import __version__

console = Console()

# Default path (can be overridden with -d or SIMNET_DNS)
DEFAULT_DNS = "examples/dns.yml"


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.dns_path: Path | None = None
        self.verbose: bool = False
        self._dns: Any = None

    @property
    def dns(self) -> Any:
        """Lazy-load the DNS table, falling back to a fresh table."""
        if self._dns is None:
            from simnet.core.dns import DnsTable

            if self.dns_path and self.dns_path.exists():
                self._dns = DnsTable.load(self.dns_path)
            else:
                self._dns = DnsTable()
        return self._dns


pass_context = click.make_pass_decorator(Context, ensure=True)


def configure_logging(verbose: bool) -> None:
    """Route library debug logging through rich when verbose."""
    if not verbose:
        return
    from rich.logging import RichHandler

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    root = logging.getLogger("simnet")
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)


@click.group()
@click.version_option(version=__version__, prog_name="simnet")
@click.option(
    "-d",
    "--dns",
    type=click.Path(exists=False, path_type=Path),
    default=DEFAULT_DNS,
    envvar="SIMNET_DNS",
    show_envvar=True,
    help="Path to DNS table YAML file",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@pass_context
def cli(ctx: Context, dns: Path, verbose: bool) -> None:
    """
    Simnet - Deterministic address resolution.

    Resolve host strings against a simulated DNS table and inspect
    the table's records.
    """
    ctx.dns_path = dns
    ctx.verbose = verbose
    configure_logging(verbose)


# Import and register subcommands
from simnet.cli.resolve import resolve
from simnet.cli.validate import validate

cli.add_command(resolve)
cli.add_command(validate)


@cli.command()
@pass_context
def records(ctx: Context) -> None:
    """List all records in the DNS table."""
    from rich.table import Table

    from simnet.core.dns import DnsTableError

    try:
        table = ctx.dns
    except DnsTableError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if len(table) == 0:
        console.print("[yellow]No DNS records[/yellow]")
        return

    rich_table = Table(title="DNS Records")
    rich_table.add_column("Hostname", style="cyan")
    rich_table.add_column("IP")
    rich_table.add_column("Family", justify="right")

    for hostname, ip in table.records():
        rich_table.add_row(hostname, str(ip), f"IPv{ip.version}")

    console.print(rich_table)


if __name__ == "__main__":
    cli()
