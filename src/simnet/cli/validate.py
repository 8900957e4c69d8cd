"""Validation CLI command."""

from __future__ import annotations

import click
from rich.console import Console

from simnet.cli.main import Context, pass_context

console = Console()


def report(errors: list[str], warnings: list[str], strict: bool) -> bool:
    """Print the findings and return whether validation passed."""
    console.print(f"\n[bold]Summary:[/bold] {len(errors)} error(s), {len(warnings)} warning(s)")
    for err in errors:
        console.print(f"  [red]•[/red] {err}")
    for warn in warnings:
        console.print(f"  [yellow]•[/yellow] {warn}")

    if errors or (strict and warnings):
        reason = " (strict mode)" if not errors else ""
        console.print(f"[red bold]Validation failed{reason}[/red bold]")
        return False
    console.print("[green bold]Validation passed[/green bold]")
    return True


@click.command()
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on warnings",
)
@pass_context
def validate(ctx: Context, strict: bool) -> None:
    """
    Validate a DNS table file.

    Checks schema compliance and flags records that can never be
    used because their hostname is itself an IP literal.

    Examples:

        # Basic validation
        simnet validate

        # Treat unreachable records as errors
        simnet -d tables/dns.yml validate --strict
    """
    from simnet.core.address import parse_ipv4, parse_ipv6
    from simnet.core.dns import DnsTable, DnsTableError

    errors: list[str] = []
    warnings: list[str] = []

    console.print(f"[bold]Validating DNS table {ctx.dns_path}...[/bold]")
    if not ctx.dns_path or not ctx.dns_path.exists():
        errors.append(f"DNS table not found: {ctx.dns_path}")
    else:
        try:
            table = DnsTable.load(ctx.dns_path)
        except DnsTableError as e:
            errors.append(f"DNS table validation failed: {e}")
        else:
            console.print(f"  [green]✓[/green] {len(table)} records loaded")
            # Literal hosts never reach the DNS table
            warnings.extend(
                f"Record '{hostname}' is an IP literal and is never looked up"
                for hostname, _ in table.records()
                if parse_ipv4(hostname) is not None or parse_ipv6(hostname) is not None
            )

    if not report(errors, warnings, strict):
        raise SystemExit(1)
