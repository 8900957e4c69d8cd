"""Address resolution CLI command."""

from __future__ import annotations

import click
from rich.console import Console

from simnet.cli.main import Context, pass_context

console = Console()
# Diagnostics go to stderr so stdout stays parseable
err_console = Console(stderr=True)


@click.command()
@click.argument("targets", nargs=-1, required=True)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["endpoint", "ip", "json"]),
    default="endpoint",
    help="Output format",
)
@click.option(
    "--port",
    "-p",
    type=click.IntRange(0, 65535),
    help="Resolve each target as a bare host with this port",
)
@pass_context
def resolve(ctx: Context, targets: tuple[str, ...], output_format: str, port: int | None) -> None:
    """
    Resolve hosts to socket addresses.

    Each TARGET is a "host:port" string, or a bare host when --port
    is given.

    Examples:

        # Resolve a registered name
        simnet resolve madsim.io:1

        # Resolve several targets as JSON
        simnet resolve 127.0.0.1:80 "[::1]:443" --format json

        # Bare hosts with a shared port
        simnet resolve localhost db.internal --port 5432
    """
    import json

    from simnet.core.dns import DnsTableError
    from simnet.core.resolver import MalformedPortError, ResolutionError
    from simnet.core.resolver import resolve as resolve_address

    try:
        table = ctx.dns
    except DnsTableError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    results: dict[str, list[str]] = {}
    failed = False

    for target in targets:
        spec = (target, port) if port is not None else target
        try:
            addrs = list(resolve_address(spec, table).result())
        except MalformedPortError as e:
            err_console.print(f"[red]Malformed address:[/red] {e}")
            failed = True
            continue
        except ResolutionError as e:
            err_console.print(f"[red]Resolution error:[/red] {e}")
            failed = True
            continue

        if output_format == "ip":
            results[target] = [str(a.ip) for a in addrs]
        else:
            results[target] = [str(a) for a in addrs]

    if output_format == "json":
        console.print(json.dumps(results, indent=2), markup=False, highlight=False, soft_wrap=True)
    else:
        for values in results.values():
            for value in values:
                console.print(value, markup=False, highlight=False)

    if failed:
        raise SystemExit(1)
