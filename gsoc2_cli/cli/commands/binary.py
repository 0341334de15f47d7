from __future__ import annotations

import typer

from gsoc2_cli.cli.context import build_context, fail
from gsoc2_cli.core.result import Err
from gsoc2_cli.output.console import Style
from gsoc2_cli.platform.distributions import distribution_for


def path(ctx: typer.Context) -> None:
    """Print the absolute path of the gsoc2-cli binary."""
    cli = build_context(ctx)
    result = cli.client.get_path()
    if isinstance(result, Err):
        fail(result.error, cli.console)
    typer.echo(str(result.value))


def info(ctx: typer.Context) -> None:
    """Show the detected platform and where the binary comes from."""
    cli = build_context(ctx)
    console = cli.console

    console.print(f"platform: {cli.platform}")
    distribution = distribution_for(cli.platform)
    if distribution is None:
        console.print("distribution: none (unsupported platform)", Style.DIM)
    else:
        console.print(f"distribution: {distribution.package_name} ({distribution.subpath})")

    result = cli.client.resolver.resolve()
    if isinstance(result, Err):
        fail(result.error, console)
    console.print(f"binary: {result.value.path}")
    console.print(f"source: {result.value.source}", Style.DIM)
