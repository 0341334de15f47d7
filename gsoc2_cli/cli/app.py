from __future__ import annotations

from pathlib import Path

import typer

from gsoc2_cli import __version__
from gsoc2_cli.cli.commands.binary import info, path
from gsoc2_cli.cli.commands.releases import releases_app
from gsoc2_cli.cli.context import GlobalOptions


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(path)
app.command()(info)

# Sub-apps
app.add_typer(releases_app, name="releases")


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    config_file: Path | None = typer.Option(
        None,
        "--config-file",
        help="Properties file for gsoc2-cli (exported as GSOC2_PROPERTIES).",
    ),
    options_file: Path | None = typer.Option(
        None,
        "--options-file",
        help="TOML file with url, auth_token, org, project, ... options.",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    ctx.obj = GlobalOptions(config_file=config_file, options_file=options_file)


def main() -> None:
    app()
