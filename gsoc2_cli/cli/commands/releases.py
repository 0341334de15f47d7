from __future__ import annotations

import typer

from gsoc2_cli.cli.context import CLIContext, build_context, fail
from gsoc2_cli.command.releases import CommitsOptions
from gsoc2_cli.core.errors import BridgeError, ErrorCode
from gsoc2_cli.core.result import Err, Result


releases_app = typer.Typer(add_completion=False, no_args_is_help=True)


def _emit(cli: CLIContext, result: Result[str | None, BridgeError]) -> None:
    if isinstance(result, Err):
        fail(result.error, cli.console)
    if result.value:
        typer.echo(result.value, nl=not result.value.endswith("\n"))


@releases_app.command("propose-version")
def propose_version(ctx: typer.Context) -> None:
    """Propose a version name for a new release."""
    cli = build_context(ctx)
    _emit(cli, cli.client.releases.propose_version())


@releases_app.command("new")
def new(
    ctx: typer.Context,
    release: str = typer.Argument(..., help="Release version."),
    project: list[str] = typer.Option([], "--project", "-p", help="Project slug (repeatable)."),
) -> None:
    """Create a new release."""
    cli = build_context(ctx)
    _emit(cli, cli.client.releases.new(release, projects=project))


@releases_app.command("set-commits")
def set_commits(
    ctx: typer.Context,
    release: str = typer.Argument(..., help="Release version."),
    auto: bool = typer.Option(False, "--auto", help="Use the current commit."),
    repo: str | None = typer.Option(None, "--repo", help="Full repository name."),
    commit: str | None = typer.Option(None, "--commit", help="Last commit of the release."),
    previous_commit: str | None = typer.Option(
        None, "--previous-commit", help="Last commit of the previous release."
    ),
    ignore_missing: bool = typer.Option(
        False, "--ignore-missing", help="Do not fail if the previous release commit is unknown."
    ),
    ignore_empty: bool = typer.Option(
        False, "--ignore-empty", help="Exit quietly if no new commits are found."
    ),
) -> None:
    """Associate commits with a release."""
    cli = build_context(ctx)
    options = CommitsOptions(
        auto=auto,
        repo=repo,
        commit=commit,
        previous_commit=previous_commit,
        ignore_missing=ignore_missing,
        ignore_empty=ignore_empty,
    )
    try:
        result = cli.client.releases.set_commits(release, options)
    except ValueError as e:
        cli.console.error(str(e))
        raise typer.Exit(code=int(ErrorCode.USER_ERROR)) from e
    _emit(cli, result)


@releases_app.command("finalize")
def finalize(
    ctx: typer.Context,
    release: str = typer.Argument(..., help="Release version."),
) -> None:
    """Mark a release as finalized."""
    cli = build_context(ctx)
    _emit(cli, cli.client.releases.finalize(release))


@releases_app.command("list-deploys")
def list_deploys(
    ctx: typer.Context,
    release: str = typer.Argument(..., help="Release version."),
) -> None:
    """List the deploys of a release."""
    cli = build_context(ctx)
    _emit(cli, cli.client.releases.list_deploys(release))
