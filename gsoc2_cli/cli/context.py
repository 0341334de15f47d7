from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import typer

from gsoc2_cli.client import Gsoc2Cli
from gsoc2_cli.core.config import CliOptions, ConfigError, load_options
from gsoc2_cli.core.errors import BridgeError
from gsoc2_cli.core.result import Err
from gsoc2_cli.output.console import ConsoleProtocol, RichConsole
from gsoc2_cli.output.errors import bridge_error_exit_code, print_bridge_error
from gsoc2_cli.platform.detection import PlatformInfo, detect


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Values of the top-level CLI options, kept on the typer context."""

    config_file: Path | None = None
    options_file: Path | None = None


@dataclass(frozen=True, slots=True)
class CLIContext:
    client: Gsoc2Cli
    platform: PlatformInfo
    console: ConsoleProtocol


def fail(error: BridgeError | ConfigError, console: ConsoleProtocol) -> NoReturn:
    print_bridge_error(error, console)
    raise typer.Exit(code=bridge_error_exit_code(error))


def build_context(ctx: typer.Context) -> CLIContext:
    globals_ = ctx.find_root().obj
    if not isinstance(globals_, GlobalOptions):
        globals_ = GlobalOptions()
    console = RichConsole()

    options = CliOptions()
    if globals_.options_file is not None:
        loaded = load_options(globals_.options_file)
        if isinstance(loaded, Err):
            fail(loaded.error, console)
        options = loaded.value

    return CLIContext(
        client=Gsoc2Cli(globals_.config_file, options, console=console),
        platform=detect(),
        console=console,
    )
