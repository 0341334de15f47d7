"""Running the gsoc2-cli binary.

The Executor resolves the binary, builds the child environment from
`CliOptions` and runs the process in one of two modes:

- buffered (default): wait for exit, return stdout; nonzero exit is an Err.
- live: stream output to the terminal (or discard it when silent) and
  return Ok(None) once the process exits, whatever its exit status.

Every call spawns exactly one child process with its own copy of the
environment; nothing is shared between calls.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from gsoc2_cli.core.config import CliOptions
from gsoc2_cli.core.errors import BridgeError, ProcessFailure
from gsoc2_cli.core.result import Err, Ok, Result
from gsoc2_cli.output.console import ConsoleProtocol
from gsoc2_cli.platform.process import Arg, run, run_async, run_live, run_live_async, to_argv
from gsoc2_cli.platform.resolver import BinaryResolver

__all__ = [
    "CONFIG_FILE_ENV",
    "CUSTOM_HEADER_ENV",
    "OPTION_ENV_VARS",
    "Executor",
    "build_environment",
    "header_args",
]

CONFIG_FILE_ENV = "GSOC2_PROPERTIES"
CUSTOM_HEADER_ENV = "CUSTOM_HEADER"

# CliOptions field -> environment variable, in the order they are applied
OPTION_ENV_VARS: tuple[tuple[str, str], ...] = (
    ("url", "GSOC2_URL"),
    ("auth_token", "GSOC2_AUTH_TOKEN"),
    ("api_key", "GSOC2_API_KEY"),
    ("dsn", "GSOC2_DSN"),
    ("org", "GSOC2_ORG"),
    ("project", "GSOC2_PROJECT"),
    ("vcs_remote", "GSOC2_VCS_REMOTE"),
)


def build_environment(
    base: Mapping[str, str],
    config_file: str | os.PathLike[str] | None = None,
    options: CliOptions | None = None,
) -> dict[str, str]:
    """Copy `base` and overlay the variables derived from the options.

    Empty values are treated as absent.
    """
    env = dict(base)
    if config_file:
        env[CONFIG_FILE_ENV] = os.fspath(config_file)
    if options is None:
        return env
    for field_name, var in OPTION_ENV_VARS:
        value = getattr(options, field_name)
        if value:
            env[var] = value
    if options.custom_header:
        env[CUSTOM_HEADER_ENV] = options.custom_header
    return env


def header_args(options: CliOptions | None) -> list[str]:
    """`--header key:value` pairs, unless custom_header takes precedence."""
    if options is None or options.custom_header or not options.headers:
        return []
    args: list[str] = []
    for key, value in options.headers.items():
        args.extend(["--header", f"{key}:{value}"])
    return args


class Executor:
    """Runs the resolved binary.

    Usage:
        executor = Executor(BinaryResolver())
        match executor.execute(["--version"]):
            case Ok(output):
                print(output.strip())
            case Err(error):
                print(error)
    """

    def __init__(
        self,
        resolver: BinaryResolver | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        console: ConsoleProtocol | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            resolver: Locates the binary (a default resolver if None)
            environ: Base environment for children (os.environ at call time if None)
            console: Receives warnings about live invocations
        """
        self._resolver = resolver or BinaryResolver()
        self._environ = environ
        self._console = console

    @property
    def resolver(self) -> BinaryResolver:
        return self._resolver

    def execute(
        self,
        args: Sequence[Arg],
        live: bool = False,
        silent: bool = False,
        config_file: str | Path | None = None,
        options: CliOptions | None = None,
    ) -> Result[str | None, BridgeError]:
        """Run the binary with `args`.

        Args:
            args: Arguments, usually from prepare_command/serialize_options
            live: Stream output instead of capturing it
            silent: In live mode, discard output
            config_file: Exported as GSOC2_PROPERTIES
            options: Exported as GSOC2_* variables / --header arguments

        Returns:
            Buffered: Ok(stdout) or Err(ProcessFailure).
            Live: Ok(None) after exit, even on nonzero status; Err only if the
            process could not be started.
            Both: Err(UnsupportedPlatform | BinaryNotFound) if resolution fails.
        """
        prepared = self._prepare(args, config_file, options)
        if isinstance(prepared, Err):
            return prepared
        argv, env = prepared.value

        if not live:
            return run(argv, env)
        return self._live_result(argv, run_live(argv, env, silent=silent))

    async def execute_async(
        self,
        args: Sequence[Arg],
        live: bool = False,
        silent: bool = False,
        config_file: str | Path | None = None,
        options: CliOptions | None = None,
    ) -> Result[str | None, BridgeError]:
        """Awaitable execute() with the same contract.

        Uses asyncio subprocesses, so concurrent calls need no threads.
        """
        prepared = self._prepare(args, config_file, options)
        if isinstance(prepared, Err):
            return prepared
        argv, env = prepared.value

        if not live:
            return await run_async(argv, env)
        return self._live_result(argv, await run_live_async(argv, env, silent=silent))

    def _prepare(
        self,
        args: Sequence[Arg],
        config_file: str | Path | None,
        options: CliOptions | None,
    ) -> Result[tuple[list[Arg], dict[str, str]], BridgeError]:
        """Resolve the binary and build the argument vector and environment."""
        resolved = self._resolver.resolve_path()
        if isinstance(resolved, Err):
            return resolved

        base = self._environ if self._environ is not None else os.environ
        env = build_environment(base, config_file, options)
        argv: list[Arg] = [resolved.value, *header_args(options), *args]
        return Ok((argv, env))

    def _live_result(
        self,
        argv: list[Arg],
        result: Result[int, ProcessFailure],
    ) -> Result[str | None, BridgeError]:
        match result:
            case Err() as failure:
                return failure
            case Ok(returncode) if returncode != 0 and self._console is not None:
                # exit status is not part of the live-mode result
                self._console.warning(f"{to_argv(argv[:1])[0]} exited with status {returncode}")
        return Ok(None)
