"""Interface to and wrapper around the `gsoc2-cli` executable."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from gsoc2_cli.command.executor import Executor
from gsoc2_cli.command.releases import Releases
from gsoc2_cli.core.config import CliOptions
from gsoc2_cli.core.errors import BridgeError, ResolveError
from gsoc2_cli.core.result import Result
from gsoc2_cli.output.console import ConsoleProtocol
from gsoc2_cli.platform.process import Arg
from gsoc2_cli.platform.resolver import BinaryResolver

__all__ = ["Gsoc2Cli"]


class Gsoc2Cli:
    """Entry point for driving the binary from Python.

    Commands are grouped into namespaces (`releases`). A config file, if
    given, overrides the binary's default lookup of its properties file.

    Usage:
        cli = Gsoc2Cli(options=CliOptions(org="acme", project="web"))
        match cli.releases.propose_version():
            case Ok(version):
                print(version)
            case Err(error):
                print(error)
    """

    def __init__(
        self,
        config_file: str | Path | None = None,
        options: CliOptions | None = None,
        *,
        resolver: BinaryResolver | None = None,
        console: ConsoleProtocol | None = None,
    ) -> None:
        self.config_file = config_file
        self.options = options or CliOptions()
        self._executor = Executor(resolver, console=console)
        self.releases = Releases(self._executor, config_file=config_file, options=self.options)

    @staticmethod
    def get_version() -> str:
        """Version of this package."""
        from gsoc2_cli import __version__

        return __version__

    @property
    def resolver(self) -> BinaryResolver:
        return self._executor.resolver

    def get_path(self) -> Result[Path, ResolveError]:
        """Absolute path to the binary, or why it cannot be found."""
        return self._executor.resolver.resolve_path()

    def execute(self, args: Sequence[Arg], live: bool = False) -> Result[str | None, BridgeError]:
        """Run the binary with this instance's config file and options."""
        return self._executor.execute(
            args,
            live,
            self.options.silent,
            self.config_file,
            self.options,
        )
