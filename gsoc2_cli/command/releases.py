"""The `releases` command namespace.

Each method builds the argument list for one `gsoc2-cli releases ...`
subcommand and hands it to a runner (normally the Executor). Uploads run
live so progress is visible; everything else is buffered and returns the
binary's stdout.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from gsoc2_cli.core.config import CliOptions
from gsoc2_cli.core.errors import BridgeError
from gsoc2_cli.core.result import Err, Ok, Result
from gsoc2_cli.platform.process import Arg

from .schemas import DEFAULT_IGNORE, DEPLOYS_SCHEMA, SOURCEMAPS_SCHEMA
from .serializer import prepare_command, project_flags

__all__ = ["CommandRunner", "CommitsOptions", "Releases"]


class CommandRunner(Protocol):
    """Anything that can run the binary; Executor implements it."""

    def execute(
        self,
        args: Sequence[Arg],
        live: bool = False,
        silent: bool = False,
        config_file: str | Path | None = None,
        options: CliOptions | None = None,
    ) -> Result[str | None, BridgeError]: ...


@dataclass(frozen=True, slots=True)
class CommitsOptions:
    """Options for `releases set-commits`.

    Attributes:
        auto: Use the current commit; overrides repo/commit
        repo: Full repository name, required unless auto
        commit: Last commit of the release, required unless auto
        previous_commit: Last commit of the previous release
        ignore_missing: Do not fail if the previous release commit is unknown
        ignore_empty: Exit quietly if no new commits are found
    """

    auto: bool = False
    repo: str | None = None
    commit: str | None = None
    previous_commit: str | None = None
    ignore_missing: bool = False
    ignore_empty: bool = False


class Releases:
    """Release management commands.

    Usage:
        releases = Releases(Executor())
        releases.new("1.0.0", projects=["web"])
        releases.upload_source_maps("1.0.0", {"include": ["dist"]})
        releases.finalize("1.0.0")
    """

    def __init__(
        self,
        runner: CommandRunner,
        *,
        config_file: str | Path | None = None,
        options: CliOptions | None = None,
    ) -> None:
        self._runner = runner
        self._config_file = config_file
        self._options = options or CliOptions()

    def new(self, release: str, projects: Iterable[str] = ()) -> Result[str | None, BridgeError]:
        """Create a new release, optionally for specific projects."""
        args = ["releases", "new", release, *project_flags(projects)]
        return self.execute(args, live=False)

    def set_commits(self, release: str, options: CommitsOptions) -> Result[str | None, BridgeError]:
        """Associate commits with a release.

        Raises:
            ValueError: Neither auto nor both repo and commit are given.
        """
        if not options.auto and (not options.repo or not options.commit):
            raise ValueError("options.auto, or options.repo and options.commit must be specified")

        if options.auto:
            flags = ["--auto"]
        elif options.previous_commit:
            flags = ["--commit", f"{options.repo}@{options.previous_commit}..{options.commit}"]
        else:
            flags = ["--commit", f"{options.repo}@{options.commit}"]
        if options.ignore_missing:
            flags.append("--ignore-missing")
        if options.ignore_empty:
            flags.append("--ignore-empty")

        return self.execute(["releases", "set-commits", release, *flags], live=False)

    def finalize(self, release: str) -> Result[str | None, BridgeError]:
        """Mark a release as finalized and released."""
        return self.execute(["releases", "finalize", release], live=False)

    def propose_version(self) -> Result[str | None, BridgeError]:
        """Ask the binary for a version name (usually the HEAD commit hash)."""
        return self.execute(["releases", "propose-version"], live=False).map(
            lambda out: out.strip() if out else out
        )

    def upload_source_maps(
        self,
        release: str,
        options: Mapping[str, object],
    ) -> Result[list[str | None], BridgeError]:
        """Upload source maps, one live invocation per include path.

        `options["include"]` lists paths and/or descriptor mappings with a
        `paths` list plus per-entry overrides of the other options. Unless
        `ignore` (even an empty list) or `ignore_file` is set,
        `node_modules` is ignored.

        Stops at the first failing invocation.

        Raises:
            ValueError: `include` is missing or malformed.
        """
        include = options.get("include")
        if not isinstance(include, (list, tuple)):
            raise ValueError(
                "`options.include` must be a valid array of paths and/or path descriptor objects."
            )

        projects = options.get("projects")
        if not isinstance(projects, (list, tuple)):
            projects = ()
        prefix: list[Arg] = [
            "releases",
            *project_flags(str(p) for p in projects),
            "files",
            release,
            "upload-sourcemaps",
        ]

        results: list[str | None] = []
        for entry in include:
            paths, entry_options = self._expand_include(entry, options)
            for path in paths:
                args = prepare_command([*prefix, path], SOURCEMAPS_SCHEMA, entry_options)
                result = self.execute(args, live=True)
                if isinstance(result, Err):
                    return result
                results.append(result.value)
        return Ok(results)

    @staticmethod
    def _expand_include(
        entry: object,
        options: Mapping[str, object],
    ) -> tuple[list[str], dict[str, object]]:
        """Split an include entry into its paths and the effective options."""
        merged = dict(options)
        if isinstance(entry, Mapping):
            paths = entry.get("paths")
            if not isinstance(paths, (list, tuple)):
                raise ValueError(
                    "Path descriptor objects in `options.include` must contain a `paths` array. "
                    f"Got {entry!r}."
                )
            merged.update(entry)
            upload_paths = [str(p) for p in paths]
        else:
            upload_paths = [str(entry)]

        if merged.get("ignore") is None and not merged.get("ignore_file"):
            merged["ignore"] = list(DEFAULT_IGNORE)
        return upload_paths, merged

    def list_deploys(self, release: str) -> Result[str | None, BridgeError]:
        """List all deploys of a release."""
        return self.execute(["releases", "deploys", release, "list"], live=False)

    def new_deploy(
        self,
        release: str,
        options: Mapping[str, object],
    ) -> Result[str | None, BridgeError]:
        """Create a deploy of a release to an environment.

        Raises:
            ValueError: `options["env"]` is missing.
        """
        if not options.get("env"):
            raise ValueError("options.env must be a valid name")
        args = prepare_command(["releases", "deploys", release, "new"], DEPLOYS_SCHEMA, options)
        return self.execute(args, live=False)

    def execute(self, args: Sequence[Arg], live: bool = False) -> Result[str | None, BridgeError]:
        """Run any `gsoc2-cli` arguments with this namespace's options."""
        return self._runner.execute(
            args,
            live,
            self._options.silent,
            self._config_file,
            self._options,
        )
