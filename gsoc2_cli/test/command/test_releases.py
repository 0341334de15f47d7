"""Tests for gsoc2_cli.command.releases module."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from gsoc2_cli.command.releases import CommitsOptions, Releases
from gsoc2_cli.core.config import CliOptions
from gsoc2_cli.core.errors import BridgeError, ProcessFailure
from gsoc2_cli.core.result import Err, Ok, Result
from gsoc2_cli.platform.process import Arg


@dataclass
class Call:
    args: list[Arg]
    live: bool
    silent: bool
    config_file: str | Path | None
    options: CliOptions | None


@dataclass
class FakeRunner:
    """Records every invocation; answers with `output` or the queued results."""

    output: str = "ok"
    results: list[Result[str | None, BridgeError]] = field(default_factory=list)
    calls: list[Call] = field(default_factory=list)

    def execute(
        self,
        args: Sequence[Arg],
        live: bool = False,
        silent: bool = False,
        config_file: str | Path | None = None,
        options: CliOptions | None = None,
    ) -> Result[str | None, BridgeError]:
        self.calls.append(Call(list(args), live, silent, config_file, options))
        if self.results:
            return self.results.pop(0)
        return Ok(None if live else self.output)

    @property
    def args(self) -> list[list[Arg]]:
        return [c.args for c in self.calls]


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def releases(runner: FakeRunner) -> Releases:
    return Releases(runner)


def upload_args(path: str, *extra: str) -> list[str]:
    return ["releases", "files", "v1", "upload-sourcemaps", path, *extra]


class TestNew:
    def test_plain(self, releases: Releases, runner: FakeRunner) -> None:
        assert releases.new("v1") == Ok("ok")
        assert runner.args == [["releases", "new", "v1"]]
        assert runner.calls[0].live is False

    def test_projects(self, releases: Releases, runner: FakeRunner) -> None:
        releases.new("v1", projects=["web", "api"])
        assert runner.args == [["releases", "new", "v1", "-p", "web", "-p", "api"]]


class TestSetCommits:
    def test_auto(self, releases: Releases, runner: FakeRunner) -> None:
        releases.set_commits("v1", CommitsOptions(auto=True, repo="ignored", commit="abc"))
        assert runner.args == [["releases", "set-commits", "v1", "--auto"]]

    def test_repo_and_commit(self, releases: Releases, runner: FakeRunner) -> None:
        releases.set_commits("v1", CommitsOptions(repo="acme/web", commit="abc"))
        assert runner.args == [["releases", "set-commits", "v1", "--commit", "acme/web@abc"]]

    def test_previous_commit_range(self, releases: Releases, runner: FakeRunner) -> None:
        releases.set_commits(
            "v1",
            CommitsOptions(repo="acme/web", commit="abc", previous_commit="def"),
        )
        assert runner.args == [
            ["releases", "set-commits", "v1", "--commit", "acme/web@def..abc"]
        ]

    def test_ignore_flags(self, releases: Releases, runner: FakeRunner) -> None:
        releases.set_commits(
            "v1", CommitsOptions(auto=True, ignore_missing=True, ignore_empty=True)
        )
        assert runner.args == [
            ["releases", "set-commits", "v1", "--auto", "--ignore-missing", "--ignore-empty"]
        ]

    @pytest.mark.parametrize(
        "options",
        [
            CommitsOptions(),
            CommitsOptions(repo="acme/web"),
            CommitsOptions(commit="abc"),
        ],
    )
    def test_requires_auto_or_repo_and_commit(
        self, releases: Releases, runner: FakeRunner, options: CommitsOptions
    ) -> None:
        with pytest.raises(ValueError, match="options.auto, or options.repo and options.commit"):
            releases.set_commits("v1", options)
        assert runner.calls == []


class TestSimpleCommands:
    def test_finalize(self, releases: Releases, runner: FakeRunner) -> None:
        releases.finalize("v1")
        assert runner.args == [["releases", "finalize", "v1"]]

    def test_propose_version_strips(self, runner: FakeRunner) -> None:
        runner.output = "6cb7a2f\n"
        assert Releases(runner).propose_version() == Ok("6cb7a2f")
        assert runner.args == [["releases", "propose-version"]]

    def test_propose_version_error(self, runner: FakeRunner) -> None:
        failure = ProcessFailure(("gsoc2-cli",), 1)
        runner.results.append(Err(failure))
        assert Releases(runner).propose_version() == Err(failure)

    def test_list_deploys(self, releases: Releases, runner: FakeRunner) -> None:
        releases.list_deploys("v1")
        assert runner.args == [["releases", "deploys", "v1", "list"]]


class TestNewDeploy:
    def test_env_only(self, releases: Releases, runner: FakeRunner) -> None:
        releases.new_deploy("v1", {"env": "production"})
        assert runner.args == [["releases", "deploys", "v1", "new", "--env", "production"]]

    def test_all_options(self, releases: Releases, runner: FakeRunner) -> None:
        releases.new_deploy(
            "v1",
            {
                "env": "staging",
                "started": 100,
                "finished": 160,
                "name": "deploy-7",
                "url": "https://ci.example/7",
            },
        )
        assert runner.args == [
            [
                "releases",
                "deploys",
                "v1",
                "new",
                "--env",
                "staging",
                "--started",
                100,
                "--finished",
                160,
                "--name",
                "deploy-7",
                "--url",
                "https://ci.example/7",
            ]
        ]

    def test_env_required(self, releases: Releases, runner: FakeRunner) -> None:
        with pytest.raises(ValueError, match="options.env must be a valid name"):
            releases.new_deploy("v1", {"name": "x"})
        assert runner.calls == []


class TestUploadSourceMaps:
    def test_single_path_default_ignore(self, releases: Releases, runner: FakeRunner) -> None:
        result = releases.upload_source_maps("v1", {"include": ["dist"]})

        assert result == Ok([None])
        assert runner.args == [upload_args("dist", "--ignore", "node_modules")]
        assert runner.calls[0].live is True

    def test_multiple_paths_one_call_each(self, releases: Releases, runner: FakeRunner) -> None:
        releases.upload_source_maps("v1", {"include": ["dist", "build"]})
        assert runner.args == [
            upload_args("dist", "--ignore", "node_modules"),
            upload_args("build", "--ignore", "node_modules"),
        ]

    def test_projects(self, releases: Releases, runner: FakeRunner) -> None:
        releases.upload_source_maps("v1", {"include": ["dist"], "projects": ["web", "api"]})
        assert runner.args == [
            [
                "releases",
                "-p",
                "web",
                "-p",
                "api",
                "files",
                "v1",
                "upload-sourcemaps",
                "dist",
                "--ignore",
                "node_modules",
            ]
        ]

    def test_explicit_ignore(self, releases: Releases, runner: FakeRunner) -> None:
        releases.upload_source_maps("v1", {"include": ["dist"], "ignore": ["vendor", "tmp"]})
        assert runner.args == [upload_args("dist", "--ignore", "vendor", "--ignore", "tmp")]

    def test_ignore_file_suppresses_default(self, releases: Releases, runner: FakeRunner) -> None:
        releases.upload_source_maps("v1", {"include": ["dist"], "ignore_file": ".gsoc2ignore"})
        assert runner.args == [upload_args("dist", "--ignore-file", ".gsoc2ignore")]

    def test_empty_ignore_disables_default(self, releases: Releases, runner: FakeRunner) -> None:
        releases.upload_source_maps("v1", {"include": ["dist"], "ignore": []})
        assert runner.args == [upload_args("dist")]

    def test_descriptor_empty_ignore(self, releases: Releases, runner: FakeRunner) -> None:
        releases.upload_source_maps("v1", {"include": ["dist", {"paths": ["lib"], "ignore": []}]})
        assert runner.args == [
            upload_args("dist", "--ignore", "node_modules"),
            upload_args("lib"),
        ]

    def test_descriptor_overrides(self, releases: Releases, runner: FakeRunner) -> None:
        releases.upload_source_maps(
            "v1",
            {
                "include": [
                    "dist",
                    {"paths": ["lib", "es"], "ignore": ["test"], "url_prefix": "~/lib"},
                ],
                "rewrite": True,
            },
        )
        assert runner.args == [
            upload_args("dist", "--ignore", "node_modules", "--rewrite"),
            upload_args("lib", "--ignore", "test", "--rewrite", "--url-prefix", "~/lib"),
            upload_args("es", "--ignore", "test", "--rewrite", "--url-prefix", "~/lib"),
        ]

    def test_stops_at_first_error(self, releases: Releases, runner: FakeRunner) -> None:
        failure = ProcessFailure(("gsoc2-cli",), None, os_error="missing")
        runner.results.append(Err(failure))

        result = releases.upload_source_maps("v1", {"include": ["dist", "build"]})

        assert result == Err(failure)
        assert len(runner.calls) == 1

    @pytest.mark.parametrize("options", [{}, {"include": "dist"}])
    def test_include_required(
        self, releases: Releases, runner: FakeRunner, options: dict[str, object]
    ) -> None:
        with pytest.raises(ValueError, match="options.include"):
            releases.upload_source_maps("v1", options)
        assert runner.calls == []

    def test_descriptor_without_paths(self, releases: Releases) -> None:
        with pytest.raises(ValueError, match="must contain a `paths` array"):
            releases.upload_source_maps("v1", {"include": [{"ignore": ["x"]}]})

    def test_non_array_option_rejected(self, releases: Releases) -> None:
        with pytest.raises(ValueError, match="ext should be an array"):
            releases.upload_source_maps("v1", {"include": ["dist"], "ext": "js"})


class TestOptionsForwarded:
    def test_silent_config_and_options(self, runner: FakeRunner) -> None:
        options = CliOptions(org="acme", silent=True)
        releases = Releases(runner, config_file="/etc/props", options=options)

        releases.upload_source_maps("v1", {"include": ["dist"]})
        releases.finalize("v1")

        for call in runner.calls:
            assert call.silent is True
            assert call.config_file == "/etc/props"
            assert call.options is options

    def test_execute_passthrough(self, releases: Releases, runner: FakeRunner) -> None:
        releases.execute(["releases", "list"], live=True)
        assert runner.calls[0].args == ["releases", "list"]
        assert runner.calls[0].live is True
