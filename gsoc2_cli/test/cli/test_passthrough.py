"""Tests for the gsoc2-cli passthrough entry point."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from gsoc2_cli.cli.passthrough import exit_status, main
from gsoc2_cli.core.errors import ErrorCode
from gsoc2_cli.platform.resolver import BINARY_PATH_ENV

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="needs shebang scripts")


def write_binary(directory: Path, body: str) -> Path:
    script = directory / "gsoc2-cli"
    script.write_text(f"#!{sys.executable}\nimport sys\n{body}\n", encoding="utf-8")
    script.chmod(0o755)
    return script


class TestPassthrough:
    def test_mirrors_exit_status(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        script = write_binary(tmp_path, "sys.exit(len(sys.argv) - 1)")
        monkeypatch.setenv(BINARY_PATH_ENV, str(script))

        assert main(["releases", "list", "--json"]) == 3

    def test_arguments_forwarded(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        out = tmp_path / "argv.txt"
        script = write_binary(
            tmp_path, f"open({str(out)!r}, 'w').write(' '.join(sys.argv[1:]))"
        )
        monkeypatch.setenv(BINARY_PATH_ENV, str(script))

        assert main(["--version", "x y"]) == 0
        assert out.read_text() == "--version x y"

    def test_killed_by_signal(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        script = write_binary(tmp_path, "import os, signal\nos.kill(os.getpid(), signal.SIGTERM)")
        monkeypatch.setenv(BINARY_PATH_ENV, str(script))

        assert main([]) == 128 + 15

    def test_missing_binary(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(BINARY_PATH_ENV, str(tmp_path / "missing"))
        assert main([]) == int(ErrorCode.ENV_ERROR)


class TestExitStatus:
    def test_plain_status_kept(self) -> None:
        assert exit_status(0) == 0
        assert exit_status(3) == 3

    def test_signal_mapped(self) -> None:
        assert exit_status(-15) == 143
        assert exit_status(-9) == 137
