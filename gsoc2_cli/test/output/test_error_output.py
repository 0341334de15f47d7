"""Tests for gsoc2_cli.output.errors module."""

from __future__ import annotations

import pytest

from gsoc2_cli.core.config import ConfigError
from gsoc2_cli.core.errors import (
    BinaryNotFound,
    BridgeError,
    NotFoundVariant,
    ProcessFailure,
    SchemaValidation,
    UnsupportedPlatform,
)
from gsoc2_cli.output.console import MockConsole, Style
from gsoc2_cli.output.errors import bridge_error_exit_code, print_bridge_error


class TestPrintBridgeError:
    def test_process_failure_with_stderr(self) -> None:
        console = MockConsole()
        print_bridge_error(
            ProcessFailure(("gsoc2-cli", "info"), 1, stderr="error: invalid token\n"), console
        )

        assert console.messages == [
            "error: gsoc2-cli info failed (exit 1)",
            "error: invalid token",
        ]
        assert console.outputs[1].style is Style.DIM

    def test_process_failure_without_stderr(self) -> None:
        console = MockConsole()
        print_bridge_error(ProcessFailure(("gsoc2-cli",), 3), console)
        assert len(console.outputs) == 1

    def test_schema_validation(self) -> None:
        console = MockConsole()
        print_bridge_error(SchemaValidation("ignore", "an array"), console)
        assert console.messages == ["error: invalid option ignore: expected an array"]

    def test_not_found(self) -> None:
        console = MockConsole()
        print_bridge_error(
            BinaryNotFound(NotFoundVariant.NO_OPTIONAL_DEPENDENCIES, "gsoc2-cli-linux-x64"),
            console,
        )
        assert console.has_error()
        assert console.find("gsoc2-cli-linux-x64")

    def test_config_error(self) -> None:
        console = MockConsole()
        print_bridge_error(ConfigError("Options file not found"), console)
        assert console.messages == ["error: Options file not found"]


class TestExitCodes:
    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (UnsupportedPlatform("sunos", "x64"), 2),
            (BinaryNotFound(NotFoundVariant.NO_OPTIONAL_DEPENDENCIES, "pkg"), 2),
            (SchemaValidation("ext", "an array"), 1),
            (ProcessFailure(("gsoc2-cli",), None, os_error="missing"), 2),
            (ProcessFailure(("gsoc2-cli",), 9), 3),
            (ConfigError("bad"), 5),
        ],
    )
    def test_mapping(self, error: BridgeError | ConfigError, code: int) -> None:
        assert bridge_error_exit_code(error) == code
