"""Error presentation utilities.

Centralized error formatting and exit code mapping for the CLI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gsoc2_cli.core.config import ConfigError
from gsoc2_cli.core.errors import (
    BinaryNotFound,
    BridgeError,
    ErrorCode,
    ProcessFailure,
    SchemaValidation,
    UnsupportedPlatform,
)
from gsoc2_cli.output.console import Style

if TYPE_CHECKING:
    from gsoc2_cli.output.console import ConsoleProtocol

__all__ = ["bridge_error_exit_code", "print_bridge_error"]


def print_bridge_error(error: BridgeError | ConfigError, console: ConsoleProtocol) -> None:
    """Print a bridge error with the detail that helps fix it."""
    match error:
        case UnsupportedPlatform():
            console.error(str(error))
        case BinaryNotFound():
            console.error(str(error))
        case SchemaValidation(option=option, expected=expected):
            console.error(f"invalid option {option}: expected {expected}")
        case ProcessFailure(stderr=stderr):
            console.error(str(error))
            if stderr.strip():
                console.print(stderr.rstrip(), Style.DIM)
        case ConfigError(message=message):
            console.error(message)


def bridge_error_exit_code(error: BridgeError | ConfigError) -> int:
    """Get the CLI exit code for an error."""
    match error:
        case UnsupportedPlatform() | BinaryNotFound():
            return int(ErrorCode.ENV_ERROR)
        case SchemaValidation():
            return int(ErrorCode.USER_ERROR)
        case ProcessFailure(returncode=None):
            return int(ErrorCode.ENV_ERROR)
        case ProcessFailure():
            return int(ErrorCode.PROCESS_ERROR)
        case ConfigError():
            return int(ErrorCode.IO_ERROR)
    return int(ErrorCode.USER_ERROR)
