"""`gsoc2-cli` console script: run the native binary with our arguments.

Arguments are forwarded verbatim and the exit status mirrors the binary's.
"""

from __future__ import annotations

import os
import sys

from gsoc2_cli.core.errors import ErrorCode
from gsoc2_cli.core.result import Err
from gsoc2_cli.output.console import RichConsole
from gsoc2_cli.output.errors import bridge_error_exit_code, print_bridge_error
from gsoc2_cli.platform.process import run_live
from gsoc2_cli.platform.resolver import BinaryResolver


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    console = RichConsole()

    resolved = BinaryResolver().resolve_path()
    if isinstance(resolved, Err):
        print_bridge_error(resolved.error, console)
        return bridge_error_exit_code(resolved.error)

    result = run_live([resolved.value, *args], os.environ, interactive=True)
    if isinstance(result, Err):
        print_bridge_error(result.error, console)
        return int(ErrorCode.ENV_ERROR)
    return exit_status(result.value)


def exit_status(returncode: int) -> int:
    """Shell exit status for a child return code (128+N when killed by signal N)."""
    return 128 - returncode if returncode < 0 else returncode


if __name__ == "__main__":
    raise SystemExit(main())
