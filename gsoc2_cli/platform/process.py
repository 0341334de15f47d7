"""Subprocess execution with Result-based error handling.

Two primitives, each with an awaitable twin. Standard input is closed
unless a caller asks for an interactive run.

- run: wait for exit, capture stdout verbatim, fail on nonzero exit.
- run_live: stream output to the terminal (or discard it), return the
  exit status.

This is the only place argument tokens are turned into strings; callers
may pass ints or path-likes.
"""

from __future__ import annotations

import asyncio
import os
import subprocess
from collections.abc import Mapping, Sequence

from gsoc2_cli.core.errors import ProcessFailure
from gsoc2_cli.core.result import Err, Ok, Result

__all__ = ["Arg", "run", "run_async", "run_live", "run_live_async", "to_argv"]

type Arg = str | int | float | os.PathLike[str]


def to_argv(cmd: Sequence[Arg]) -> list[str]:
    """Convert argument tokens to the strings handed to the OS."""
    return [os.fspath(a) if isinstance(a, os.PathLike) else str(a) for a in cmd]


def _decode(data: bytes | None) -> str:
    # bytes, not text mode: universal newlines would rewrite \r\n
    return data.decode("utf-8", errors="replace") if data else ""


def run(
    cmd: Sequence[Arg],
    env: Mapping[str, str] | None = None,
) -> Result[str, ProcessFailure]:
    """Execute a command and return its stdout.

    Args:
        cmd: Binary followed by its arguments.
        env: Child environment (inherits the current one if None).

    Returns:
        Ok(stdout) on exit 0, Err(ProcessFailure) on nonzero exit or if the
        process could not be started.
    """
    argv = to_argv(cmd)
    try:
        proc = subprocess.run(
            argv,
            env=dict(env) if env is not None else None,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
        )
    except OSError as e:
        return Err(ProcessFailure(command=tuple(argv), returncode=None, os_error=str(e)))

    stdout = _decode(proc.stdout)
    if proc.returncode != 0:
        return Err(
            ProcessFailure(
                command=tuple(argv),
                returncode=proc.returncode,
                stdout=stdout,
                stderr=_decode(proc.stderr),
            )
        )
    return Ok(stdout)


def run_live(
    cmd: Sequence[Arg],
    env: Mapping[str, str] | None = None,
    *,
    silent: bool = False,
    interactive: bool = False,
) -> Result[int, ProcessFailure]:
    """Execute a command with output streamed to the terminal.

    Args:
        cmd: Binary followed by its arguments.
        env: Child environment (inherits the current one if None).
        silent: Discard stdout and stderr instead of inheriting them.
        interactive: Inherit stdin instead of closing it.

    Returns:
        Ok(returncode) once the process exits, whatever the status.
        Err(ProcessFailure) only if the process could not be started.
    """
    argv = to_argv(cmd)
    output = subprocess.DEVNULL if silent else None
    try:
        proc = subprocess.run(
            argv,
            env=dict(env) if env is not None else None,
            stdin=None if interactive else subprocess.DEVNULL,
            stdout=output,
            stderr=output,
            check=False,
        )
    except OSError as e:
        return Err(ProcessFailure(command=tuple(argv), returncode=None, os_error=str(e)))
    return Ok(proc.returncode)


async def run_async(
    cmd: Sequence[Arg],
    env: Mapping[str, str] | None = None,
) -> Result[str, ProcessFailure]:
    """Awaitable `run`: same contract, no thread involved."""
    argv = to_argv(cmd)
    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            env=dict(env) if env is not None else None,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        return Err(ProcessFailure(command=tuple(argv), returncode=None, os_error=str(e)))

    out, err = await proc.communicate()
    stdout = _decode(out)
    if proc.returncode != 0:
        return Err(
            ProcessFailure(
                command=tuple(argv),
                returncode=proc.returncode,
                stdout=stdout,
                stderr=_decode(err),
            )
        )
    return Ok(stdout)


async def run_live_async(
    cmd: Sequence[Arg],
    env: Mapping[str, str] | None = None,
    *,
    silent: bool = False,
) -> Result[int, ProcessFailure]:
    """Awaitable `run_live`: same contract, no thread involved."""
    argv = to_argv(cmd)
    output = asyncio.subprocess.DEVNULL if silent else None
    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            env=dict(env) if env is not None else None,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=output,
            stderr=output,
        )
    except OSError as e:
        return Err(ProcessFailure(command=tuple(argv), returncode=None, os_error=str(e)))
    return Ok(await proc.wait())
