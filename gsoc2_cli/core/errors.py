"""Error taxonomy for the binary bridge.

Every failure the bridge can report is one of four frozen dataclasses,
grouped in the `BridgeError` union and tagged with an `ErrorKind`:

- UnsupportedPlatform: no distribution exists for this OS/architecture.
- BinaryNotFound: the platform package is missing (two variants).
- SchemaValidation: an option value does not match its declared type.
- ProcessFailure: the binary exited nonzero or could not be started.

SchemaValidation is a caller bug and is raised (wrapped in
`SchemaValidationError`); the others travel inside `Err`.

`ErrorCode` maps these kinds to shell exit codes for the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto

__all__ = [
    "BinaryNotFound",
    "BridgeError",
    "ErrorCode",
    "ErrorKind",
    "NotFoundVariant",
    "ProcessFailure",
    "ResolveError",
    "SchemaValidation",
    "SchemaValidationError",
    "UnsupportedPlatform",
    "SUPPORTED_PLATFORMS",
]

SUPPORTED_PLATFORMS = (
    "Darwin (macOS)",
    "Linux and FreeBSD on x64, x86, ia32, arm64, and arm architectures",
    "Windows x64, x86, and ia32 architectures",
)


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    - 0: Success
    - 1: User error (bad options, invalid arguments)
    - 2: Environment error (unsupported platform, binary missing)
    - 3: Process error (the binary failed)
    - 5: I/O error (options file unreadable)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    PROCESS_ERROR = 3
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")


class ErrorKind(Enum):
    """Closed set of bridge error kinds."""

    UNSUPPORTED_PLATFORM = auto()
    BINARY_NOT_FOUND = auto()
    SCHEMA_VALIDATION = auto()
    PROCESS_FAILURE = auto()

    def __str__(self) -> str:
        return self.name.lower()


class NotFoundVariant(Enum):
    """Why the platform binary could not be located."""

    WRONG_PLATFORM_PACKAGE = auto()  # a package for another OS/arch is installed
    NO_OPTIONAL_DEPENDENCIES = auto()  # no platform package at all


@dataclass(frozen=True, slots=True)
class UnsupportedPlatform:
    """The current OS/architecture has no binary distribution."""

    platform: str
    arch: str

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.UNSUPPORTED_PLATFORM

    def __str__(self) -> str:
        supported = "\n".join(f"- {line}" for line in SUPPORTED_PLATFORMS)
        return (
            "Unsupported operating system or architecture! "
            f"gsoc2-cli does not work on {self.platform}/{self.arch}.\n\n"
            f"gsoc2-cli supports:\n{supported}"
        )


@dataclass(frozen=True, slots=True)
class BinaryNotFound:
    """The binary for this platform is not installed.

    Attributes:
        variant: Which remediation applies
        expected_package: Package that should provide the binary
        installed_package: Package for another platform that was found instead
    """

    variant: NotFoundVariant
    expected_package: str
    installed_package: str | None = None

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.BINARY_NOT_FOUND

    def __str__(self) -> str:
        head = "gsoc2-cli binary for this platform/architecture not found!"
        if self.variant is NotFoundVariant.WRONG_PLATFORM_PACKAGE:
            return (
                f"{head}\n\n"
                f'The "{self.installed_package}" package is installed, but for the current '
                f'platform you should have the "{self.expected_package}" package installed '
                "instead. This usually happens when a virtual environment created on one "
                "platform (for example Windows or macOS) is reused on another (for example "
                "Linux in Docker).\n\n"
                "To fix this, do not copy the environment between machines; reinstall your "
                "dependencies on the target system instead."
            )
        return (
            f"{head}\n\n"
            f'The "{self.expected_package}" package is not installed. gsoc2-cli ships its '
            "binary in a platform-specific package; install it with "
            '`pip install "gsoc2-cli[binary]"` or install that package directly, and make '
            "sure your installer does not skip platform-specific dependencies."
        )


@dataclass(frozen=True, slots=True)
class SchemaValidation:
    """An option value does not match its declared type."""

    option: str
    expected: str

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.SCHEMA_VALIDATION

    def __str__(self) -> str:
        return f"{self.option} should be {self.expected}"


class SchemaValidationError(ValueError):
    """Raised by the serializer; carries the SchemaValidation details."""

    def __init__(self, error: SchemaValidation) -> None:
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True, slots=True)
class ProcessFailure:
    """The binary exited nonzero or could not be started.

    Attributes:
        command: The full argument vector, binary first
        returncode: Exit status, or None if the process never started
        stdout: Captured standard output (may be empty)
        stderr: Captured standard error (may be empty)
        os_error: OS error text when spawning failed
    """

    command: tuple[str, ...]
    returncode: int | None
    stdout: str = ""
    stderr: str = ""
    os_error: str | None = None

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.PROCESS_FAILURE

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        if self.returncode is None:
            return f"{cmd_str} could not be started: {self.os_error}"
        return f"{cmd_str} failed (exit {self.returncode})"


ResolveError = UnsupportedPlatform | BinaryNotFound

BridgeError = UnsupportedPlatform | BinaryNotFound | SchemaValidation | ProcessFailure
