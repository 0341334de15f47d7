"""Platform and architecture detection.

Maps the running interpreter's OS and CPU onto the closed `Platform` and
`Arch` enums used to pick a binary distribution. Detection is cached; the
resolver itself takes a `PlatformInfo` so tests can pass any combination.
"""

from __future__ import annotations

import os as _os
import platform as _platform
import sys as _sys
from dataclasses import dataclass
from enum import Enum, auto
from functools import lru_cache

__all__ = [
    "Arch",
    "Platform",
    "PlatformInfo",
    "detect",
    "detect_arch",
    "detect_platform",
]


class Platform(Enum):
    """Operating system platform."""

    DARWIN = auto()
    LINUX = auto()
    FREEBSD = auto()
    WINDOWS = auto()
    UNKNOWN = auto()

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def exe_suffix(self) -> str:
        """Get executable file suffix for this platform."""
        return ".exe" if self == Platform.WINDOWS else ""

    def exe_name(self, name: str) -> str:
        """Example: exe_name("gsoc2-cli") -> "gsoc2-cli.exe" on Windows."""
        return f"{name}{self.exe_suffix}"


class Arch(Enum):
    """CPU architecture."""

    X64 = auto()
    X86 = auto()  # also reported as i386/i686/ia32
    ARM64 = auto()
    ARM = auto()
    UNKNOWN = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class PlatformInfo:
    """An (OS, architecture) pair."""

    platform: Platform
    arch: Arch

    @property
    def is_windows(self) -> bool:
        return self.platform == Platform.WINDOWS

    def __str__(self) -> str:
        return f"{self.platform}-{self.arch}"


def _platform_from(system: str) -> Platform:
    system = system.lower()
    if system.startswith("darwin"):
        return Platform.DARWIN
    if system.startswith("linux"):
        return Platform.LINUX
    if system.startswith("freebsd"):
        return Platform.FREEBSD
    if system.startswith(("win32", "cygwin", "msys")):
        return Platform.WINDOWS
    return Platform.UNKNOWN


def _arch_from(machine: str) -> Arch:
    machine = machine.lower()
    if machine in ("x86_64", "amd64", "x64"):
        return Arch.X64
    if machine in ("i386", "i486", "i586", "i686", "x86", "ia32"):
        return Arch.X86
    if machine in ("aarch64", "arm64", "aarch64_be"):
        return Arch.ARM64
    if machine.startswith("arm"):
        return Arch.ARM
    return Arch.UNKNOWN


@lru_cache(maxsize=1)
def detect_platform() -> Platform:
    """Detect the current operating system (cached)."""
    # NOTE: sys.platform, not platform.system(); the latter may query WMI on Windows.
    return _platform_from(_sys.platform)


@lru_cache(maxsize=1)
def detect_arch() -> Arch:
    """Detect the current CPU architecture (cached)."""
    if detect_platform() == Platform.WINDOWS:
        machine = (
            _os.environ.get("PROCESSOR_ARCHITEW6432")
            or _os.environ.get("PROCESSOR_ARCHITECTURE")
            or ""
        )
    else:
        machine = _platform.machine()
    return _arch_from(machine)


def detect() -> PlatformInfo:
    """Detect the current (OS, architecture) pair."""
    return PlatformInfo(platform=detect_platform(), arch=detect_arch())
