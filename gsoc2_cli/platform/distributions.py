"""Binary distributions: which package ships the binary for which platform.

The native binary is published as one Python distribution per platform
(`gsoc2-cli-linux-x64`, ...). Each installs an import package of the same
name (dashes become underscores) containing the binary at `subpath`.

The (Platform, Arch) -> PlatformKey mapping is a plain dict built once at
import time over every enum member, so lookups are exhaustive and testable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .detection import Arch, Platform, PlatformInfo

__all__ = [
    "BINARY_NAME",
    "DISTRIBUTIONS",
    "BinaryDistribution",
    "PlatformKey",
    "distribution_for",
    "fallback_binary_path",
    "platform_key",
]

BINARY_NAME = "gsoc2-cli"

# The package directory; the fallback binary sits directly inside it.
_PACKAGE_ROOT = Path(__file__).resolve().parents[1]


class PlatformKey(Enum):
    """Closed set of platforms with a published binary."""

    DARWIN = "darwin"
    LINUX_X64 = "linux-x64"
    LINUX_I686 = "linux-i686"
    LINUX_ARM64 = "linux-arm64"
    LINUX_ARM = "linux-arm"
    WIN32_X64 = "win32-x64"
    WIN32_I686 = "win32-i686"

    def __str__(self) -> str:
        return self.value

    @property
    def is_windows(self) -> bool:
        return self in (PlatformKey.WIN32_X64, PlatformKey.WIN32_I686)


@dataclass(frozen=True, slots=True)
class BinaryDistribution:
    """A (package, subpath) pairing for one platform.

    Attributes:
        key: Platform this distribution targets
        package_name: Distribution name on the package index
        subpath: Binary location relative to the import package directory
    """

    key: PlatformKey
    package_name: str
    subpath: str

    @property
    def module_name(self) -> str:
        """Import name of the package (e.g. gsoc2_cli_linux_x64)."""
        return self.package_name.replace("-", "_")


def _distribution(key: PlatformKey) -> BinaryDistribution:
    exe = f"{BINARY_NAME}.exe" if key.is_windows else BINARY_NAME
    return BinaryDistribution(
        key=key,
        package_name=f"{BINARY_NAME}-{key.value}",
        subpath=f"bin/{exe}",
    )


DISTRIBUTIONS: dict[PlatformKey, BinaryDistribution] = {
    key: _distribution(key) for key in PlatformKey
}

_UNIX_ARCHES = {
    Arch.X64: PlatformKey.LINUX_X64,
    Arch.X86: PlatformKey.LINUX_I686,
    Arch.ARM64: PlatformKey.LINUX_ARM64,
    Arch.ARM: PlatformKey.LINUX_ARM,
}

_WINDOWS_ARCHES = {
    Arch.X64: PlatformKey.WIN32_X64,
    Arch.X86: PlatformKey.WIN32_I686,
}

_KEYS: dict[tuple[Platform, Arch], PlatformKey] = {
    **{(Platform.DARWIN, arch): PlatformKey.DARWIN for arch in Arch},
    **{(Platform.LINUX, arch): key for arch, key in _UNIX_ARCHES.items()},
    **{(Platform.FREEBSD, arch): key for arch, key in _UNIX_ARCHES.items()},
    **{(Platform.WINDOWS, arch): key for arch, key in _WINDOWS_ARCHES.items()},
}


def platform_key(info: PlatformInfo) -> PlatformKey | None:
    """Return the key for this platform, or None if unsupported."""
    return _KEYS.get((info.platform, info.arch))


def distribution_for(info: PlatformInfo) -> BinaryDistribution | None:
    """Return the distribution for this platform, or None if unsupported."""
    key = platform_key(info)
    return DISTRIBUTIONS[key] if key is not None else None


def fallback_binary_path(info: PlatformInfo, root: Path | None = None) -> Path:
    """Location of a manually placed binary inside the package directory."""
    return (root or _PACKAGE_ROOT) / info.platform.exe_name(BINARY_NAME)
