"""Binary resolution - finding the gsoc2-cli executable.

Searches, first match wins:
1. GSOC2_BINARY_PATH environment variable (used verbatim)
2. A substitute path set on the resolver (for tests of callers)
3. A fallback binary placed inside the package directory
4. The platform package for the current OS/architecture

Nothing is cached: every call re-reads the environment and the filesystem.
"""

from __future__ import annotations

import importlib.util
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from gsoc2_cli.core.errors import (
    BinaryNotFound,
    NotFoundVariant,
    ResolveError,
    UnsupportedPlatform,
)
from gsoc2_cli.core.result import Err, Ok, Result

from .detection import PlatformInfo, detect
from .distributions import (
    DISTRIBUTIONS,
    BinaryDistribution,
    distribution_for,
    fallback_binary_path,
)

__all__ = [
    "BINARY_PATH_ENV",
    "BinaryResolver",
    "BinarySource",
    "PackageLocator",
    "ResolvedBinary",
    "ResolverConfig",
    "find_package_binary",
]

BINARY_PATH_ENV = "GSOC2_BINARY_PATH"

type PackageLocator = Callable[[BinaryDistribution], Path | None]


def find_package_binary(distribution: BinaryDistribution) -> Path | None:
    """Locate the binary shipped by an installed platform package.

    Returns None if the package is not importable or lacks the binary.
    """
    try:
        spec = importlib.util.find_spec(distribution.module_name)
    except (ImportError, ValueError):
        return None
    if spec is None or not spec.submodule_search_locations:
        return None
    for location in spec.submodule_search_locations:
        candidate = Path(location) / distribution.subpath
        if candidate.is_file():
            return candidate.resolve()
    return None


class BinarySource(Enum):
    """Where a resolved binary path came from."""

    ENV_OVERRIDE = auto()
    SUBSTITUTE = auto()
    FALLBACK = auto()
    PACKAGE = auto()

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")


@dataclass(frozen=True, slots=True)
class ResolvedBinary:
    """A resolved binary.

    Attributes:
        path: Path to the binary
        source: Which resolution step produced it
        distribution: Platform distribution, when the platform is supported
    """

    path: Path
    source: BinarySource
    distribution: BinaryDistribution | None = None


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Inputs for BinaryResolver. Defaults read the live process state.

    Attributes:
        platform: Platform to resolve for (detected when None)
        environ: Environment to read the override from (os.environ when None)
        substitute_path: Initial test-only substitute path
        fallback_root: Directory holding the fallback binary (package dir when None)
        locator: Finds a distribution's installed binary
    """

    platform: PlatformInfo | None = None
    environ: Mapping[str, str] | None = None
    substitute_path: Path | None = None
    fallback_root: Path | None = None
    locator: PackageLocator = find_package_binary


class BinaryResolver:
    """Resolves the gsoc2-cli binary path.

    Usage:
        resolver = BinaryResolver()
        match resolver.resolve_path():
            case Ok(path):
                print(path)
            case Err(error):
                print(error)
    """

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self._config = config or ResolverConfig()
        self._substitute = self._config.substitute_path

    @property
    def config(self) -> ResolverConfig:
        return self._config

    @property
    def substitute(self) -> Path | None:
        """Current test-only substitute path."""
        return self._substitute

    def set_substitute(self, path: Path | str | None) -> None:
        """Override the resolved path for this resolver; None clears it.

        Intended for tests of code that calls the binary. The environment
        override still takes precedence.
        """
        self._substitute = Path(path) if path is not None else None

    def resolve_path(self) -> Result[Path, ResolveError]:
        """Resolve just the binary path."""
        return self.resolve().map(lambda resolved: resolved.path)

    def resolve(self) -> Result[ResolvedBinary, ResolveError]:
        """Resolve the binary, recording which step found it."""
        info = self._config.platform or detect()
        distribution = distribution_for(info)
        environ = self._config.environ if self._config.environ is not None else os.environ

        override = environ.get(BINARY_PATH_ENV)
        if override:
            return Ok(ResolvedBinary(Path(override), BinarySource.ENV_OVERRIDE, distribution))

        if self._substitute is not None:
            return Ok(ResolvedBinary(self._substitute, BinarySource.SUBSTITUTE, distribution))

        fallback = fallback_binary_path(info, self._config.fallback_root)
        if fallback.is_file():
            return Ok(ResolvedBinary(fallback, BinarySource.FALLBACK, distribution))

        if distribution is None:
            return Err(UnsupportedPlatform(platform=str(info.platform), arch=str(info.arch)))

        located = self._config.locator(distribution)
        if located is not None:
            return Ok(ResolvedBinary(located, BinarySource.PACKAGE, distribution))

        return Err(self._not_found(distribution))

    def _not_found(self, expected: BinaryDistribution) -> BinaryNotFound:
        """Tell a wrong-platform install apart from a missing one."""
        for other in DISTRIBUTIONS.values():
            if other == expected:
                continue
            if self._config.locator(other) is not None:
                return BinaryNotFound(
                    variant=NotFoundVariant.WRONG_PLATFORM_PACKAGE,
                    expected_package=expected.package_name,
                    installed_package=other.package_name,
                )
        return BinaryNotFound(
            variant=NotFoundVariant.NO_OPTIONAL_DEPENDENCIES,
            expected_package=expected.package_name,
        )
