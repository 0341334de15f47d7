"""Platform layer: detection, binary resolution, process execution."""

from .detection import (
    Arch,
    Platform,
    PlatformInfo,
    detect,
)
from .distributions import (
    DISTRIBUTIONS,
    BinaryDistribution,
    PlatformKey,
    distribution_for,
    fallback_binary_path,
    platform_key,
)
from .process import (
    run,
    run_live,
)
from .resolver import (
    BINARY_PATH_ENV,
    BinaryResolver,
    BinarySource,
    ResolvedBinary,
    ResolverConfig,
    find_package_binary,
)

__all__ = [
    # detection
    "Arch",
    "Platform",
    "PlatformInfo",
    "detect",
    # distributions
    "DISTRIBUTIONS",
    "BinaryDistribution",
    "PlatformKey",
    "distribution_for",
    "fallback_binary_path",
    "platform_key",
    # process
    "run",
    "run_live",
    # resolver
    "BINARY_PATH_ENV",
    "BinaryResolver",
    "BinarySource",
    "ResolvedBinary",
    "ResolverConfig",
    "find_package_binary",
]
