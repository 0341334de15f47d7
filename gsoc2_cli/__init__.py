"""Python bridge to the native gsoc2-cli binary."""

__version__ = "0.1.0"

from gsoc2_cli.client import Gsoc2Cli  # noqa: E402
from gsoc2_cli.command import (  # noqa: E402
    CommitsOptions,
    Executor,
    OptionSpec,
    OptionType,
    prepare_command,
    serialize_options,
)
from gsoc2_cli.core import CliOptions, Err, Ok, Result  # noqa: E402
from gsoc2_cli.platform import BinaryResolver, ResolverConfig  # noqa: E402

__all__ = [
    "__version__",
    "BinaryResolver",
    "CliOptions",
    "CommitsOptions",
    "Err",
    "Executor",
    "Gsoc2Cli",
    "Ok",
    "OptionSpec",
    "OptionType",
    "Result",
    "ResolverConfig",
    "prepare_command",
    "serialize_options",
]
