"""Command layer: option serialization, execution, release commands."""

from .executor import (
    CONFIG_FILE_ENV,
    CUSTOM_HEADER_ENV,
    OPTION_ENV_VARS,
    Executor,
    build_environment,
    header_args,
)
from .releases import CommandRunner, CommitsOptions, Releases
from .schemas import DEFAULT_IGNORE, DEPLOYS_SCHEMA, SOURCEMAPS_SCHEMA
from .serializer import (
    OptionSchema,
    OptionSpec,
    OptionType,
    prepare_command,
    project_flags,
    serialize_options,
)

__all__ = [
    # executor
    "CONFIG_FILE_ENV",
    "CUSTOM_HEADER_ENV",
    "OPTION_ENV_VARS",
    "Executor",
    "build_environment",
    "header_args",
    # releases
    "CommandRunner",
    "CommitsOptions",
    "Releases",
    # schemas
    "DEFAULT_IGNORE",
    "DEPLOYS_SCHEMA",
    "SOURCEMAPS_SCHEMA",
    # serializer
    "OptionSchema",
    "OptionSpec",
    "OptionType",
    "prepare_command",
    "project_flags",
    "serialize_options",
]
