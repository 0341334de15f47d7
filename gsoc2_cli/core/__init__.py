"""Core domain types: results, errors, options."""

from .config import CliOptions, ConfigError, load_options
from .errors import (
    BinaryNotFound,
    BridgeError,
    ErrorCode,
    ErrorKind,
    NotFoundVariant,
    ProcessFailure,
    ResolveError,
    SchemaValidation,
    SchemaValidationError,
    UnsupportedPlatform,
)
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "CliOptions",
    "ConfigError",
    "load_options",
    # errors
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
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
