"""Turning option schemas and option values into argument lists.

A schema maps option names to an `OptionSpec` (flag, type, optional
inverted flag). Serialization walks the schema in its own order, so the
output is deterministic for a given (schema, options) pair:

    schema = {"paths": OptionSpec(OptionType.ARRAY, "--path")}
    serialize_options(schema, {"paths": ["a", "b"]})
    # ['--path', 'a', '--path', 'b']
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from gsoc2_cli.core.errors import SchemaValidation, SchemaValidationError
from gsoc2_cli.platform.process import Arg

__all__ = [
    "OptionSchema",
    "OptionSpec",
    "OptionType",
    "prepare_command",
    "project_flags",
    "serialize_options",
]


class OptionType(Enum):
    """Value type of a command line option."""

    ARRAY = "array"
    STRING = "string"
    BOOLEAN = "boolean"
    INVERTED_BOOLEAN = "inverted-boolean"
    NUMBER = "number"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """Schema entry for one option.

    Attributes:
        type: Value type
        flag: Flag including dashes (e.g. "--ignore"); booleans may omit it
        inverted_flag: Flag emitted when a boolean option is False
    """

    type: OptionType
    flag: str | None = None
    inverted_flag: str | None = None


type OptionSchema = Mapping[str, OptionSpec]


def serialize_options(
    schema: OptionSchema,
    options: Mapping[str, object],
) -> list[Arg]:
    """Serialize option values into an argument list.

    Options missing from `options` or set to None are skipped; keys not in
    the schema are ignored.

    Raises:
        SchemaValidationError: An array or boolean option has a value of the
            wrong type.
    """
    args: list[Arg] = []
    for name, spec in schema.items():
        value = options.get(name)
        if value is None:
            continue

        match spec.type:
            case OptionType.ARRAY:
                if not isinstance(value, (list, tuple)):
                    raise SchemaValidationError(SchemaValidation(name, "an array"))
                for item in value:
                    args.extend([_require_flag(name, spec.flag), _array_token(item)])
            case OptionType.BOOLEAN:
                if not isinstance(value, bool):
                    raise SchemaValidationError(SchemaValidation(name, "a bool"))
                if value and spec.flag is not None:
                    args.append(spec.flag)
                elif not value and spec.inverted_flag is not None:
                    args.append(spec.inverted_flag)
            case _:
                # passed through untouched; the caller may supply typed tokens
                args.extend([_require_flag(name, spec.flag), value])  # type: ignore[list-item]
    return args


def _array_token(item: object) -> str:
    """Render an array element the way the binary expects it."""
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, float) and item.is_integer():
        return str(int(item))
    return str(item)


def _require_flag(name: str, flag: str | None) -> str:
    if flag is None:
        raise SchemaValidationError(SchemaValidation(name, "declared with a flag"))
    return flag


def prepare_command(
    command: str | Sequence[Arg],
    schema: OptionSchema | None = None,
    options: Mapping[str, object] | None = None,
) -> list[Arg]:
    """Command tokens followed by the serialized options.

    Example:
        prepare_command(["releases", "new"], schema, {})  # ['releases', 'new']
    """
    head: list[Arg] = [command] if isinstance(command, str) else list(command)
    return head + serialize_options(schema or {}, options or {})


def project_flags(projects: Iterable[str]) -> list[str]:
    """`-p` flag per project, in order."""
    flags: list[str] = []
    for project in projects:
        flags.extend(["-p", project])
    return flags
