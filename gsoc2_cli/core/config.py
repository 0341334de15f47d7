"""Typed bridge options and loading them from TOML.

`CliOptions` carries the configuration the Executor translates into
environment variables for the binary (service URL, credentials,
organization/project, VCS remote, extra headers) plus the `silent` flag.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_str_table

__all__ = [
    "CliOptions",
    "ConfigError",
    "load_options",
]


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when an options file cannot be loaded or parsed."""

    message: str
    path: Path | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Options passed to every binary invocation.

    Attributes:
        url: Service URL (GSOC2_URL)
        auth_token: API auth token (GSOC2_AUTH_TOKEN), interchangeable with api_key
        api_key: Legacy API key (GSOC2_API_KEY)
        dsn: Client DSN (GSOC2_DSN)
        org: Organization slug (GSOC2_ORG)
        project: Project slug (GSOC2_PROJECT)
        vcs_remote: VCS remote name (GSOC2_VCS_REMOTE)
        custom_header: A single raw header for every request (CUSTOM_HEADER)
        headers: Headers passed as `--header key:value`; ignored when
            custom_header is set
        silent: Discard output of live invocations
    """

    url: str | None = None
    auth_token: str | None = None
    api_key: str | None = None
    dsn: str | None = None
    org: str | None = None
    project: str | None = None
    vcs_remote: str | None = None
    custom_header: str | None = None
    headers: Mapping[str, str] | None = None
    silent: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> CliOptions:
        """Create options from a mapping (parsed TOML or JSON)."""
        return cls(
            url=get_str(data, "url"),
            auth_token=get_str(data, "auth_token", "authToken"),
            api_key=get_str(data, "api_key", "apiKey"),
            dsn=get_str(data, "dsn"),
            org=get_str(data, "org"),
            project=get_str(data, "project"),
            vcs_remote=get_str(data, "vcs_remote", "vcsRemote"),
            custom_header=get_str(data, "custom_header", "customHeader"),
            headers=get_str_table(data, "headers"),
            silent=get_bool(data, "silent") or False,
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data = as_str_dict(tomllib.loads(path.read_bytes().decode("utf-8")))
    except FileNotFoundError:
        return Err(ConfigError(f"Options file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading options: {e}", path=path))
    if data is None:
        return Err(ConfigError("Options root must be a TOML table", path=path))
    return Ok(data)


def load_options(path: Path) -> Result[CliOptions, ConfigError]:
    """Load bridge options from a TOML file.

    Options may live at the root of the file or under a `[gsoc2]` table.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(CliOptions) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    table = as_str_dict(result.value.get("gsoc2")) or result.value
    return Ok(CliOptions.from_dict(table))
