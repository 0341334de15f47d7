"""Option schemas for the `releases` subcommands."""

from __future__ import annotations

from .serializer import OptionSchema, OptionSpec, OptionType

__all__ = ["DEFAULT_IGNORE", "DEPLOYS_SCHEMA", "SOURCEMAPS_SCHEMA"]

DEFAULT_IGNORE = ("node_modules",)

SOURCEMAPS_SCHEMA: OptionSchema = {
    "ignore": OptionSpec(OptionType.ARRAY, "--ignore"),
    "ignore_file": OptionSpec(OptionType.STRING, "--ignore-file"),
    "dist": OptionSpec(OptionType.STRING, "--dist"),
    "decompress": OptionSpec(OptionType.BOOLEAN, "--decompress"),
    "rewrite": OptionSpec(OptionType.BOOLEAN, "--rewrite", "--no-rewrite"),
    "source_map_reference": OptionSpec(
        OptionType.BOOLEAN, inverted_flag="--no-sourcemap-reference"
    ),
    "dedupe": OptionSpec(OptionType.BOOLEAN, inverted_flag="--no-dedupe"),
    "strip_prefix": OptionSpec(OptionType.ARRAY, "--strip-prefix"),
    "strip_common_prefix": OptionSpec(OptionType.BOOLEAN, "--strip-common-prefix"),
    "validate": OptionSpec(OptionType.BOOLEAN, "--validate"),
    "url_prefix": OptionSpec(OptionType.STRING, "--url-prefix"),
    "url_suffix": OptionSpec(OptionType.STRING, "--url-suffix"),
    "ext": OptionSpec(OptionType.ARRAY, "--ext"),
    "use_artifact_bundle": OptionSpec(OptionType.BOOLEAN, "--use-artifact-bundle"),
}

DEPLOYS_SCHEMA: OptionSchema = {
    "env": OptionSpec(OptionType.STRING, "--env"),
    "started": OptionSpec(OptionType.NUMBER, "--started"),
    "finished": OptionSpec(OptionType.NUMBER, "--finished"),
    "time": OptionSpec(OptionType.NUMBER, "--time"),
    "name": OptionSpec(OptionType.STRING, "--name"),
    "url": OptionSpec(OptionType.STRING, "--url"),
}
