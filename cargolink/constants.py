"""Internal defaults and constants for cargolink."""

from __future__ import annotations

DEFAULT_PROGRAM = "cargo"
PROGRAM_ENV_VAR = "CARGO"

METADATA_FORMAT_VERSION = 1
UNIT_GRAPH_FORMAT_VERSION = 1
SUPPORTED_METADATA_VERSIONS = frozenset({METADATA_FORMAT_VERSION})
SUPPORTED_UNIT_GRAPH_VERSIONS = frozenset({UNIT_GRAPH_FORMAT_VERSION})

DEFAULT_UNIT_GRAPH_TOOLCHAIN = "nightly"
DEFAULT_UNIT_GRAPH_SUBCOMMAND = "build"
