"""Run cargo and map its version, metadata and unit-graph output onto typed models."""

from __future__ import annotations

from .cargo import Cargo
from .config import MetadataConfig, UnitGraphConfig, resolve_program
from .errors import (
    DateError,
    DecodeError,
    ErrorKind,
    ExecError,
    ParsingError,
    SchemaVersionError,
    SemverError,
    SerdeError,
    SpawnError,
    TripleError,
    VersionKeyError,
)
from .executor import Command, CommandExecutor, CommandOutput
from .models import Metadata, PlatformTriple, UnitGraph, Version
from .parsers import get_parser, parse_metadata, parse_unit_graph, parse_version

__all__ = [
    "Cargo",
    "Command",
    "CommandExecutor",
    "CommandOutput",
    "DateError",
    "DecodeError",
    "ErrorKind",
    "ExecError",
    "Metadata",
    "MetadataConfig",
    "ParsingError",
    "PlatformTriple",
    "SchemaVersionError",
    "SemverError",
    "SerdeError",
    "SpawnError",
    "TripleError",
    "UnitGraph",
    "UnitGraphConfig",
    "Version",
    "VersionKeyError",
    "get_parser",
    "parse_metadata",
    "parse_unit_graph",
    "parse_version",
    "resolve_program",
]
