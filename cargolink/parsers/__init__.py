"""Parser registry for cargolink."""

from __future__ import annotations

from collections.abc import Collection

from .base import BaseParser, decode_output
from .schema import JSONSchemaParser, MetadataParser, UnitGraphParser, parse_metadata, parse_unit_graph
from .version import VersionTextParser, parse_version

_PARSER_CLASSES: dict[str, type[BaseParser]] = {
    VersionTextParser.name: VersionTextParser,
    MetadataParser.name: MetadataParser,
    UnitGraphParser.name: UnitGraphParser,
}


class UnknownParserError(LookupError):
    """Raised when no parser is registered under the requested name."""


def get_parser(name: str, *, supported_versions: Collection[int] | None = None) -> BaseParser:
    normalized = (name or "").lower()
    if normalized not in _PARSER_CLASSES:
        raise UnknownParserError(f"No parser registered for '{name}'")
    parser_cls = _PARSER_CLASSES[normalized]
    if issubclass(parser_cls, JSONSchemaParser):
        return parser_cls(supported_versions)
    return parser_cls()


__all__ = [
    "BaseParser",
    "JSONSchemaParser",
    "MetadataParser",
    "UnitGraphParser",
    "UnknownParserError",
    "VersionTextParser",
    "decode_output",
    "get_parser",
    "parse_metadata",
    "parse_unit_graph",
    "parse_version",
]
