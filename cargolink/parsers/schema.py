"""Map cargo's JSON output formats onto the typed models."""

from __future__ import annotations

import json
import logging
from collections.abc import Collection
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from cargolink.errors import SchemaVersionError, SerdeError
from cargolink.models.base import CargoModel
from cargolink.models.metadata import Metadata
from cargolink.models.unit_graph import UnitGraph

from .base import BaseParser, decode_output

logger = logging.getLogger("cargolink.parsers.schema")

ModelT = TypeVar("ModelT", bound=CargoModel)


def _format_location(loc: tuple[Any, ...]) -> str | None:
    if not loc:
        return None
    return ".".join(str(part) for part in loc)


def _serde_error_from_validation(exc: ValidationError) -> SerdeError:
    errors = exc.errors(include_url=False)
    if not errors:
        return SerdeError(str(exc))
    first = errors[0]
    reason = first.get("msg", "invalid value")
    if len(errors) > 1:
        reason = f"{reason} (and {len(errors) - 1} more error(s))"
    return SerdeError(reason, location=_format_location(tuple(first.get("loc", ()))))


class JSONSchemaParser(BaseParser, Generic[ModelT]):
    """Decode a JSON document into ``model``.

    When ``supported_versions`` is set the document's ``version`` field is
    checked before any other field is decoded.
    """

    model: type[ModelT]

    def __init__(self, supported_versions: Collection[int] | None = None) -> None:
        self.supported_versions = frozenset(supported_versions) if supported_versions is not None else None

    def parse(self, stdout: bytes | str) -> ModelT:
        text = decode_output(stdout)
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SerdeError(exc.msg, location=f"line {exc.lineno} column {exc.colno}") from exc

        if self.supported_versions is not None:
            self._check_version(payload)

        try:
            # Strict JSON-mode validation: no coercion across JSON types.
            return self.model.model_validate_json(text)
        except ValidationError as exc:
            raise _serde_error_from_validation(exc) from exc

    def _check_version(self, payload: Any) -> None:
        found = payload.get("version") if isinstance(payload, dict) else None
        if not isinstance(found, int) or isinstance(found, bool) or found not in self.supported_versions:
            raise SchemaVersionError(found, self.supported_versions)
        logger.debug("%s document declares supported schema version %s", self.model.__name__, found)


class MetadataParser(JSONSchemaParser[Metadata]):
    """Parse stdout produced by `cargo metadata --format-version 1`."""

    name = "metadata_json"
    model = Metadata


class UnitGraphParser(JSONSchemaParser[UnitGraph]):
    """Parse stdout produced by `cargo build --unit-graph`."""

    name = "unit_graph_json"
    model = UnitGraph


def parse_metadata(data: bytes | str, *, supported_versions: Collection[int] | None = None) -> Metadata:
    return MetadataParser(supported_versions).parse(data)


def parse_unit_graph(data: bytes | str, *, supported_versions: Collection[int] | None = None) -> UnitGraph:
    return UnitGraphParser(supported_versions).parse(data)
