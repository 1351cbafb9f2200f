"""Shared pydantic building blocks for cargo's JSON schemas."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainSerializer, PlainValidator

from cargolink.errors import TripleError

from .version import PlatformTriple


class CargoModel(BaseModel):
    """Immutable record decoded from cargo JSON output.

    Validation is strict: a JSON value of the wrong type is rejected rather than
    coerced. Unknown keys are ignored.
    """

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True, extra="ignore")

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible representation using cargo's key names."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class Edition(str, Enum):
    """The Rust edition of a package or target."""

    E2015 = "2015"
    E2018 = "2018"
    E2021 = "2021"

    def __str__(self) -> str:
        return self.value


class TargetKind(str, Enum):
    BIN = "bin"
    LIB = "lib"
    RLIB = "rlib"
    DYLIB = "dylib"
    CDYLIB = "cdylib"
    STATICLIB = "staticlib"
    PROC_MACRO = "proc-macro"
    EXAMPLE = "example"
    TEST = "test"
    BENCH = "bench"
    CUSTOM_BUILD = "custom-build"


def _coerce_triple(value: Any) -> PlatformTriple:
    if isinstance(value, PlatformTriple):
        return value
    if not isinstance(value, str):
        raise ValueError("platform triple must be a string")
    try:
        return PlatformTriple.parse(value)
    except TripleError as exc:
        # Surfaces as a validation error so the mapper reports the JSON location.
        raise ValueError(f"invalid platform triple '{value}': {exc.reason}") from exc


def _triple_to_str(value: PlatformTriple) -> str:
    return str(value)


TripleField = Annotated[
    PlatformTriple,
    PlainValidator(_coerce_triple),
    PlainSerializer(_triple_to_str, return_type=str),
]
