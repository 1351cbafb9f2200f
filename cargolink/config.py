"""Command-line construction for cargo invocations and program lookup."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cargolink.constants import (
    DEFAULT_PROGRAM,
    DEFAULT_UNIT_GRAPH_SUBCOMMAND,
    DEFAULT_UNIT_GRAPH_TOOLCHAIN,
    METADATA_FORMAT_VERSION,
    PROGRAM_ENV_VAR,
)
from cargolink.models.base import TripleField
from cargolink.env import get_env

logger = logging.getLogger("cargolink.config")


def resolve_program(explicit: str | Path | None = None) -> str:
    """Locate the cargo executable.

    Order: the explicit value, the ``CARGO`` environment variable, a ``PATH``
    search, then the bare program name.
    """

    if explicit:
        return str(explicit)

    from_env = get_env(PROGRAM_ENV_VAR)
    if from_env:
        logger.debug("Using cargo from %s: %s", PROGRAM_ENV_VAR, from_env)
        return from_env

    found = shutil.which(DEFAULT_PROGRAM)
    if found:
        return found

    logger.debug("cargo not found on PATH; falling back to '%s'", DEFAULT_PROGRAM)
    return DEFAULT_PROGRAM


def _ensure_str_list(value: Any, field_name: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    raise ValueError(f"{field_name} must be a list of strings or a comma separated string")


class MetadataConfig(BaseModel):
    """Options passed to ``cargo metadata``."""

    model_config = ConfigDict(frozen=True)

    all_features: bool = False
    no_default_features: bool = False
    features: list[str] = Field(default_factory=list)
    filter_platform: TripleField | None = None
    manifest_path: Path | None = None
    no_deps: bool = False
    offline: bool = False
    locked: bool = False
    frozen: bool = False

    @field_validator("features", mode="before")
    @classmethod
    def _ensure_features(cls, value: Any) -> list[str]:
        return _ensure_str_list(value, "features")

    def to_args(self) -> list[str]:
        args = ["metadata", "--format-version", str(METADATA_FORMAT_VERSION)]
        if self.all_features:
            args.append("--all-features")
        if self.no_default_features:
            args.append("--no-default-features")
        if self.features:
            args.extend(["--features", ",".join(self.features)])
        if self.filter_platform is not None:
            args.extend(["--filter-platform", str(self.filter_platform)])
        if self.manifest_path is not None:
            args.extend(["--manifest-path", str(self.manifest_path)])
        if self.no_deps:
            args.append("--no-deps")
        for flag in ("offline", "locked", "frozen"):
            if getattr(self, flag):
                args.append(f"--{flag}")
        return args


class UnitGraphConfig(BaseModel):
    """Options for ``cargo <subcommand> --unit-graph``, which needs a nightly toolchain."""

    model_config = ConfigDict(frozen=True)

    subcommand: str = DEFAULT_UNIT_GRAPH_SUBCOMMAND
    toolchain: str | None = DEFAULT_UNIT_GRAPH_TOOLCHAIN
    manifest_path: Path | None = None
    extra_args: list[str] = Field(default_factory=list)

    @field_validator("extra_args", mode="before")
    @classmethod
    def _ensure_args_list(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            return [value]
        return _ensure_str_list(value, "extra_args")

    def to_args(self) -> list[str]:
        args: list[str] = []
        if self.toolchain:
            args.append(f"+{self.toolchain}")
        args.extend([self.subcommand, "-Z", "unstable-options", "--unit-graph"])
        if self.manifest_path is not None:
            args.extend(["--manifest-path", str(self.manifest_path)])
        args.extend(self.extra_args)
        return args
