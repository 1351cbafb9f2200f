"""Pydantic models for `cargo build --unit-graph` output."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import Field, NonNegativeInt

from .base import CargoModel, Edition, TargetKind, TripleField


class PanicStrategy(str, Enum):
    UNWIND = "unwind"
    ABORT = "abort"


class Mode(str, Enum):
    """What a unit does: compile, check, document, test or run a build script."""

    TEST = "test"
    BUILD = "build"
    CHECK = "check"
    DOC = "doc"
    DOCTEST = "doctest"
    RUN_CUSTOM_BUILD = "run-custom-build"


class UnitTarget(CargoModel):
    """Target of a unit; unlike the metadata target, ``required-features`` is always present."""

    kind: list[TargetKind]
    crate_types: list[str]
    name: str
    src_path: Path
    edition: Edition
    required_features: list[str] = Field(alias="required-features")
    doc: bool
    doctest: bool
    test: bool


class Profile(CargoModel):
    """Profile settings applied to a unit.

    These may differ from the manifest profile; cargo adjusts some settings per
    unit, for example forcing ``panic = "unwind"`` for tests.
    """

    name: str
    opt_level: str
    lto: str
    # None means the compiler default.
    codegen_units: int | None = None
    debuginfo: int | str | None = None
    debug_assertions: bool
    overflow_checks: bool
    rpath: bool
    incremental: bool
    panic: PanicStrategy


class UnitDependency(CargoModel):
    index: NonNegativeInt
    extern_crate_name: str
    # None when the public-dependency feature is not enabled.
    public: bool | None = None
    noprelude: bool = False


class Unit(CargoModel):
    """One compilation action in the unit graph."""

    pkg_id: str
    target: UnitTarget
    profile: Profile
    platform: TripleField | None = None
    mode: Mode
    features: list[str]
    is_std: bool = False
    dependencies: list[UnitDependency]

    @property
    def is_host(self) -> bool:
        return self.platform is None


class UnitGraph(CargoModel):
    """Parsed unit graph.

    Indices in ``roots`` and in each unit's dependencies are not bounds checked;
    :meth:`root_units` raises ``IndexError`` for an index past the end.
    """

    version: int
    units: list[Unit]
    roots: list[NonNegativeInt]

    def root_units(self) -> list[Unit]:
        return [self.units[index] for index in self.roots]

    def dependencies_of(self, unit: Unit) -> list[Unit]:
        return [self.units[dependency.index] for dependency in unit.dependencies]


__all__ = [
    "Mode",
    "PanicStrategy",
    "Profile",
    "Unit",
    "UnitDependency",
    "UnitGraph",
    "UnitTarget",
]
