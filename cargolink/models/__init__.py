"""Typed models for cargo output."""

from __future__ import annotations

from .metadata import (
    DepKindInfo,
    Dependency,
    Edition,
    Metadata,
    Node,
    NodeDep,
    Package,
    PackageSource,
    Publishing,
    PublishRestriction,
    Resolve,
    SourceKind,
    Target,
    TargetKind,
)
from .unit_graph import Mode, PanicStrategy, Profile, Unit, UnitDependency, UnitGraph, UnitTarget
from .version import PlatformTriple, Version

__all__ = [
    "DepKindInfo",
    "Dependency",
    "Edition",
    "Metadata",
    "Mode",
    "Node",
    "NodeDep",
    "Package",
    "PackageSource",
    "PanicStrategy",
    "PlatformTriple",
    "Profile",
    "PublishRestriction",
    "Publishing",
    "Resolve",
    "SourceKind",
    "Target",
    "TargetKind",
    "Unit",
    "UnitDependency",
    "UnitGraph",
    "UnitTarget",
    "Version",
]
