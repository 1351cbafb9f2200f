"""Pydantic models for `cargo metadata --format-version 1` output."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator, model_serializer, model_validator

from .base import CargoModel, Edition, TargetKind


class PublishRestriction(str, Enum):
    UNRESTRICTED = "unrestricted"
    FORBIDDEN = "forbidden"
    REGISTRIES = "registries"


class Publishing(CargoModel):
    """Where a package may be published.

    Cargo emits a single optional list: ``null`` means unrestricted, ``[]`` means
    publishing is forbidden and a non-empty list names the allowed registries.
    The three states are made explicit here and only collapsed again on output.
    """

    restriction: PublishRestriction
    registries: tuple[str, ...] = ()

    @classmethod
    def from_wire(cls, value: Any) -> Publishing:
        """Build from cargo's `publish` value: null, an empty list or registry names."""
        if isinstance(value, Publishing):
            return value
        if value is None:
            return cls(restriction=PublishRestriction.UNRESTRICTED)
        if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
            raise ValueError("publish must be null or a list of registry names")
        if not value:
            return cls(restriction=PublishRestriction.FORBIDDEN)
        return cls(restriction=PublishRestriction.REGISTRIES, registries=tuple(value))

    @model_validator(mode="after")
    def _check_registries(self) -> Publishing:
        if (self.restriction is PublishRestriction.REGISTRIES) != bool(self.registries):
            raise ValueError("registries must be given exactly when restriction is 'registries'")
        return self

    @model_serializer
    def _to_wire(self) -> list[str] | None:
        if self.restriction is PublishRestriction.UNRESTRICTED:
            return None
        return list(self.registries)

    def allows(self, registry: str) -> bool:
        if self.restriction is PublishRestriction.UNRESTRICTED:
            return True
        return registry in self.registries


class SourceKind(str, Enum):
    PATH = "path"
    REGISTRY = "registry"
    GIT = "git"
    OTHER = "other"


class PackageSource(CargoModel):
    """Structured view of a package's source id string."""

    kind: SourceKind
    url: str | None = None
    revision: str | None = None

    @classmethod
    def parse(cls, source: str | None) -> PackageSource:
        if source is None:
            return cls(kind=SourceKind.PATH)
        if source.startswith(("registry+", "sparse+")):
            # The sparse protocol keeps its prefix as part of the index url.
            url = source.split("+", 1)[1] if source.startswith("registry+") else source
            return cls(kind=SourceKind.REGISTRY, url=url)
        if source.startswith("git+"):
            url, _, revision = source[len("git+") :].partition("#")
            return cls(kind=SourceKind.GIT, url=url, revision=revision or None)
        return cls(kind=SourceKind.OTHER, url=source)


class Dependency(CargoModel):
    """A dependency declared in a package's manifest."""

    name: str
    source: str | None = None
    req: str
    kind: str | None = None
    rename: str | None = None
    optional: bool
    uses_default_features: bool
    features: list[str]
    # cfg() expression or triple the dependency is limited to.
    target: str | None = None
    path: Path | None = None
    registry: str | None = None


class Target(CargoModel):
    """A cargo target (library, binary, test, ...) of a package."""

    kind: list[TargetKind]
    crate_types: list[str]
    name: str
    src_path: Path
    edition: Edition
    required_features: list[str] | None = Field(default=None, alias="required-features")
    doc: bool
    doctest: bool
    test: bool


class Package(CargoModel):
    """A single package from the workspace or its dependency tree."""

    name: str
    version: str
    id: str
    license: str | None = None
    license_file: str | None = None
    description: str | None = None
    source: str | None = None
    dependencies: list[Dependency]
    targets: list[Target]
    features: dict[str, list[str]]
    manifest_path: Path
    package_metadata: Any | None = Field(default=None, alias="metadata")
    # A missing key means the same as null: no restriction.
    publish: Publishing = Field(default_factory=lambda: Publishing.from_wire(None))
    authors: list[str]
    categories: list[str]
    keywords: list[str]
    default_run: str | None = None
    rust_version: str | None = None
    readme: str | None = None
    repository: str | None = None
    homepage: str | None = None
    documentation: str | None = None
    edition: Edition
    links: str | None = None

    @field_validator("publish", mode="before")
    @classmethod
    def _publish_from_wire(cls, value: Any) -> Publishing:
        return Publishing.from_wire(value)

    @property
    def source_locator(self) -> PackageSource:
        return PackageSource.parse(self.source)

    @property
    def is_local(self) -> bool:
        return self.source is None


class DepKindInfo(CargoModel):
    kind: str | None = None
    target: str | None = None


class NodeDep(CargoModel):
    name: str
    pkg: str
    dep_kinds: list[DepKindInfo] = Field(default_factory=list)


class Node(CargoModel):
    """A package in the resolved dependency graph."""

    id: str
    dependencies: list[str]
    deps: list[NodeDep]
    features: list[str]


class Resolve(CargoModel):
    """The resolved dependency graph; absent when cargo runs with ``--no-deps``."""

    nodes: list[Node]
    root: str | None = None

    def get_node(self, package_id: str) -> Node | None:
        return next((node for node in self.nodes if node.id == package_id), None)


class Metadata(CargoModel):
    """Parsed output of ``cargo metadata``.

    ``packages`` lists every package in the workspace plus all feature-enabled
    dependencies unless ``--no-deps`` was used, in which case ``resolve`` is
    ``None``. ``workspace_members`` holds package ids; the mapper does not check
    that they resolve into ``packages``.
    """

    packages: list[Package]
    workspace_members: list[str]
    resolve: Resolve | None = None
    target_directory: Path
    version: int
    workspace_root: Path
    workspace_metadata: Any | None = Field(default=None, alias="metadata")

    def get_package(self, package_id: str) -> Package | None:
        return next((package for package in self.packages if package.id == package_id), None)

    def workspace_packages(self) -> list[Package]:
        members = set(self.workspace_members)
        return [package for package in self.packages if package.id in members]


__all__ = [
    "DepKindInfo",
    "Dependency",
    "Edition",
    "Metadata",
    "Node",
    "NodeDep",
    "Package",
    "PackageSource",
    "PublishRestriction",
    "Publishing",
    "Resolve",
    "SourceKind",
    "Target",
    "TargetKind",
]
