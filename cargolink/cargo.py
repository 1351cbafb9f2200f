"""High level entry points: run cargo and return typed results."""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping, Sequence
from pathlib import Path

from cargolink.config import MetadataConfig, UnitGraphConfig, resolve_program
from cargolink.executor import Command, CommandExecutor
from cargolink.models.metadata import Metadata
from cargolink.models.unit_graph import UnitGraph
from cargolink.models.version import Version
from cargolink.parsers import MetadataParser, UnitGraphParser, VersionTextParser

logger = logging.getLogger("cargolink.cargo")

VERSION_ARGS = ("--version", "--verbose")


class Cargo:
    """Invoke cargo and parse its output.

    The instance only stores configuration; every call prepares its own
    :class:`Command`, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        program: str | Path | None = None,
        *,
        cwd: str | Path | None = None,
        env: Mapping[str, str] | None = None,
        executor: CommandExecutor | None = None,
    ) -> None:
        self.program = resolve_program(program)
        self.cwd = cwd
        self.env = dict(env) if env else None
        self.executor = executor or CommandExecutor()

    def command(self, args: Sequence[str]) -> Command:
        return Command(program=self.program, args=tuple(args), cwd=self.cwd, env=self.env)

    # ------------------------------------------------------------------
    # Synchronous API
    # ------------------------------------------------------------------

    def version(self) -> Version:
        stdout = self.executor.run(self.command(VERSION_ARGS))
        return VersionTextParser().parse(stdout)

    def metadata(
        self,
        config: MetadataConfig | None = None,
        *,
        supported_versions: Collection[int] | None = None,
    ) -> Metadata:
        args = (config or MetadataConfig()).to_args()
        stdout = self.executor.run(self.command(args))
        metadata = MetadataParser(supported_versions).parse(stdout)
        logger.debug("cargo metadata returned %d package(s)", len(metadata.packages))
        return metadata

    def unit_graph(
        self,
        config: UnitGraphConfig | None = None,
        *,
        supported_versions: Collection[int] | None = None,
    ) -> UnitGraph:
        args = (config or UnitGraphConfig()).to_args()
        stdout = self.executor.run(self.command(args))
        graph = UnitGraphParser(supported_versions).parse(stdout)
        logger.debug("cargo unit graph returned %d unit(s)", len(graph.units))
        return graph

    # ------------------------------------------------------------------
    # asyncio API
    # ------------------------------------------------------------------

    async def version_async(self) -> Version:
        stdout = await self.executor.run_async(self.command(VERSION_ARGS))
        return VersionTextParser().parse(stdout)

    async def metadata_async(
        self,
        config: MetadataConfig | None = None,
        *,
        supported_versions: Collection[int] | None = None,
    ) -> Metadata:
        args = (config or MetadataConfig()).to_args()
        stdout = await self.executor.run_async(self.command(args))
        return MetadataParser(supported_versions).parse(stdout)

    async def unit_graph_async(
        self,
        config: UnitGraphConfig | None = None,
        *,
        supported_versions: Collection[int] | None = None,
    ) -> UnitGraph:
        args = (config or UnitGraphConfig()).to_args()
        stdout = await self.executor.run_async(self.command(args))
        return UnitGraphParser(supported_versions).parse(stdout)
