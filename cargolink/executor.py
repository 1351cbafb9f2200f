"""Run a prepared cargo command and capture its output."""

from __future__ import annotations

import asyncio
import logging
import os
import subprocess
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from cargolink.errors import ExecError, SpawnError

logger = logging.getLogger("cargolink.executor")


@dataclass(frozen=True)
class Command:
    """A fully prepared command: program path plus its argument list."""

    program: str | Path
    args: Sequence[str] = field(default_factory=tuple)
    cwd: str | Path | None = None
    # Extra variables layered over the current environment.
    env: Mapping[str, str] | None = None

    @property
    def argv(self) -> list[str]:
        return [str(self.program), *(str(arg) for arg in self.args)]

    def build_environment(self) -> dict[str, str] | None:
        if not self.env:
            return None
        env = os.environ.copy()
        env.update(self.env)
        return env


@dataclass(frozen=True)
class CommandOutput:
    """Raw result of one process invocation."""

    returncode: int
    stdout: bytes
    stderr: bytes
    duration_seconds: float

    @property
    def success(self) -> bool:
        return self.returncode == 0


class CommandExecutor:
    """Spawn one process per call and wait for it to exit.

    There is no timeout: a process that never exits blocks the caller.
    """

    def execute(self, command: Command) -> CommandOutput:
        argv = command.argv
        logger.debug("Executing command: %s", " ".join(argv))
        start_time = time.monotonic()
        try:
            completed = subprocess.run(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                cwd=str(command.cwd) if command.cwd else None,
                env=command.build_environment(),
                check=False,
            )
        except OSError as exc:
            raise SpawnError(exc, program=str(command.program)) from exc

        return CommandOutput(
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
            duration_seconds=time.monotonic() - start_time,
        )

    def run(self, command: Command) -> bytes:
        """Return stdout of ``command``, raising :class:`ExecError` on a non-zero exit."""
        return self._check(command, self.execute(command))

    async def execute_async(self, command: Command) -> CommandOutput:
        argv = command.argv
        logger.debug("Executing command: %s", " ".join(argv))
        start_time = time.monotonic()
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=str(command.cwd) if command.cwd else None,
                env=command.build_environment(),
            )
        except OSError as exc:
            raise SpawnError(exc, program=str(command.program)) from exc

        stdout_bytes, stderr_bytes = await process.communicate()
        return CommandOutput(
            returncode=process.returncode,
            stdout=stdout_bytes or b"",
            stderr=stderr_bytes or b"",
            duration_seconds=time.monotonic() - start_time,
        )

    async def run_async(self, command: Command) -> bytes:
        return self._check(command, await self.execute_async(command))

    @staticmethod
    def _check(command: Command, output: CommandOutput) -> bytes:
        if output.success:
            logger.debug("Command %s finished in %.2fs", command.program, output.duration_seconds)
            return output.stdout
        logger.warning("Command %s exited with status %s", " ".join(command.argv), output.returncode)
        raise ExecError(output.stderr, returncode=output.returncode)
