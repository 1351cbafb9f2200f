"""Parser for `cargo -Vv` output."""

from __future__ import annotations

import logging
from datetime import date

import semver

from cargolink.errors import DateError, SemverError, VersionKeyError
from cargolink.models.version import PlatformTriple, Version

from .base import BaseParser, decode_output

logger = logging.getLogger("cargolink.parsers.version")


class _LineCursor:
    """Forward-only cursor over the lines of the version output.

    A successful lookup moves the cursor past the matching line; a miss leaves
    it where it was. Keys must therefore appear in the order they are read.
    """

    def __init__(self, text: str) -> None:
        self._lines = [line.rstrip("\r") for line in text.splitlines()]
        self._position = 0

    def take(self, key: str) -> str | None:
        prefix = f"{key}: "
        for index in range(self._position, len(self._lines)):
            line = self._lines[index]
            if line.startswith(prefix):
                self._position = index + 1
                return line[len(prefix) :]
        return None

    def require(self, key: str) -> str:
        value = self.take(key)
        if value is None:
            raise VersionKeyError(key)
        return value


class VersionTextParser(BaseParser):
    """Parse stdout emitted by `cargo --version --verbose`."""

    name = "version_text"

    def parse(self, stdout: bytes | str) -> Version:
        cursor = _LineCursor(decode_output(stdout))

        release = self._parse_release(cursor.require("release"))
        commit_hash = cursor.take("commit-hash")
        raw_commit_date = cursor.take("commit-date")
        commit_date = self._parse_commit_date(raw_commit_date) if raw_commit_date is not None else None
        host = PlatformTriple.parse(cursor.require("host"))
        libgit2 = cursor.require("libgit2")
        libcurl = cursor.require("libcurl")
        os_name = cursor.require("os")

        if commit_hash is None:
            logger.debug("cargo %s reports no commit information", release)

        return Version(
            release=release,
            commit_hash=commit_hash,
            commit_date=commit_date,
            host=host,
            libgit2=libgit2,
            libcurl=libcurl,
            os=os_name,
        )

    @staticmethod
    def _parse_release(value: str) -> semver.Version:
        try:
            return semver.Version.parse(value)
        except (ValueError, TypeError) as exc:
            raise SemverError(value, exc) from exc

    @staticmethod
    def _parse_commit_date(value: str) -> date:
        try:
            return date.fromisoformat(value)
        except ValueError as exc:
            raise DateError(value, exc) from exc


def parse_version(stdout: bytes | str) -> Version:
    return VersionTextParser().parse(stdout)
