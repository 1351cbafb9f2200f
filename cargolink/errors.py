"""Error taxonomy shared by the executor, the version parser and the schema mapper."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds surfaced to callers."""

    VERSION = "version"
    EXEC = "exec"
    IO = "io"
    UTF8 = "utf8"
    SEMVER = "semver"
    TRIPLE = "triple"
    DATE = "date"
    SERDE = "serde"
    SCHEMA_VERSION = "schema_version"


class ParsingError(RuntimeError):
    """Base class for every failure raised by cargolink."""

    kind: ErrorKind


class VersionKeyError(ParsingError):
    """Raised when a required key is missing from `cargo -Vv` output."""

    kind = ErrorKind.VERSION

    def __init__(self, key: str) -> None:
        super().__init__(f'Missing "{key}" key when parsing Version')
        self.key = key


class ExecError(ParsingError):
    """Raised when the subprocess exits with a non-zero status.

    ``stderr`` holds the raw bytes exactly as the tool wrote them.
    """

    kind = ErrorKind.EXEC

    def __init__(self, stderr: bytes, *, returncode: int | None = None) -> None:
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(
            "Error when executing command. The following is the stderr output:\n" + self.stderr_text
        )

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")


class SpawnError(ParsingError):
    """Raised when the process could not be started at all."""

    kind = ErrorKind.IO

    def __init__(self, os_error: OSError, *, program: str | None = None) -> None:
        target = f" '{program}'" if program else ""
        super().__init__(f"Failed to spawn{target}: {os_error}")
        self.os_error = os_error
        self.program = program


class DecodeError(ParsingError):
    """Raised when tool output is not valid UTF-8."""

    kind = ErrorKind.UTF8

    def __init__(self, unicode_error: UnicodeDecodeError) -> None:
        super().__init__(f"Output is not valid UTF-8: {unicode_error}")
        self.unicode_error = unicode_error


class SemverError(ParsingError):
    """Raised when the release string is not a semantic version."""

    kind = ErrorKind.SEMVER

    def __init__(self, value: str, reason: Exception) -> None:
        super().__init__(f"Invalid semantic version '{value}': {reason}")
        self.value = value
        self.reason = reason


class TripleError(ParsingError):
    """Raised when a platform string is not a valid target triple."""

    kind = ErrorKind.TRIPLE

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Invalid platform triple '{value}': {reason}")
        self.value = value
        self.reason = reason


class DateError(ParsingError):
    """Raised when the commit date is not an ISO-8601 calendar date."""

    kind = ErrorKind.DATE

    def __init__(self, value: str, reason: Exception) -> None:
        super().__init__(f"Invalid commit date '{value}': {reason}")
        self.value = value
        self.reason = reason


class SerdeError(ParsingError):
    """Raised when JSON output does not match the expected schema."""

    kind = ErrorKind.SERDE

    def __init__(self, reason: str, *, location: str | None = None) -> None:
        message = f"{location}: {reason}" if location else reason
        super().__init__(message)
        self.reason = reason
        self.location = location


class SchemaVersionError(ParsingError):
    """Raised when a document declares a schema version the caller does not accept."""

    kind = ErrorKind.SCHEMA_VERSION

    def __init__(self, found: object, supported: Iterable[int]) -> None:
        self.found = found
        self.supported = tuple(sorted(supported))
        accepted = ", ".join(str(item) for item in self.supported)
        super().__init__(f"Unsupported schema version {found!r}; expected one of: {accepted}")


__all__ = [
    "DateError",
    "DecodeError",
    "ErrorKind",
    "ExecError",
    "ParsingError",
    "SchemaVersionError",
    "SemverError",
    "SerdeError",
    "SpawnError",
    "TripleError",
    "VersionKeyError",
]
