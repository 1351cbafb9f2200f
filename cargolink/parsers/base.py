"""Parser interfaces for cargo output."""

from __future__ import annotations

from typing import Any

from cargolink.errors import DecodeError


def decode_output(data: bytes | str) -> str:
    """Decode captured stdout as strict UTF-8."""

    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(exc) from exc


class BaseParser:
    """Base interface for cargo output parsers."""

    name: str = "base"

    def parse(self, stdout: bytes | str) -> Any:
        raise NotImplementedError("Parsers must implement parse()")
