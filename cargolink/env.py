"""Environment lookups for cargolink, with optional `.env` support.

A `.env` file is searched for from the current working directory upwards.
Process environment variables take precedence over the file unless it sets
``CARGOLINK_FORCE_ENV_OVERRIDE=true``, in which case only the file is read.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from dotenv import dotenv_values, find_dotenv

FORCE_OVERRIDE_VAR = "CARGOLINK_FORCE_ENV_OVERRIDE"

_dotenv: dict[str, str | None] = {}
_force_override = False


def reload_env(dotenv_mapping: Mapping[str, str | None] | None = None) -> None:
    """Re-read the `.env` file, or use ``dotenv_mapping`` in its place (tests)."""

    global _dotenv, _force_override

    if dotenv_mapping is None:
        path = find_dotenv(usecwd=True)
        dotenv_mapping = dotenv_values(path) if path else {}

    _dotenv = dict(dotenv_mapping)
    _force_override = (_dotenv.get(FORCE_OVERRIDE_VAR) or "").strip().lower() == "true"


reload_env()


def env_override_enabled() -> bool:
    return _force_override


def get_env(key: str, default: str | None = None) -> str | None:
    value = None if _force_override else os.getenv(key)
    if value is None:
        value = _dotenv.get(key)
    return value if value is not None else default
