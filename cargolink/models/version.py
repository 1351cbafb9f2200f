"""Value records produced from `cargo -Vv` output."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date

import semver

from cargolink.errors import TripleError

_ARCHITECTURE_PATTERN = re.compile(
    r"^(?:"
    r"x86_64h?|x86|i[3-7]86|"
    r"aarch64(?:_be|_32)?|arm64(?:e|_32|ec)?|arm(?:eb)?(?:v\w+)?|thumb\w*|"
    r"riscv(?:32|64)\w*|wasm(?:32|64)(?:v\d+)?|"
    r"powerpc(?:64)?(?:le)?|mips\w*|s390x|sparc(?:v9|64)?|"
    r"loongarch(?:32|64)|hexagon|avr|bpf(?:eb|el)|msp430|nvptx(?:64)?|"
    r"m68k|csky|xtensa|amdgcn|spirv\w*"
    r")$"
)
_COMPONENT_PATTERN = re.compile(r"^[A-Za-z0-9_.]+$")


@dataclass(frozen=True)
class PlatformTriple:
    """A target triple such as ``x86_64-unknown-linux-gnu``.

    Four components are recognised: architecture, vendor, operating system and
    an optional environment. The two-part form ``arch-os`` and the bare-metal
    form ``arch-none-abi`` get vendor ``unknown``. ``str()`` returns the text
    the triple was parsed from so it can be handed back to the tool unchanged.
    """

    architecture: str
    vendor: str
    operating_system: str
    environment: str | None = None
    raw: str = field(default="", compare=False, repr=False)

    @classmethod
    def parse(cls, value: str) -> PlatformTriple:
        text = value.strip() if isinstance(value, str) else value
        if not isinstance(text, str) or not text:
            raise TripleError(str(value), "empty platform string")

        parts = text.split("-")
        if len(parts) < 2:
            raise TripleError(text, "expected at least architecture and operating system")
        for part in parts:
            if not _COMPONENT_PATTERN.match(part):
                raise TripleError(text, f"invalid component '{part}'")
        if not _ARCHITECTURE_PATTERN.match(parts[0]):
            raise TripleError(text, f"unrecognised architecture '{parts[0]}'")

        if len(parts) == 2:
            architecture, operating_system = parts
            return cls(architecture, "unknown", operating_system, None, raw=text)

        if len(parts) == 3 and parts[1] == "none":
            # Bare-metal form: arch-none-abi, e.g. thumbv7em-none-eabihf.
            architecture, operating_system, environment = parts
            return cls(architecture, "unknown", operating_system, environment, raw=text)

        architecture, vendor, operating_system, *rest = parts
        environment = "-".join(rest) if rest else None
        return cls(architecture, vendor, operating_system, environment, raw=text)

    def __str__(self) -> str:
        if self.raw:
            return self.raw
        parts = [self.architecture, self.vendor, self.operating_system]
        if self.environment:
            parts.append(self.environment)
        return "-".join(parts)


@dataclass(frozen=True)
class Version:
    """Parsed output of ``cargo --version --verbose``."""

    release: semver.Version
    host: PlatformTriple
    libgit2: str
    libcurl: str
    os: str
    # Only present for builds made from a git checkout.
    commit_hash: str | None = None
    commit_date: date | None = None
