"""Processor architectures as named by the store and the host."""

from __future__ import annotations

import platform
from enum import Enum


class Architecture(Enum):
    """A processor architecture."""

    AMD64 = 1
    I386 = 2
    ARM64 = 3
    ARM = 4

    def __str__(self) -> str:
        return _LITERALS[self]

    def compatible_with(self) -> list[str]:
        """Return the store architecture names this architecture can run."""
        return list(_COMPATIBILITIES[self])


_NAMES = {
    "x64": Architecture.AMD64,
    "amd64": Architecture.AMD64,
    "x86": Architecture.I386,
    "386": Architecture.I386,
    "arm64": Architecture.ARM64,
    "arm": Architecture.ARM,
}

_LITERALS = {
    Architecture.AMD64: "x64",
    Architecture.I386: "x86",
    Architecture.ARM64: "arm64",
    Architecture.ARM: "arm",
}

_COMPATIBILITIES = {
    Architecture.AMD64: ("x64", "x86", "neutral"),
    Architecture.I386: ("x86", "neutral"),
    Architecture.ARM64: ("arm64", "arm", "neutral"),
    Architecture.ARM: ("arm", "neutral"),
}

_MACHINE_ALIASES = {
    "x86_64": "amd64",
    "i386": "386",
    "i486": "386",
    "i586": "386",
    "i686": "386",
    "aarch64": "arm64",
    "armv7l": "arm",
    "armv6l": "arm",
}


def parse_architecture(value: str) -> Architecture:
    """Return the architecture named by a store or host literal."""
    name = value.strip().lower()
    if not name:
        raise ValueError("value can not be empty")
    try:
        return _NAMES[name]
    except KeyError:
        raise ValueError(f'"{name}" is unknown architecture') from None


def current_architecture() -> Architecture:
    """Return the architecture of the running machine."""
    machine = platform.machine()
    name = machine.strip().lower()
    name = _MACHINE_ALIASES.get(name, name)
    try:
        return parse_architecture(name)
    except ValueError as error:
        raise RuntimeError(f'"{machine}" architecture is not supported: {error}') from error