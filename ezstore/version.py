"""Four-part versions as used by Windows packages."""

from __future__ import annotations

import re
from dataclasses import dataclass

_PATTERN = re.compile(r"v?(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:\.(\d+))?", re.ASCII)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True, order=True)
class Version:
    """A major.minor.build.revision version."""

    major: int = 0
    minor: int = 0
    build: int = 0
    revision: int = 0

    def __str__(self) -> str:
        return f"v{self.major}.{self.minor}.{self.build}.{self.revision}"

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Return the four numbers of the version."""
        return (self.major, self.minor, self.build, self.revision)

    def compare(self, other: Version) -> int:
        """Return -1, 0 or 1 as this version is lower than, equal to or higher than other."""
        left, right = self.as_tuple(), other.as_tuple()
        return (left > right) - (left < right)


@dataclass(frozen=True)
class FileInfo:
    """A downloaded package file."""

    path: str
    name: str
    version: Version


def _to_int64(text: str | None) -> int:
    if not text:
        return 0
    number = int(text)
    if number > _INT64_MAX:
        raise ValueError(
            f'can not convert "{text}" to int64: '
            f'strconv.ParseInt: parsing "{text}": value out of range'
        )
    return number


def parse_version(value: str) -> Version:
    """Parse a version of one to four dot-separated numbers, optionally prefixed by "v"."""
    match = _PATTERN.fullmatch(value)
    if match is None:
        raise ValueError(f'"{value}" is not a valid version')
    return Version(*(_to_int64(group) for group in match.groups()))