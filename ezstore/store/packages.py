"""Package identities as used by the store."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ezstore.version import Version, parse_version

_FAMILY_PATTERN = re.compile(r"([0-9a-zA-Z.-]+)_([a-z0-9]+)", re.ASCII)
_PACKAGE_PATTERN = re.compile(
    r"([0-9a-zA-Z.-]+)_([\d.]+)_([a-zA-Z0-9]+)_~?_([a-z0-9]+)", re.ASCII
)


@dataclass(frozen=True)
class PackageFamilyName:
    """A package name together with its publisher id."""

    name: str
    publisher_id: str

    def __str__(self) -> str:
        return f"{self.name}_{self.publisher_id}"


@dataclass(frozen=True)
class Package:
    """A fully identified package: name, publisher id, version and architecture."""

    name: str
    publisher_id: str
    version: Version
    arch: str

    @property
    def family(self) -> PackageFamilyName:
        """The family name of this package."""
        return PackageFamilyName(self.name, self.publisher_id)

    def __str__(self) -> str:
        return f"{self.name}_{self.version}_{self.arch}__{self.publisher_id}"


def parse_package_family_name(value: str) -> PackageFamilyName:
    """Parse a "<name>_<publisher id>" string."""
    match = _FAMILY_PATTERN.fullmatch(value)
    if match is None:
        raise ValueError(f'"{value}" is not valid package family name')
    return PackageFamilyName(name=match[1], publisher_id=match[2])


def parse_package(value: str) -> Package:
    """Parse a "<name>_<version>_<arch>_~_<publisher id>" package full name."""
    match = _PACKAGE_PATTERN.fullmatch(value)
    if match is None:
        raise ValueError(f'"{value}" is not valid package')
    try:
        version = parse_version(match[2])
    except ValueError as error:
        raise ValueError(f'"{value}" is not valid package') from error
    return Package(
        name=match[1],
        publisher_id=match[4],
        version=version,
        arch=match[3].lower(),
    )