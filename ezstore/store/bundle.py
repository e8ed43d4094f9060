"""Downloadable package bundles."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from ezstore.store.app import App
from ezstore.store.packages import Package
from ezstore.store.slices import pretty_string
from ezstore.version import Version, parse_version

_BUNDLE_PATTERN = re.compile(
    r"([0-9a-zA-Z.-]+)_([\d.]+)_([a-zA-Z0-9]+)_~?_([a-z0-9]+).([a-zA-Z]+)", re.ASCII
)


class NoBundleError(LookupError):
    """No bundle matches what was asked for."""


@dataclass(frozen=True)
class Bundle:
    """A package file with its format and download URL."""

    package: Package
    format: str
    url: str

    @property
    def name(self) -> str:
        return self.package.name

    @property
    def publisher_id(self) -> str:
        return self.package.publisher_id

    @property
    def version(self) -> Version:
        return self.package.version

    @property
    def arch(self) -> str:
        return self.package.arch

    def __str__(self) -> str:
        return (
            f"{self.name}_{self.version}_{self.arch}__{self.publisher_id}"
            f'.{self.format} ("{self.url}")'
        )


def parse_bundle(value: str, url: str) -> Bundle:
    """Parse a bundle file name such as "Name_1.0.0.0_x64__id.msix"."""
    match = _BUNDLE_PATTERN.fullmatch(value)
    if match is None:
        raise ValueError(f'"{value}" is not valid bundle')
    try:
        version = parse_version(match[2])
    except ValueError as error:
        raise ValueError(f'"{value}" is not valid bundle') from error
    package = Package(
        name=match[1],
        publisher_id=match[4],
        version=version,
        arch=match[3].lower(),
    )
    return Bundle(package=package, format=match[5].lower(), url=url)


class Bundles:
    """Distinct bundles; the first one added wins."""

    def __init__(self, *bundles: Bundle) -> None:
        self._elements: dict[str, Bundle] = {}
        for bundle in bundles:
            self.add(bundle)

    def add(self, bundle: Bundle) -> None:
        """Add a bundle unless an identical one is already present."""
        self._elements.setdefault(str(bundle), bundle)

    def values(self) -> list[Bundle]:
        """Return the bundles."""
        return list(self._elements.values())

    def get_app_bundle(self, app: App) -> Bundle:
        """Return the bundle whose package is the app's package."""
        for bundle in self.values():
            if bundle.package == app.package:
                return bundle
        raise NoBundleError(f'no bundle for "{app.package}"')

    def get_dependency(self, name: str) -> Bundle:
        """Return the highest-version bundle with the given name."""
        latest: Bundle | None = None
        for bundle in self.values():
            if bundle.name != name:
                continue
            if latest is None or bundle.version.compare(latest.version) == 1:
                latest = bundle
        if latest is None:
            raise NoBundleError(f'no bundle for "{name}"')
        return latest

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Bundle]:
        return iter(self.values())

    def __str__(self) -> str:
        return pretty_string(self.values())