"""Applications listed in the product catalog and their framework dependencies."""

from __future__ import annotations

from collections.abc import Iterator

from ezstore.store.packages import Package, parse_package
from ezstore.store.slices import pretty_string, unordered_equal


class App:
    """A package together with the names of the frameworks it depends on."""

    def __init__(self, package: Package) -> None:
        self.package = package
        self._dependencies: dict[str, None] = {}

    def add(self, dependency: str) -> None:
        """Record a dependency name; duplicates are ignored."""
        self._dependencies[dependency] = None

    def dependencies(self) -> list[str]:
        """Return the dependency names."""
        return list(self._dependencies)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, App):
            return NotImplemented
        return self.package == other.package and unordered_equal(
            self.dependencies(), other.dependencies()
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self.package} {pretty_string(self.dependencies())}"

    def __repr__(self) -> str:
        return f"App({self})"


def parse_app(value: str) -> App:
    """Create an app without dependencies from a package full name."""
    return App(parse_package(value))


class Apps:
    """Apps keyed by their package identity; the first one added wins."""

    def __init__(self, *apps: App) -> None:
        self._elements: dict[str, App] = {}
        for app in apps:
            self.add(app)

    def add(self, app: App) -> None:
        """Add an app unless one with the same package is already present."""
        self._elements.setdefault(str(app.package), app)

    def values(self) -> list[App]:
        """Return the apps."""
        return list(self._elements.values())

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[App]:
        return iter(self.values())

    def __str__(self) -> str:
        return pretty_string(self.values())