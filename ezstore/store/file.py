"""Application bundles grouped with the bundles they depend on."""

from __future__ import annotations

from collections.abc import Iterator

from ezstore.arch import Architecture
from ezstore.store.bundle import Bundle, Bundles
from ezstore.store.slices import pretty_string, unordered_equal
from ezstore.version import Version


class NoFileError(LookupError):
    """No file matches the requested version and architecture."""


class File:
    """An application bundle and its dependency bundles."""

    def __init__(self, bundle: Bundle) -> None:
        self.bundle = bundle
        self._dependencies = Bundles()

    @property
    def version(self) -> Version:
        return self.bundle.version

    @property
    def arch(self) -> str:
        return self.bundle.arch

    def add(self, dependency: Bundle) -> None:
        """Record a dependency bundle; duplicates are ignored."""
        self._dependencies.add(dependency)

    def dependencies(self) -> list[Bundle]:
        """Return the dependency bundles."""
        return self._dependencies.values()

    def bundles(self) -> list[Bundle]:
        """Return the application bundle followed by its dependencies."""
        return [self.bundle, *self.dependencies()]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, File):
            return NotImplemented
        return self.bundle == other.bundle and unordered_equal(
            self.dependencies(), other.dependencies()
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self.bundle} {pretty_string(self.dependencies())}"

    def __repr__(self) -> str:
        return f"File({self})"


class Files:
    """Candidate files for one product, in the order they were added."""

    def __init__(self, *files: File) -> None:
        self._elements: list[File] = list(files)

    def add(self, file: File) -> None:
        """Append a file."""
        self._elements.append(file)

    def get(self, version: Version | None, arch: Architecture) -> File:
        """Pick a file.

        Without a version the highest-version file is returned. With one, the
        first file of that version whose architecture is compatible, in order
        of preference, is returned.
        """
        wanted = f"{version if version is not None else 'latest'} {arch}"
        if not self._elements:
            raise NoFileError(f"no file with {wanted}: slice is empty")

        if version is None:
            latest = self._elements[0]
            for file in self._elements[1:]:
                if file.version.compare(latest.version) == 1:
                    latest = file
            return latest

        matching = [file for file in self._elements if file.version == version]
        if not matching:
            raise NoFileError(f"no file with {wanted}: no files with this version")

        for supported in arch.compatible_with():
            for file in matching:
                if file.arch == supported:
                    return file

        raise NoFileError(f"no file with {wanted}: no files with supported architecture")

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[File]:
        return iter(self._elements)

    def __str__(self) -> str:
        return pretty_string(self._elements)