"""Locale tags: a language with an optional country."""

from __future__ import annotations

import re
from dataclasses import dataclass

_PATTERN = re.compile(
    r"(?P<lang>[a-z][a-z][a-z]?)(?:-(?:\d\d\d|[A-Z][a-z]+))?"
    r"(?:[_-](?P<country>[A-Z][A-Z]))?(?:_\w+|-(?:[a-z]+|\d+))?",
    re.ASCII,
)


@dataclass(frozen=True)
class Locale:
    """An ISO 639 language code and an optional ISO 3166-1 country code."""

    language: str
    country: str = ""

    def __str__(self) -> str:
        if not self.country:
            return self.language
        return f"{self.language}-{self.country}"


def parse_locale(value: str) -> Locale:
    """Parse an RFC 5646 style tag, keeping only language and country."""
    match = _PATTERN.fullmatch(value)
    if match is None:
        raise ValueError(f'"{value}" is not a valid locale')
    return Locale(language=match["lang"], country=match["country"] or "")