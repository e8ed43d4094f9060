"""Path joining normalised to Windows separators."""

from __future__ import annotations


def _clean(path: str) -> str:
    """Lexically simplify a slash-separated path."""
    rooted = path.startswith("/")
    parts: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not rooted:
                parts.append("..")
            continue
        parts.append(segment)

    body = "/".join(parts)
    if rooted:
        return "/" + body
    return body or "."


def join(*args: str) -> str:
    """Join path parts with '/', clean the result and convert it to Windows separators."""
    parts = [part for part in args if part]
    if not parts:
        return ""
    return _clean("/".join(parts)).replace("/", "\\")