"""Conversion between control characters and their backslash escapes."""

from __future__ import annotations

_UNESCAPES = {"n": "\n", "r": "\r", "t": "\t"}


def unescape(raw: str) -> str:
    """Trim spaces and tabs, then resolve backslash escapes.

    ``\\n``, ``\\r`` and ``\\t`` become control characters; any other escaped
    character is kept literally. A lone trailing backslash is dropped.
    """
    text = raw.strip(" \t")
    out: list[str] = []
    chars = iter(text)
    for char in chars:
        if char != "\\":
            out.append(char)
            continue
        escaped = next(chars, "")
        out.append(_UNESCAPES.get(escaped, escaped))
    return "".join(out)


def escape(text: str) -> str:
    # Backslashes first so later passes are not doubled.
    return (
        text.replace("\\", "\\\\")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
