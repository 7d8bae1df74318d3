from __future__ import annotations

import re
from typing import Iterator

_CONTINUATION = re.compile(r"(?:^|[^\\])(?:\\\\)*\\$")


def split_lines(text: str) -> list[str]:
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def is_continued(line: str) -> bool:
    """True when the line ends in an odd number of backslashes."""
    return _CONTINUATION.search(line) is not None


def logical_lines(text: str) -> Iterator[str]:
    """Yield comment-free raw lines with backslash continuations joined."""
    pending = iter(split_lines(text))
    for line in pending:
        if line.startswith("#"):
            continue
        while is_continued(line):
            following = next(pending, None)
            line = line[:-1]
            if following is None:
                break
            line += following
        yield line
