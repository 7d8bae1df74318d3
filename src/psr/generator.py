"""Recursive expansion of rules into text.

A value may embed references such as ``[name]`` or ``[^name]``; each one is
replaced by a fresh expansion of the named rule, upper-casing the first
character when the ``^`` flag is given. ``[ ]``, ``[*]``, ``[[]``, ``[]]`` and
``[#]`` produce the bracketed character itself.

There is no cycle detection. A rule that refers back to itself recurses until
``recursion_limit`` is exceeded or, when no limit is set, until Python raises
:class:`RecursionError`.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Optional, Union

from .errors import NoRulesDefined, RecursionLimitExceeded
from .selector import RandomSource, pick_value

if TYPE_CHECKING:
    from .rules import RuleStore

LOG = logging.getLogger(__name__)

LITERAL_NAMES = frozenset({" ", "*", "[", "]", "#"})


@dataclass(frozen=True)
class Reference:
    name: str
    capitalize: bool = False


Token = Union[str, Reference]


def tokenize(value: str) -> Iterator[Token]:
    """Split a value into literal text and references, left to right."""
    position = 0
    literal_start = 0
    length = len(value)
    while position < length:
        if value[position] != "[":
            position += 1
            continue
        close = value.find("]", position + 1)
        if close == -1:
            break
        if literal_start < position:
            yield value[literal_start:position]
        name = value[position + 1 : close]
        capitalize = name.startswith("^")
        if capitalize:
            name = name[1:]
        yield Reference(name=name, capitalize=capitalize)
        position = close + 1
        literal_start = position
    if literal_start < length:
        yield value[literal_start:]


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


class Generator:
    def __init__(
        self,
        store: "RuleStore",
        rng: Optional[RandomSource] = None,
        recursion_limit: Optional[int] = None,
        seed: int | None = None,
    ) -> None:
        if recursion_limit is not None and recursion_limit < 1:
            raise ValueError("recursion_limit must be at least 1.")
        self._store = store
        self._random = rng if rng is not None else random.Random(seed)
        self._recursion_limit = recursion_limit

    def generate(self, name: Optional[str] = None) -> str:
        if name is None:
            name = self._store.starting_rule
            if name is None:
                raise NoRulesDefined()
        LOG.debug("generating from rule %r", name)
        return self._expand(name, 0)

    def _expand(self, name: str, depth: int) -> str:
        if name in LITERAL_NAMES:
            return name
        if self._recursion_limit is not None and depth >= self._recursion_limit:
            raise RecursionLimitExceeded(name, self._recursion_limit)
        rule = self._store.get(name)
        if rule is None:
            LOG.debug("rule %r is not defined, expanding to nothing", name)
            return ""
        value = pick_value(rule, self._random)
        parts: list[str] = []
        for token in tokenize(value):
            if isinstance(token, Reference):
                expanded = self._expand(token.name, depth + 1)
                if token.capitalize:
                    expanded = capitalize_first(expanded)
                parts.append(expanded)
            else:
                parts.append(token)
        return "".join(parts)


def generate(
    store: "RuleStore",
    name: Optional[str] = None,
    rng: Optional[RandomSource] = None,
    recursion_limit: Optional[int] = None,
) -> str:
    return Generator(store, rng=rng, recursion_limit=recursion_limit).generate(name)
