"""Populate a :class:`RuleStore` from PSR text.

Lines starting with ``*`` open a rule; every other line is a value for the
most recently opened rule, optionally prefixed by ``<weight>:``.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from .escapes import unescape
from .lines import logical_lines

if TYPE_CHECKING:
    from .rules import RuleStore

LOG = logging.getLogger(__name__)

_WEIGHTED = re.compile(r"([0-9]+):(.*)", re.DOTALL)


def parse_value(line: str) -> tuple[str, int]:
    """Unescape a value line and split off its weight prefix."""
    value = unescape(line)
    weight = 1
    match = _WEIGHTED.match(value)
    if match:
        weight = int(match.group(1))
        value = match.group(2)
    return value, weight


def parse(store: "RuleStore", text: str) -> "RuleStore":
    rule_name = ""
    added = 0
    for line in logical_lines(text):
        if line.startswith("*"):
            rule_name = unescape(line[1:])
            continue
        value, weight = parse_value(line)
        if value:
            store.add_value(rule_name, value, weight)
            added += 1
    LOG.debug("parsed %d values, store now holds %d rules", added, len(store))
    return store
