from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .rules import Rule


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def pick_value(rule: Rule, rng: RandomSource) -> str:
    values = rule.values
    length = len(values)
    if length == 0:
        return ""
    # All weights are 1, no need to walk the cumulative totals.
    if rule.total_weight == length:
        return values[rng.randrange(length)].value
    pick = rng.randrange(rule.total_weight)
    for option in values:
        if pick < option.weight:
            return option.value
        pick -= option.weight
    return ""  # pragma: no cover - total_weight out of sync with values
