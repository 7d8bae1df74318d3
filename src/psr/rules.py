from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from . import generator, parser, serializer
from .selector import RandomSource


@dataclass(frozen=True)
class WeightedValue:
    value: str
    weight: int = 1


@dataclass
class Rule:
    name: str
    values: List[WeightedValue] = field(default_factory=list)
    total_weight: int = 0

    def add(self, value: str, weight: int = 1) -> WeightedValue:
        weight = int(weight)
        if weight <= 0:
            weight = 1
        option = WeightedValue(value=value, weight=weight)
        self.values.append(option)
        self.total_weight += option.weight
        return option


class RuleStore:
    """Named rules with weighted values, plus the rule generated by default.

    The starting rule is the first rule ever created in the store and never
    changes afterwards.
    """

    def __init__(self, text: Optional[str] = None) -> None:
        self.rules: Dict[str, Rule] = {}
        self.starting_rule: Optional[str] = None
        if text is not None:
            self.parse(text)

    def __contains__(self, name: object) -> bool:
        return name in self.rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules.values())

    def __len__(self) -> int:
        return len(self.rules)

    def __str__(self) -> str:
        return self.dump()

    def get(self, name: str) -> Optional[Rule]:
        return self.rules.get(name)

    def ensure(self, name: str) -> Rule:
        rule = self.rules.get(name)
        if rule is None:
            rule = Rule(name=name)
            self.rules[name] = rule
            if self.starting_rule is None:
                self.starting_rule = name
        return rule

    def add_value(self, name: str, value: str, weight: int = 1) -> WeightedValue:
        return self.ensure(name).add(value, weight)

    def parse(self, text: str) -> None:
        parser.parse(self, text)

    def generate(
        self,
        name: Optional[str] = None,
        rng: Optional[RandomSource] = None,
        recursion_limit: Optional[int] = None,
    ) -> str:
        return generator.generate(self, name, rng=rng, recursion_limit=recursion_limit)

    def dump(self) -> str:
        return serializer.dump(self)
