"""Weighted random phrase generation from phrase structure rule (PSR) files."""

from typing import Optional

from .errors import ConfigError, NoRulesDefined, PsrError, RecursionLimitExceeded
from .escapes import escape, unescape
from .generator import Generator, generate
from .parser import parse
from .rules import Rule, RuleStore, WeightedValue
from .serializer import dump


def new_store(text: Optional[str] = None) -> RuleStore:
    return RuleStore(text)


__all__ = [
    "ConfigError",
    "Generator",
    "NoRulesDefined",
    "PsrError",
    "RecursionLimitExceeded",
    "Rule",
    "RuleStore",
    "WeightedValue",
    "dump",
    "escape",
    "generate",
    "new_store",
    "parse",
    "unescape",
]
