from __future__ import annotations


class PsrError(RuntimeError):
    pass


class NoRulesDefined(PsrError):
    def __init__(self) -> None:
        super().__init__("No rules are defined")


class RecursionLimitExceeded(PsrError):
    def __init__(self, rule: str, limit: int) -> None:
        super().__init__(f"Expansion of rule '{rule}' exceeded the recursion limit of {limit}.")
        self.rule = rule
        self.limit = limit


class ConfigError(ValueError):
    pass
