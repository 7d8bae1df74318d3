from __future__ import annotations

from typing import TYPE_CHECKING

from .escapes import escape

if TYPE_CHECKING:
    from .rules import RuleStore


def escape_rule_name(name: str) -> str:
    # A leading space would be trimmed away when the header is parsed again.
    escaped = escape(name)
    if escaped.startswith(" "):
        escaped = "\\" + escaped
    return escaped


def dump(store: "RuleStore") -> str:
    """Render the store as PSR text, rules in creation order."""
    lines: list[str] = []
    for rule in store:
        lines.append(f"* {escape_rule_name(rule.name)}")
        for option in rule.values:
            lines.append(f"{option.weight}:{escape(option.value)}")
    return "\n".join(lines)
