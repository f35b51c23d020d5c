"""
Plain-text rendering of rule and result trees for logs and assertions.
"""

from typing import List

from .models import RuleNode, RuleResult, IntEquals, IntRange, StringEquals, BooleanEquals, NumberOf

STATUS_LABELS = {
    "met": "[MET]",
    "not_met": "[NOT MET]",
}


def format_result(result: RuleResult, indent: str = "  ") -> str:
    """Render a result tree, one node per line, children indented."""
    lines: List[str] = []
    _format_result(result, 0, indent, lines)
    return "\n".join(lines)


def _format_result(result: RuleResult, depth: int, indent: str, lines: List[str]) -> None:
    lines.append(f"{indent * depth}{STATUS_LABELS[result.status.value]} {result.name}")
    for child in result.children:
        _format_result(child, depth + 1, indent, lines)


def describe_rule(rule: RuleNode) -> str:
    """One-line description of a single rule node."""
    if isinstance(rule, StringEquals):
        return f"{rule.name} ({rule.field} == {rule.expected!r})"
    if isinstance(rule, IntEquals):
        return f"{rule.name} ({rule.field} == {rule.expected})"
    if isinstance(rule, IntRange):
        return f"{rule.name} ({rule.min} <= {rule.field} <= {rule.max})"
    if isinstance(rule, BooleanEquals):
        return f"{rule.name} ({rule.field} is {str(rule.expected).lower()})"
    if isinstance(rule, NumberOf):
        return f"{rule.name} {len(rule.children)}"
    return rule.name


def format_rule(rule: RuleNode, indent: str = "  ") -> str:
    """Render a rule tree, one node per line, children indented."""
    lines: List[str] = []
    _format_rule(rule, 0, indent, lines)
    return "\n".join(lines)


def _format_rule(rule: RuleNode, depth: int, indent: str, lines: List[str]) -> None:
    lines.append(f"{indent * depth}{describe_rule(rule)}")
    for child in getattr(rule, "children", ()):
        _format_rule(child, depth + 1, indent, lines)
