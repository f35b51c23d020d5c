"""
Declarative rule trees over string facts.

Build a tree of named rules with the constructor functions, then check it
against a mapping of field name to string value::

    from rule_engine import and_, or_, string_equals, int_equals, int_range

    rule = and_([
        string_equals("Name is John Doe", "name", "John Doe"),
        or_([
            int_equals("Favorite number is 10", "fav_number", 10),
            int_range("Fav number between 11 and 16", "fav_number", 11, 16),
        ]),
    ])
    result = rule.check({"name": "John Doe", "fav_number": "11"})

The result tree mirrors the rule tree and reports a ``Status`` for every
node, so callers see which sub-rules matched, not just the verdict.

Modules of interest:
- models: Rule node variants, Status and the result tree.
- builders: Constructor functions with argument type checks.
- constraints: Leaf predicate checks and fact value parsing.
- engine: The recursive evaluator and the logging/metrics wrapper.
- render: Text rendering of rule and result trees.
"""

from .builders import and_, or_, n_of, string_equals, int_equals, int_range, boolean
from .engine import check, count_nodes, RuleEvaluator
from .models import (
    Status, RuleNode, RuleResult, RuleResultResponse,
    And, Or, NumberOf, StringEquals, IntEquals, IntRange, BooleanEquals
)
from .render import format_result, format_rule
from .shared.config import EngineConfig, get_config
from .shared.errors import RuleEngineException, RuleDefinitionError
from .shared.logging import configure_logging, configure_logging_from_config

__all__ = [
    "and_",
    "or_",
    "n_of",
    "string_equals",
    "int_equals",
    "int_range",
    "boolean",
    "check",
    "count_nodes",
    "RuleEvaluator",
    "Status",
    "RuleNode",
    "RuleResult",
    "RuleResultResponse",
    "And",
    "Or",
    "NumberOf",
    "StringEquals",
    "IntEquals",
    "IntRange",
    "BooleanEquals",
    "format_result",
    "format_rule",
    "RuleEngineException",
    "RuleDefinitionError",
    "EngineConfig",
    "get_config",
    "configure_logging",
    "configure_logging_from_config",
]
