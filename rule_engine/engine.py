"""
Rule tree evaluation.

``check`` is the pure recursive evaluator. ``RuleEvaluator`` wraps it with
the ambient logging and metrics without changing its results.
"""

import time
from typing import Mapping, Optional

from .constraints import check_string_equals, check_int_equals, check_int_range, check_boolean
from .models import (
    COMBINATORS, RuleNode, RuleResult, Status,
    And, Or, StringEquals, IntEquals, IntRange, BooleanEquals
)
from .shared.config import EngineConfig
from .shared.logging import get_logger
from .shared.metrics import EvaluationMetrics, get_metrics


def check(rule: RuleNode, facts: Mapping[str, str]) -> RuleResult:
    """Recursively check ``rule`` (depth-first) against ``facts``.

    Combinators evaluate every child, even once the outcome is settled, so
    the returned tree always carries the full diagnostic picture.
    """
    if isinstance(rule, COMBINATORS):
        children = tuple(check(child, facts) for child in rule.children)
        met_count = sum(1 for c in children if c.status == Status.MET)

        if isinstance(rule, And):
            met = met_count == len(children)
        elif isinstance(rule, Or):
            met = met_count > 0
        else:
            met = met_count >= rule.n

        return RuleResult(
            name=rule.name,
            status=Status.MET if met else Status.NOT_MET,
            children=children
        )

    if isinstance(rule, StringEquals):
        status = check_string_equals(rule, facts)
    elif isinstance(rule, IntEquals):
        status = check_int_equals(rule, facts)
    elif isinstance(rule, IntRange):
        status = check_int_range(rule, facts)
    elif isinstance(rule, BooleanEquals):
        status = check_boolean(rule, facts)
    else:
        raise TypeError(f"Unsupported rule node: {type(rule).__name__}")

    return RuleResult(name=rule.name, status=status)


def count_nodes(rule: RuleNode) -> int:
    """Total number of nodes in a rule tree."""
    return 1 + sum(count_nodes(child) for child in getattr(rule, "children", ()))


class RuleEvaluator:
    """Evaluates rule trees with logging and metrics around ``check``."""

    def __init__(self, config: Optional[EngineConfig] = None, metrics: Optional[EvaluationMetrics] = None):
        self.config = config or EngineConfig()
        self.logger = get_logger("rule_engine.evaluator")
        self.metrics = metrics
        if self.metrics is None and self.config.enable_metrics:
            self.metrics = get_metrics()

    def evaluate(self, rule: RuleNode, facts: Mapping[str, str]) -> RuleResult:
        """Evaluate a rule tree against a fact set."""
        start_time = time.time()

        try:
            result = check(rule, facts)
        except TypeError as e:
            # check is total over fact sets; only a non-rule node raises, as TypeError
            self.logger.error("Rule evaluation error", rule_type=type(rule).__name__, error=str(e))
            raise

        duration = time.time() - start_time
        node_count = count_nodes(rule)

        if self.metrics is not None:
            self.metrics.record_evaluation(result.status.value, duration, node_count)

        if self.config.log_evaluations:
            self.logger.info(
                "Rule tree evaluated",
                rule=result.name,
                status=result.status.value,
                node_count=node_count,
                met_nodes=sum(1 for r in result.iter_nodes() if r.met),
                evaluation_time_ms=duration * 1000
            )

        return result
