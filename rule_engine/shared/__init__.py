"""
Shared utilities for the rule engine.

This package aggregates the ambient building blocks used around the
evaluator:

- config: Engine configuration via pydantic-settings
- logging: Structured logging with correlation ids
- metrics: Prometheus metrics for evaluations
- errors: Canonical error types and responses

Nothing in here is needed to evaluate a rule tree; ``rule_engine.engine.check``
stays pure. Do not import from the rule model modules into shared/.
"""
