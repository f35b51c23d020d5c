"""
Constructor functions for rule trees.

Build trees bottom-up with these rather than instantiating the node classes
directly. Field names are opaque here; a field that is missing from a fact
set only shows up as ``Status.NOT_MET`` at evaluation time.
"""

from typing import Iterable, Tuple

from .models import RuleNode, And, Or, NumberOf, StringEquals, IntEquals, IntRange, BooleanEquals
from .shared.errors import RuleDefinitionError


def _children(rules: Iterable[RuleNode]) -> Tuple[RuleNode, ...]:
    children = tuple(rules)
    for index, child in enumerate(children):
        if not isinstance(child, RuleNode):
            raise RuleDefinitionError(
                "Rule children must be rule nodes",
                details={"index": index, "type": type(child).__name__}
            )
    return children


def _text(param: str, value: object) -> str:
    if not isinstance(value, str):
        raise RuleDefinitionError(
            f"{param} must be a string",
            details={"param": param, "type": type(value).__name__}
        )
    return value


def _integer(param: str, value: object) -> int:
    # bool is an int subclass but never a meaningful bound
    if isinstance(value, bool) or not isinstance(value, int):
        raise RuleDefinitionError(
            f"{param} must be an integer",
            details={"param": param, "type": type(value).__name__}
        )
    return value


def and_(rules: Iterable[RuleNode]) -> And:
    """Creates a rule where all child rules must be met.

    * Any child ``NOT_MET`` makes the result ``NOT_MET``
    * No children at all is ``MET``
    """
    return And(children=_children(rules))


def or_(rules: Iterable[RuleNode]) -> Or:
    """Creates a rule where any child rule must be met.

    * Any child ``MET`` makes the result ``MET``
    * No children at all is ``NOT_MET``
    """
    return Or(children=_children(rules))


def n_of(n: int, rules: Iterable[RuleNode]) -> NumberOf:
    """Creates a rule where at least ``n`` child rules must be met."""
    n = _integer("n", n)
    if n < 0:
        raise RuleDefinitionError("n must not be negative", details={"n": n})
    return NumberOf(n=n, children=_children(rules))


def string_equals(name: str, field: str, expected: str) -> StringEquals:
    """Creates a rule for exact, case-sensitive string comparison."""
    return StringEquals(
        name=_text("name", name),
        field=_text("field", field),
        expected=_text("expected", expected)
    )


def int_equals(name: str, field: str, expected: int) -> IntEquals:
    """Creates a rule for int comparison.

    If the checked value is not a base-10 integer the result is ``NOT_MET``.
    """
    return IntEquals(
        name=_text("name", name),
        field=_text("field", field),
        expected=_integer("expected", expected)
    )


def int_range(name: str, field: str, min: int, max: int) -> IntRange:
    """Creates a rule for int range comparison over the interval ``[min, max]``.

    If the checked value is not a base-10 integer the result is ``NOT_MET``.
    A range with ``min > max`` is accepted and can never be met.
    """
    return IntRange(
        name=_text("name", name),
        field=_text("field", field),
        min=_integer("min", min),
        max=_integer("max", max)
    )


def boolean(name: str, field: str, expected: bool) -> BooleanEquals:
    """Creates a rule for boolean comparison.

    Only ``"true"`` (case-insensitive) reads as true; every other value,
    including ``"1"`` and ``"yes"``, reads as false.
    """
    if not isinstance(expected, bool):
        raise RuleDefinitionError(
            "expected must be a bool",
            details={"param": "expected", "type": type(expected).__name__}
        )
    return BooleanEquals(name=_text("name", name), field=_text("field", field), expected=expected)
