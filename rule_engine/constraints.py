"""
Leaf predicate evaluation.

Every function here is total: an absent field or a value that does not
parse fails closed to ``Status.NOT_MET`` rather than raising.
"""

import re
from typing import Mapping, Optional

from .models import Status, StringEquals, IntEquals, IntRange, BooleanEquals

# Optional sign followed by ASCII digits; no whitespace or underscores
_INT_RE = re.compile(r"[+-]?[0-9]+")

# Matches the CPython default int_max_str_digits so every interpreter agrees
MAX_INT_DIGITS = 4300


def parse_int(value: object) -> Optional[int]:
    """Parse a fact value as a base-10 integer, or return None."""
    if not isinstance(value, str) or not _INT_RE.fullmatch(value):
        return None
    if len(value.lstrip("+-")) > MAX_INT_DIGITS:
        return None
    try:
        return int(value)
    except ValueError:
        # Digit strings beyond the interpreter's int conversion limit
        return None


def parse_bool(value: object) -> bool:
    """Only ``"true"`` (any case) reads as true; everything else is false."""
    return isinstance(value, str) and value.lower() == "true"


def _status(matched: bool) -> Status:
    return Status.MET if matched else Status.NOT_MET


def check_string_equals(rule: StringEquals, facts: Mapping[str, str]) -> Status:
    """Check a string equality leaf."""
    value = facts.get(rule.field)
    if value is None:
        return Status.NOT_MET
    return _status(value == rule.expected)


def check_int_equals(rule: IntEquals, facts: Mapping[str, str]) -> Status:
    """Check an integer equality leaf."""
    value = parse_int(facts.get(rule.field))
    if value is None:
        return Status.NOT_MET
    return _status(value == rule.expected)


def check_int_range(rule: IntRange, facts: Mapping[str, str]) -> Status:
    """Check an inclusive integer range leaf."""
    value = parse_int(facts.get(rule.field))
    if value is None:
        return Status.NOT_MET
    return _status(rule.min <= value <= rule.max)


def check_boolean(rule: BooleanEquals, facts: Mapping[str, str]) -> Status:
    """Check a boolean leaf."""
    value = facts.get(rule.field)
    if value is None:
        return Status.NOT_MET
    return _status(parse_bool(value) == rule.expected)
