"""
Rule and result data models.

A rule tree is built from the frozen dataclasses below, bottom-up, so every
parent exclusively owns a tuple of already-built children. Evaluating a rule
tree produces a ``RuleResult`` tree of exactly the same shape.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Iterator, List, Mapping, Tuple
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field


class Status(str, Enum):
    """Outcome of evaluating a rule node."""
    MET = "met"
    NOT_MET = "not_met"


class RuleNode(ABC):
    """Base class for every node of a rule tree."""

    name: str

    def check(self, facts: Mapping[str, str]) -> "RuleResult":
        """Evaluate this node, and every node below it, against ``facts``."""
        from .engine import check

        return check(self, facts)

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Export the node as plain data (export only, there is no loader)."""


# Combinators

@dataclass(frozen=True)
class And(RuleNode):
    """Met when every child is met. No children is vacuously met."""
    children: Tuple[RuleNode, ...] = ()

    @property
    def name(self) -> str:
        return "And"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "and", "children": [c.to_dict() for c in self.children]}


@dataclass(frozen=True)
class Or(RuleNode):
    """Met when at least one child is met. No children is never met."""
    children: Tuple[RuleNode, ...] = ()

    @property
    def name(self) -> str:
        return "Or"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "or", "children": [c.to_dict() for c in self.children]}


@dataclass(frozen=True)
class NumberOf(RuleNode):
    """Met when at least ``n`` children are met."""
    n: int
    children: Tuple[RuleNode, ...] = ()

    @property
    def name(self) -> str:
        return f"At least {self.n} of"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "n_of", "n": self.n, "children": [c.to_dict() for c in self.children]}


# Leaf predicates

@dataclass(frozen=True)
class StringEquals(RuleNode):
    """Field value equals ``expected`` exactly (case-sensitive)."""
    name: str
    field: str
    expected: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "string_equals", "name": self.name, "field": self.field, "expected": self.expected}


@dataclass(frozen=True)
class IntEquals(RuleNode):
    """Field value parses as an integer equal to ``expected``."""
    name: str
    field: str
    expected: int

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "int_equals", "name": self.name, "field": self.field, "expected": self.expected}


@dataclass(frozen=True)
class IntRange(RuleNode):
    """Field value parses as an integer within ``[min, max]``."""
    name: str
    field: str
    min: int
    max: int

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "int_range", "name": self.name, "field": self.field, "min": self.min, "max": self.max}


@dataclass(frozen=True)
class BooleanEquals(RuleNode):
    """Field value, read as a boolean, equals ``expected``."""
    name: str
    field: str
    expected: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "boolean", "name": self.name, "field": self.field, "expected": self.expected}


COMBINATORS = (And, Or, NumberOf)


@dataclass(frozen=True)
class RuleResult:
    """Result of checking a rule tree.

    Mirrors the rule tree node for node: leaves have no children and
    combinators have one child result per child rule, in the same order.
    """
    name: str
    status: Status
    children: Tuple["RuleResult", ...] = ()

    @property
    def met(self) -> bool:
        """Whether this node's status is ``Status.MET``."""
        return self.status == Status.MET

    def iter_nodes(self) -> Iterator["RuleResult"]:
        """Walk this result and its descendants depth-first, parents first."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status.value,
            "children": [c.to_dict() for c in self.children],
        }

    def to_response(self) -> "RuleResultResponse":
        """Convert to the pydantic response model."""
        return RuleResultResponse.model_validate(self.to_dict())


class RuleResultResponse(BaseModel):
    """Serializable view of a result tree."""
    name: str = Field(..., description="Display name of the rule node")
    status: Status = Field(..., description="Whether the rule node was met")
    children: List["RuleResultResponse"] = Field(default_factory=list, description="Results of any sub-rules")


RuleResultResponse.model_rebuild()
