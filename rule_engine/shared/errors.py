"""
Error handling for the rule engine.

Evaluation itself never raises for any fact set; these errors cover
programming mistakes made while building rule trees or configuring the
ambient stack.
"""

from typing import Dict, Any, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class RuleEngineException(Exception):
    """Base exception for the rule engine."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class RuleDefinitionError(RuleEngineException):
    """A rule constructor received arguments of the wrong type."""

    def __init__(self, message: str = "Invalid rule definition", details: Optional[Dict[str, Any]] = None):
        super().__init__("RULE_DEFINITION_ERROR", message, details)


class ConfigurationError(RuleEngineException):
    """Configuration-related errors."""

    def __init__(self, message: str = "Invalid configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)
