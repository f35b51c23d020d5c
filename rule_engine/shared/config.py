"""
Configuration management for the rule engine.
"""

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineConfig(BaseSettings):
    """Engine configuration, overridable through RULE_ENGINE_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="RULE_ENGINE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging
    log_level: str = Field(default="info", description="Minimum log level")
    json_logs: bool = Field(default=True, description="Render logs as JSON instead of console text")

    # Evaluator
    log_evaluations: bool = Field(default=True, description="Emit one log event per evaluated rule tree")
    enable_metrics: bool = Field(default=False, description="Record Prometheus metrics for evaluations")


def get_config(**overrides: Any) -> EngineConfig:
    """Get engine configuration, with explicit overrides taking precedence."""
    return EngineConfig(**overrides)
