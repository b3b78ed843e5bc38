"""Pydantic models for DataFlow tools configuration."""

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class DataFlowSettings(BaseModel):
    """User settings read from ``~/.dataflow/config.yaml``."""

    default_namespace: str | None = None  # Used by `generate` when --namespace is absent
    log_level: str = "WARNING"
    log_format: str = Field(default="%(asctime)s [%(name)s] %(levelname)s: %(message)s")

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
        return level
