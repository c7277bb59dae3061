"""
Pydantic Models

Settings for a pipeline run and the report it produces.
"""

import logging
import os
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "PIPELINE_"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class PipelineOutcome(str, Enum):
    """Pipeline outcome enumeration"""
    FOUND = "found"
    EMPTY = "empty"


class PipelineSettings(BaseModel):
    """Settings for one run of the grow-up pipeline"""
    model_config = ConfigDict(frozen=True)

    increment: int = Field(
        2,
        description="Years added to every person's age"
    )
    adult_age: int = Field(
        18,
        ge=0,
        description="Minimum age counted as adult"
    )
    key_field: str = Field(
        "age",
        description="Field the youngest adult is chosen by"
    )
    log_level: str = Field(
        "INFO",
        description="Level applied to the record_pipeline logger"
    )

    @field_validator('key_field')
    @classmethod
    def validate_key_field(cls, v):
        """Validate key field is not empty"""
        if not v or not v.strip():
            raise ValueError("Key field cannot be empty")
        return v.strip()

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is a standard logging level"""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PipelineSettings":
        """Build settings from PIPELINE_* environment variables; unset ones keep defaults."""
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name.upper()
            if key in environ:
                values[name] = environ[key]
        return cls(**values)


class PipelineReport(BaseModel):
    """Result of a pipeline run"""
    outcome: PipelineOutcome = Field(
        ...,
        description="Whether an adult was found"
    )
    result: Optional[Dict[str, Any]] = Field(
        None,
        description="Fields of the chosen record, without method tables"
    )
    display: Optional[str] = Field(
        None,
        description="Printable form of the chosen record"
    )
    error: Optional[str] = Field(
        None,
        description="Error message when no record was chosen"
    )
    settings: PipelineSettings
