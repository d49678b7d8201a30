"""Configuration models for the taskrecur CLI."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

OutputFormat = Literal["pretty", "table", "json", "yaml", "quiet"]


class GenerationConfig(BaseModel):
    """Defaults applied when previewing occurrences."""

    default_max_instances: int = Field(default=10, ge=0)
    max_instances_limit: int = Field(default=500, ge=1)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: OutputFormat = Field(default="pretty")
    date_format: str = Field(default="%Y-%m-%d")
    color: bool = Field(default=True)

    @field_validator("date_format")
    @classmethod
    def validate_date_format(cls, v: str) -> str:
        if not v or "%" not in v:
            raise ValueError("date_format must be a strftime pattern such as %Y-%m-%d")
        return v


class AppConfig(BaseModel):
    """Main taskrecur configuration."""

    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
