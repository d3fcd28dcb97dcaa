"""Pydantic models for configuration schema."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from argsplit.core.array import DEFAULT_CAPACITY, MAX_CAPACITY
from argsplit.core.diagnostics import ERROR_SYMBOL, INFO_SYMBOL


class GlobalConfig(BaseModel):
    """Global configuration options."""

    color: Literal["auto", "always", "never"] = Field(
        default="auto", description="When to style diagnostics"
    )
    styles: bool = Field(default=True, description="Allow styles at all")

    @field_validator("color", mode="before")
    @classmethod
    def normalize_color(cls, v: object) -> object:
        """Accept booleans and any letter case."""
        if isinstance(v, bool):
            return "always" if v else "never"
        if isinstance(v, str):
            return v.strip().lower()
        return v


class ArraySettings(BaseModel):
    """Storage settings for classified token arrays."""

    default_capacity: int = Field(default=DEFAULT_CAPACITY, ge=1)
    growth: Literal["double", "fixed"] = Field(
        default="double", description="'double' grows full arrays, 'fixed' fails"
    )
    max_capacity: int = Field(default=MAX_CAPACITY, ge=1)

    @model_validator(mode="after")
    def check_bounds(self) -> ArraySettings:
        if self.max_capacity < self.default_capacity:
            raise ValueError(
                f"max_capacity ({self.max_capacity}) is smaller than "
                f"default_capacity ({self.default_capacity})"
            )
        return self


class Symbols(BaseModel):
    """Symbols leading error and information messages."""

    error: str = Field(default=ERROR_SYMBOL, min_length=1)
    info: str = Field(default=INFO_SYMBOL, min_length=1)


class Config(BaseModel):
    """Top-level configuration."""

    config: GlobalConfig = Field(default_factory=GlobalConfig)
    arrays: ArraySettings = Field(default_factory=ArraySettings)
    symbols: Symbols = Field(default_factory=Symbols)
