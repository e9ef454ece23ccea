"""Pydantic configuration models with code-baked defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CoercionConfig(BaseModel):
    """Settings shared by every coercion strategy."""

    model_config = {"frozen": True}

    method_prefix: str = Field(default="to_", min_length=1)
    log_passthrough: bool = True
