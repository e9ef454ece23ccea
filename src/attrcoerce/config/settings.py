"""Unified settings — keyword overrides, env vars, and code defaults.

Priority chain (highest to lowest):
  1. Init kwargs  — overrides passed to :meth:`CoerceSettings.load`
  2. Env vars     — ``ATTRCOERCE_*`` prefix, ``__`` for nested fields
  3. Code defaults — baked into the section models
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings

from attrcoerce.config.models import CoercionConfig


class CoerceSettings(BaseSettings):
    """Unified settings for attrcoerce.

    Attributes:
        verbose: Emit DEBUG-level logs from the ``attrcoerce`` logger.
        log_json: Render logs as JSON lines instead of console output.
        coercion: Options shared by all coercion strategies.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ATTRCOERCE_",
        "env_nested_delimiter": "__",
    }

    verbose: bool = False
    log_json: bool = False

    coercion: CoercionConfig = Field(default_factory=CoercionConfig)

    @classmethod
    def load(cls, **overrides: Any) -> CoerceSettings:
        """Construct settings, applying *overrides* above env vars."""
        return cls(**overrides)
