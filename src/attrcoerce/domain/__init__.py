"""Domain layer — coercion strategies, capabilities, and the registry.

This layer depends only on stdlib, pydantic, and ``attrcoerce.config``
models and settings.
It logs through stdlib loggers and never configures logging itself.
"""
