"""Shared pytest fixtures for attrcoerce tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from attrcoerce.domain.object import ObjectCoercion
from attrcoerce.domain.registry import COERCION_REGISTRY


@pytest.fixture
def object_coercion() -> ObjectCoercion:
    """A default-configured object coercer."""
    return ObjectCoercion()


@pytest.fixture
def isolated_registry() -> Generator[dict[type, object]]:
    """Snapshot the coercion registry and restore it after the test."""
    snapshot = dict(COERCION_REGISTRY)
    try:
        yield COERCION_REGISTRY
    finally:
        COERCION_REGISTRY.clear()
        COERCION_REGISTRY.update(snapshot)
