"""Coercion strategy registry keyed by primitive type.

Lookup walks the target's MRO, so a class with no strategy of its own
resolves to the nearest registered ancestor and, ultimately, to the
``object`` strategy.
"""

from __future__ import annotations

import logging
from typing import Any

from attrcoerce.config.models import CoercionConfig
from attrcoerce.config.settings import CoerceSettings
from attrcoerce.domain.coercion import Coercion
from attrcoerce.domain.object import ObjectCoercion

logger = logging.getLogger(__name__)

# Populated by configure_builtins() at module load time.
COERCION_REGISTRY: dict[type, Coercion] = {}


def register_coercion(coercion: Coercion) -> None:
    """Register *coercion* under its primitive type.

    Raises:
        TypeError: If *coercion* is not a :class:`Coercion` instance.
        ValueError: If another strategy already owns the primitive.
    """
    if not isinstance(coercion, Coercion):
        msg = f"Expected a Coercion instance, got {type(coercion).__name__}"
        raise TypeError(msg)

    primitive = coercion.primitive
    existing = COERCION_REGISTRY.get(primitive)
    if existing is not None and existing is not coercion:
        msg = f"A coercion for {primitive.__name__!r} is already registered"
        raise ValueError(msg)

    COERCION_REGISTRY[primitive] = coercion
    logger.debug("Registered coercion: %s -> %s", primitive.__name__, type(coercion).__name__)


def coercion_for(target: type) -> Coercion:
    """Return the strategy for *target*, falling back along its MRO."""
    for klass in target.__mro__:
        coercion = COERCION_REGISTRY.get(klass)
        if coercion is not None:
            return coercion
    return COERCION_REGISTRY[object]


def coerce(target: type, operation: str, value: Any) -> Any:
    """Coerce a *target*-typed *value* with *operation* (e.g. ``"to_list"``)."""
    return coercion_for(target).invoke(operation, value)


def configure_builtins(config: CoercionConfig | None = None) -> None:
    """(Re)build the built-in strategies from *config*.

    When *config* is omitted, the ``coercion`` section of
    :class:`CoerceSettings` is loaded, so ``ATTRCOERCE_COERCION__*`` env
    vars apply. Built-ins are replaced in place; plugin registrations
    for other primitives are untouched.
    """
    resolved = config if config is not None else CoerceSettings.load().coercion
    COERCION_REGISTRY[object] = ObjectCoercion(resolved)
    logger.debug("Configured built-in coercions: prefix=%r", resolved.method_prefix)


configure_builtins()
