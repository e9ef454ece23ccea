"""Coercion strategy for the unconstrained ``object`` type.

This is the catch-all strategy: it builds lists and dicts from values
that can provide them, and passes any other ``to_<target>`` request
through unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel

from attrcoerce.domain.capabilities import is_sequence_like, supports_to_dict, supports_to_list
from attrcoerce.domain.coercion import Coercion

logger = logging.getLogger(__name__)


class ObjectCoercion(Coercion):
    """Coerce arbitrary values.

    ``to_list`` and ``to_dict`` never raise; every other prefixed
    operation returns its argument as-is.
    """

    targets: ClassVar[frozenset[str]] = frozenset({"list", "dict"})

    @property
    def primitive(self) -> type:
        return object

    def to_list(self, value: Any) -> list[Any]:
        """Create a list from any value.

        >>> ObjectCoercion().to_list(5)
        [5]
        >>> ObjectCoercion().to_list(None)
        []
        >>> ObjectCoercion().to_list({"a": 1})
        [('a', 1)]
        """
        if isinstance(value, list):
            return value
        if supports_to_list(value):
            return value.to_list()
        if value is None:
            return []
        if isinstance(value, Mapping):
            return list(value.items())
        if is_sequence_like(value):
            return list(value)
        # "" and 0 are wrapped like any other scalar; only None is empty.
        return [value]

    def to_dict(self, value: Any) -> Any:
        """Create a dict from *value* if it can provide one.

        Values with no mapping view are returned unchanged.

        >>> ObjectCoercion().to_dict(5)
        5
        """
        if isinstance(value, dict):
            return value
        if supports_to_dict(value):
            return value.to_dict()
        if isinstance(value, Mapping):
            return dict(value)
        if isinstance(value, BaseModel):
            return value.model_dump()
        return value

    def fallback(self, operation: str, value: Any) -> Any:
        if self.config.log_passthrough:
            logger.debug("Passthrough %s for %s value", operation, type(value).__name__)
        return value
