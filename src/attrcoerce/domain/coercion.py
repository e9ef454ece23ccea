"""Coercion strategy ABC.

A strategy is registered per primitive type. The attribute layer never
calls strategy methods directly; it asks for an operation by name
(``to_list``, ``to_dict``, ``to_<target>``) through :meth:`Coercion.invoke`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from attrcoerce.config.models import CoercionConfig
from attrcoerce.domain.errors import UnsupportedOperationError


class Coercion(ABC):
    """Abstract base class for per-type coercion strategies.

    Subclasses list the targets they specialize in :attr:`targets` and
    implement each one as a ``to_<target>`` method. Prefixed operations
    for any other target go to :meth:`fallback`.
    """

    targets: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, config: CoercionConfig | None = None) -> None:
        self._config = config or CoercionConfig()

    @property
    @abstractmethod
    def primitive(self) -> type:
        """Type whose values this strategy coerces (e.g. ``object``)."""
        ...

    @property
    def config(self) -> CoercionConfig:
        return self._config

    def target_of(self, operation: str) -> str | None:
        """Strip the coercion prefix from *operation*, or None if absent."""
        prefix = self._config.method_prefix
        if not operation.startswith(prefix):
            return None
        return operation[len(prefix) :]

    def supports(self, operation: str) -> bool:
        """Whether *operation* has a dedicated implementation."""
        return self.target_of(operation) in self.targets

    def invoke(self, operation: str, *args: Any) -> Any:
        """Run coercion *operation* on a single value.

        Raises:
            UnsupportedOperationError: If *operation* lacks the prefix or
                the call does not carry exactly one argument.
        """
        target = self.target_of(operation)
        if target is None or len(args) != 1:
            raise UnsupportedOperationError(operation, len(args))
        (value,) = args
        if target in self.targets:
            return getattr(self, f"to_{target}")(value)
        return self.fallback(operation, value)

    def fallback(self, operation: str, value: Any) -> Any:
        """Handle a prefixed operation with no dedicated method."""
        raise UnsupportedOperationError(operation, 1)
