"""attrcoerce — fallback coercion strategy for "any object" attributes."""

from attrcoerce.domain.errors import UnsupportedOperationError
from attrcoerce.domain.object import ObjectCoercion
from attrcoerce.domain.registry import (
    coerce,
    coercion_for,
    configure_builtins,
    register_coercion,
)

__version__ = "0.1.0"

__all__ = [
    "ObjectCoercion",
    "UnsupportedOperationError",
    "__version__",
    "coerce",
    "coercion_for",
    "configure_builtins",
    "register_coercion",
]
