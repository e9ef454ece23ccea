"""Conversion capabilities a value can expose to the coercers.

A value opts into sequence or mapping coercion by implementing
``to_list()`` or ``to_dict()``. The method is looked up on the value's
type, the way Python finds dunder protocols, so a class object never
counts as providing the conversion its instances provide.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any, Protocol, TypeGuard

# Iterable, but coerced as a single scalar value.
TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray)


class SupportsToList(Protocol):
    """Value with a native conversion to an ordered sequence."""

    def to_list(self) -> list[Any]: ...


class SupportsToDict(Protocol):
    """Value with a native conversion to a key/value mapping."""

    def to_dict(self) -> Mapping[Any, Any]: ...


def _provides(value: object, method_name: str) -> bool:
    """True if ``type(value)`` defines *method_name* callable without arguments."""
    if isinstance(value, type):
        return False
    if not callable(getattr(type(value), method_name, None)):
        return False
    try:
        inspect.signature(getattr(value, method_name)).bind()
    except TypeError:
        return False
    except ValueError:
        # No introspectable signature (some C methods); trust the type.
        return True
    return True


def supports_to_list(value: object) -> TypeGuard[SupportsToList]:
    return _provides(value, "to_list")


def supports_to_dict(value: object) -> TypeGuard[SupportsToDict]:
    return _provides(value, "to_dict")


def is_sequence_like(value: object) -> bool:
    """True for values ``iter()`` accepts, text excluded.

    Covers objects iterable only through ``__getitem__``, which
    ``collections.abc.Iterable`` does not recognize.
    """
    if value is None or isinstance(value, TEXT_TYPES):
        return False
    try:
        iter(value)  # type: ignore[call-overload]
    except TypeError:
        return False
    return True
