"""Error raised for malformed coercion invocations."""

from __future__ import annotations


class UnsupportedOperationError(AttributeError):
    """No coercion operation matches *operation* called with *arg_count* args.

    Subclasses :class:`AttributeError` so callers that probe for a missing
    operation see the same failure as a missing method.
    """

    def __init__(self, operation: str, arg_count: int) -> None:
        self.operation = operation
        self.arg_count = arg_count
        msg = f"Unsupported coercion operation {operation!r} with {arg_count} argument(s)"
        super().__init__(msg)
