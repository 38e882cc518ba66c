"""
Error hierarchy for tram-value.

Every failure of construction, validation or decomposition is raised
as a subclass of ValueObjectError. Errors carry the data that explains
them; nothing here is caught and retried inside the library.

Errors:
    NotBuildable       - a wrapped target supports neither construction style
    ValidationFailed   - a built value reported one or more violations
    ShapeMismatch      - a value has no acceptable plain/mapping shape
    UnknownAttributes  - a strict Struct received undeclared keys
"""

from __future__ import annotations

from typing import Any, Iterable, Optional


class ValueObjectError(Exception):
    """Base class for all tram-value errors."""
    pass


class NotBuildable(ValueObjectError):
    """
    Raised when a constructor chain reaches a target that can be
    neither instantiated nor invoked with a single argument.

    Raised on the first build attempt, never at composition time.
    """

    def __init__(self, target: Any, source: Any):
        self.target = target
        self.source = source
        super().__init__(
            f"{target!r} can be neither instantiated nor called "
            f"to build a value from {source!r}"
        )


class ValidationFailed(ValueObjectError):
    """Raised when a built value reports violations."""

    def __init__(self, errors: Iterable[Any], subject: Optional[Any] = None):
        self.errors = tuple(errors)
        self.subject = subject
        details = ", ".join(str(error) for error in self.errors)
        super().__init__(f"Validation failed: {details}")


class ShapeMismatch(ValueObjectError):
    """Raised when a value cannot be given the shape an operation needs."""

    def __init__(self, value: Any, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: {value!r}")


class UnknownAttributes(ValueObjectError):
    """Raised by a Struct with strict_keys when input has undeclared keys."""

    def __init__(self, struct: type, keys: Iterable[str]):
        self.struct = struct
        self.keys = tuple(keys)
        super().__init__(
            f"{struct.__name__} does not declare attributes: "
            f"{', '.join(self.keys)}"
        )
