"""
Leaf value objects wrapping a single scalar.

    Plain   - returns its source unchanged
    String  - returns the string form of its source

Both compare by their plain representation and are totally ordered.
"""

from __future__ import annotations

from functools import total_ordering
from typing import Any

from .value import Value

# Returned by _coerce when the other operand is not comparable
_INCOMPARABLE = object()


@total_ordering
class Plain(Value):
    """A value object around one scalar."""

    def __init__(self, source: Any):
        object.__setattr__(self, "source", source)

    @classmethod
    def new(cls, source: Any) -> Any:
        """Build a value; an instance of this class is returned as-is."""
        if isinstance(source, cls):
            return source
        return cls(source)

    def __call__(self) -> Any:
        return self.source

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _coerce(self, other: Any) -> Any:
        if isinstance(other, Plain):
            return other()
        return _INCOMPARABLE

    def __eq__(self, other: Any) -> bool:
        plain = self._coerce(other)
        if plain is _INCOMPARABLE:
            return NotImplemented
        return self() == plain

    def __lt__(self, other: Any) -> bool:
        plain = self._coerce(other)
        if plain is _INCOMPARABLE:
            return NotImplemented
        return self() < plain

    def __hash__(self) -> int:
        return hash(self())


class String(Plain):
    """
    A string value object.

    Compares with plain strings and other Plain values by string form.
    Subclasses change the representation by overriding __call__.
    """

    def __call__(self) -> str:
        return str(self.source)

    def __str__(self) -> str:
        return self()

    def __len__(self) -> int:
        return len(self())

    def _coerce(self, other: Any) -> Any:
        if isinstance(other, Plain):
            return str(other())
        if isinstance(other, str):
            return other
        return _INCOMPARABLE
