"""Guards selected inputs by returning a replacement instead of building."""

from __future__ import annotations

import functools
import inspect
from dataclasses import dataclass, field
from typing import Any

from .base import _OMITTED, ConstructorDecorator


def is_predicate(condition: Any) -> bool:
    """Functions, lambdas, methods and partials are predicates; anything else is a value."""
    return inspect.isroutine(condition) or isinstance(condition, functools.partial)


@dataclass(frozen=True, repr=False)
class EitherDecorator(ConstructorDecorator):
    """
    Returns `replacement` when the input matches `condition`, else builds.

    A predicate condition is called with the input; a value condition
    is compared by equality. The replacement is returned as-is.

    Specialisations:
        maybe                        - condition None, replacement None
        either_present_or(x)         - condition is_blank, replacement x
        either_present_or_undefined  - condition is_blank, replacement UNDEFINED
        guard(g, as_=x)              - condition g, replacement x (default g)
    """
    condition: Any = None
    replacement: Any = _OMITTED
    predicate: bool = field(init=False, compare=False)

    def __post_init__(self):
        super().__post_init__()
        if self.replacement is _OMITTED:
            object.__setattr__(self, "replacement", self.condition)
        object.__setattr__(self, "predicate", is_predicate(self.condition))

    def matches(self, value: Any) -> bool:
        if self.predicate:
            return bool(self.condition(value))
        return self.condition == value

    def new(self, value: Any) -> Any:
        if self.matches(value):
            return self.replacement
        return super().new(value)

    def __repr__(self) -> str:
        name = getattr(self.condition, "__name__", None) if self.predicate else None
        output = f"<Either {self._target_repr()} | {name or repr(self.condition)}"
        if self.replacement is not self.condition:
            output += f" as {self.replacement!r}"
        return output + ">"
