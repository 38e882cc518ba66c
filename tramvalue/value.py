"""
Value - the base of every value object.

A value object is an immutable wrapper whose plain representation is
returned by calling it with no arguments. Value classes share one
construction protocol:

    Type(data) == Type.new(data) == Type.call(data) == Type.load(data) == Type[data]

and the composition protocol of the constructors package:

    Type.list, Type.maybe, Type.valid,
    Type.either_present_or(x), Type.either_present_or_undefined,
    Type.guard(source, as_=x)

Value[target] wraps any class or one-argument function into a chain
with the same API.
"""

from __future__ import annotations

from functools import cached_property
from typing import Any

from .constructors.base import Composable, ConstructorDecorator
from .dump import dumper
from .errors import ValidationFailed
from .validation import Violation, run_rules


class ValueMeta(Composable, type):
    """Metaclass giving value classes the construction and composition API."""

    def new(cls, source: Any) -> Any:
        return cls(source)

    def __getitem__(cls, source: Any) -> Any:
        if cls is Value:
            return ConstructorDecorator(source)
        return cls.new(source)


class Value(metaclass=ValueMeta):
    """
    Abstract value object.

    Subclasses implement __call__ to return the plain representation
    and may declare `validations` (see tramvalue.validation).
    """

    validations: tuple = ()

    dump = dumper()

    def __call__(self) -> Any:
        raise NotImplementedError(
            f"{type(self).__name__} must define its plain representation"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}[{self()!r}]"

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    @cached_property
    def errors(self) -> tuple[Violation, ...]:
        """All violations of the class rules, computed once per instance."""
        return run_rules(self, type(self).validations)

    def is_valid(self) -> bool:
        return not self.errors

    def validate(self) -> None:
        """
        Raise when any rule is violated.

        Raises:
            ValidationFailed: Carrying every violation found.
        """
        if self.errors:
            raise ValidationFailed(self.errors, subject=self)
