"""
Constructor chain - the base layer shared by every decorator.

A chain node wraps exactly one buildable target (its source): a value
class, a plain class, another chain node or a one-argument function.
Nodes are frozen once composed; a single construction call enters at
the outermost node and flows inward until a layer short-circuits or
the innermost target builds the value.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from ..errors import NotBuildable
from ..markers import UNDEFINED, is_blank

logger = logging.getLogger(__name__)

# Distinguishes an omitted keyword from an explicit None
_OMITTED = object()


class BuildKind(Enum):
    """How a target is turned into a value."""
    TYPE = "type"           # class, or anything exposing a `new` factory
    FUNCTION = "function"   # plain one-argument callable


def resolve_builder(target: Any) -> tuple[Optional[BuildKind], Optional[Callable]]:
    """
    Pick the construction style of a target.

    Returns (None, None) when the target supports neither style; the
    caller defers the failure to the first build.
    """
    factory = getattr(target, "new", None)
    if callable(factory):
        return BuildKind.TYPE, factory
    if isinstance(target, type):
        return BuildKind.TYPE, target
    if callable(target):
        return BuildKind.FUNCTION, target
    return None, None


# =============================================================================
# COMPOSITION PROTOCOL
# =============================================================================

class Composable:
    """
    Construction synonyms and decorator composition.

    Mixed into value class metaclasses and into chain nodes, so that
    `User.list.maybe.valid` and `Value[int].maybe` read the same way.
    Subclasses provide new().
    """

    def new(self, source: Any) -> Any:
        raise NotImplementedError

    def call(self, source: Any) -> Any:
        return self.new(source)

    def load(self, source: Any) -> Any:
        return self.new(source)

    def __getitem__(self, source: Any) -> Any:
        return self.new(source)

    @property
    def list(self) -> "ConstructorDecorator":
        from .lists import ListDecorator
        return ListDecorator(self)

    @property
    def maybe(self) -> "ConstructorDecorator":
        from .either import EitherDecorator
        return EitherDecorator(self, None)

    @property
    def valid(self) -> "ConstructorDecorator":
        from .valid import ValidDecorator
        return ValidDecorator(self)

    def either_present_or(self, target: Any) -> "ConstructorDecorator":
        from .either import EitherDecorator
        return EitherDecorator(self, is_blank, target)

    @property
    def either_present_or_undefined(self) -> "ConstructorDecorator":
        return self.either_present_or(UNDEFINED)

    def guard(self, source: Any, as_: Any = _OMITTED) -> "ConstructorDecorator":
        """Replace `source` (a value or a predicate) by `as_`, defaulting to `source`."""
        from .either import EitherDecorator
        if as_ is _OMITTED:
            return EitherDecorator(self, source)
        return EitherDecorator(self, source, as_)


# =============================================================================
# BASE DECORATOR
# =============================================================================

@dataclass(frozen=True, repr=False)
class ConstructorDecorator(Composable):
    """
    Wraps a buildable target and gives it the value object API.

    Attributes the decorator does not define are looked up on the
    wrapped target, so a chain still exposes the target's own helpers.
    """
    source: Any
    kind: Optional[BuildKind] = field(init=False, compare=False)
    _builder: Optional[Callable] = field(init=False, compare=False)

    def __post_init__(self):
        kind, builder = resolve_builder(self.source)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "_builder", builder)

    def new(self, source: Any) -> Any:
        if self._builder is None:
            logger.debug("Target %r is not buildable", self.source)
            raise NotBuildable(self.source, source)
        return self._builder(source)

    def __call__(self, source: Any) -> Any:
        return self.new(source)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name in ("source", "kind"):
            raise AttributeError(name)
        return getattr(self.source, name)

    def _target_repr(self) -> str:
        if isinstance(self.source, type) or inspect.isroutine(self.source):
            return self.source.__name__
        return repr(self.source)

    def __repr__(self) -> str:
        short_name = type(self).__name__.replace("Decorator", "")
        return f"<{short_name} {self._target_repr()}>"
