"""Lifts an item constructor into a list constructor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from .base import ConstructorDecorator


@dataclass(frozen=True, repr=False)
class ListDecorator(ConstructorDecorator):
    """
    Builds every item of a sequence with the wrapped constructor.

    None stays None, so a list constructor is optional-safe on its own.
    Order and length are preserved; the first failing item aborts.
    """

    def new(self, items: Optional[Iterable[Any]]) -> Optional[list]:
        if items is None:
            return None
        return [super(ListDecorator, self).new(item) for item in items]
