"""
The constructor raises when the resulting object is invalid.

Objects that cannot validate themselves (None, lists, scalars returned
by an inner guard) pass through untouched, so the decorator can sit on
top of any other one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..errors import ValidationFailed
from .base import ConstructorDecorator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, repr=False)
class ValidDecorator(ConstructorDecorator):
    """Builds via the wrapped constructor, then calls validate() on the result."""

    def new(self, source: Any) -> Any:
        result = super().new(source)
        validate = getattr(result, "validate", None)
        if callable(validate):
            try:
                validate()
            except ValidationFailed as error:
                logger.debug("Built %r is invalid: %s", result, error)
                raise
        return result
