# Constructors package for tram-value
"""
Decorators that wrap value object constructors.

Each decorator adds one orthogonal behaviour to the constructor it
wraps: list-lifting, guarded substitution or validation.
"""

from .base import BuildKind, Composable, ConstructorDecorator, resolve_builder
from .either import EitherDecorator
from .lists import ListDecorator
from .valid import ValidDecorator

__all__ = [
    "BuildKind",
    "Composable",
    "ConstructorDecorator",
    "EitherDecorator",
    "ListDecorator",
    "ValidDecorator",
    "resolve_builder",
]
