# tram-value
# Immutable value objects with composable constructors

"""
Core contract: every value object is built from exactly one input and
dumps back to plain data.

    Type(data) / Type.new / Type.call / Type.load / Type[data]  - construct
    Type.list / .maybe / .valid / .either_present_or / .guard   - compose
    instance.dump() / Type.dump(value)                          - decompose
"""

import logging

from .constructors import (
    BuildKind,
    ConstructorDecorator,
    EitherDecorator,
    ListDecorator,
    ValidDecorator,
)
from .dump import dump
from .errors import (
    NotBuildable,
    ShapeMismatch,
    UnknownAttributes,
    ValidationFailed,
    ValueObjectError,
)
from .markers import UNDEFINED, is_blank
from .plain import Plain, String
from .struct import Attribute, Struct, StructSchema, attribute
from .validation import Violation, acceptance, format_of, presence
from .value import Value

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Attribute",
    "BuildKind",
    "ConstructorDecorator",
    "EitherDecorator",
    "ListDecorator",
    "NotBuildable",
    "Plain",
    "ShapeMismatch",
    "String",
    "Struct",
    "StructSchema",
    "UNDEFINED",
    "UnknownAttributes",
    "ValidDecorator",
    "ValidationFailed",
    "Value",
    "ValueObjectError",
    "Violation",
    "acceptance",
    "attribute",
    "dump",
    "format_of",
    "is_blank",
    "presence",
]
