"""
Dump - recursive normalisation of value objects into plain data.

dump() walks a value depth-first and rewrites it into mappings, lists
and scalars suitable for storage or transport. Shapes are tried in a
fixed order so that ambiguous values resolve deterministically:

    1. None                      -> None
    2. mapping                   -> dict with every value dumped
    3. list / tuple              -> list with every item dumped
    4. zero-argument invocable   -> dump of its result (value objects)
    5. mapping-convertible       -> dump of the converted mapping
    6. any other iterable        -> as 3
    7. anything else             -> unchanged

Constructor chains and callables that need arguments are left unchanged.
Loading has no algorithm of its own: it is construction from plain data.
"""

from __future__ import annotations

import dataclasses
import datetime
import decimal
import functools
import inspect
import uuid
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Optional

from .constructors.base import ConstructorDecorator
from .errors import ShapeMismatch


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# Leaf types accepted by dump(..., strict=True)
PLAIN_TYPES = (
    str, bytes, int, float, complex, bool,
    decimal.Decimal, datetime.date, datetime.time, datetime.timedelta,
    uuid.UUID, Enum,
)

# Iterables that are scalars, not collections
ATOMIC_ITERABLES = (str, bytes, bytearray)


# =============================================================================
# SHAPE HELPERS
# =============================================================================

def is_sequence(value: Any) -> bool:
    """Lists and tuples, except namedtuples which convert to mappings."""
    return isinstance(value, (list, tuple)) and not hasattr(value, "_asdict")


def is_thunk(value: Any) -> bool:
    """Callables that can be invoked with no arguments, classes excluded."""
    if isinstance(value, type) or not callable(value):
        return False
    try:
        inspect.signature(value).bind()
    except (TypeError, ValueError):
        return False
    return True


def as_mapping(value: Any) -> Optional[Mapping]:
    """
    Convert an object exposing a mapping conversion, or return None.

    Recognised conversions: to_dict(), _asdict() and dataclass instances.
    """
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    as_dict = getattr(value, "_asdict", None)
    if callable(as_dict):
        return as_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: getattr(value, f.name)
            for f in dataclasses.fields(value)
        }
    return None


# =============================================================================
# DUMP
# =============================================================================

def dump(value: Any, strict: bool = False) -> Any:
    """
    Convert a value holding nested value objects into plain data.

    Args:
        value: Anything: value objects, mappings, sequences, scalars.
        strict: Raise ShapeMismatch for leaves that are not PLAIN_TYPES
            instead of passing them through.

    Raises:
        ShapeMismatch: In strict mode only.
    """
    if value is None:
        return None
    if isinstance(value, Mapping):
        return {key: dump(item, strict) for key, item in value.items()}
    if is_sequence(value):
        return [dump(item, strict) for item in value]
    if is_thunk(value):
        return dump(value(), strict)

    # Chains forward attribute lookups to their target
    if not isinstance(value, ConstructorDecorator):
        mapping = as_mapping(value)
        if mapping is not None:
            return dump(mapping, strict)

        if isinstance(value, Iterable) and not isinstance(value, ATOMIC_ITERABLES):
            return [dump(item, strict) for item in value]

    if strict and not isinstance(value, PLAIN_TYPES):
        raise ShapeMismatch(value, "Value has no plain representation")
    return value


class dumper:
    """
    Descriptor exposing dump() on value classes and their instances.

    Type.dump(value) dumps any value; instance.dump() dumps the instance.
    """

    def __get__(self, instance: Any, owner: Optional[type] = None):
        if instance is None:
            return dump
        return functools.partial(dump, instance)
