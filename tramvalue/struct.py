"""
Struct - value objects convertible to mappings.

A Struct declares its attributes in the class body:

    class User(Struct):
        first_name = attribute()
        second_name = attribute()
        address = attribute(Address.maybe)

The declared attributes form an immutable schema attached to the class
when it is defined. Subclasses get the union of their bases' schemas
(ancestors first) followed by their own declarations.

Every attribute of an instance is in one of three states:
    unset       - no value was provided; omitted from the dump
    None        - explicitly set to None; dumped as None
    value       - set; dumped recursively
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Callable, Iterable, Optional

from .constructors.base import ConstructorDecorator
from .dump import as_mapping, dump
from .errors import ShapeMismatch, UnknownAttributes
from .markers import UNDEFINED
from .value import Value

logger = logging.getLogger(__name__)


# =============================================================================
# ATTRIBUTES
# =============================================================================

class Attribute:
    """
    A declared Struct attribute and the accessor reading it.

    Args:
        constructor: Optional buildable applied to provided values.
        default: Optional zero-argument callable used when the
            attribute would otherwise stay unset.
    """

    def __init__(
        self,
        constructor: Any = None,
        default: Optional[Callable[[], Any]] = None,
    ):
        self.name: Optional[str] = None
        self.constructor = (
            ConstructorDecorator(constructor) if constructor is not None else None
        )
        self.default = default

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return instance._values.get(self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        raise AttributeError(f"{type(instance).__name__} is immutable")

    def build(self, value: Any) -> Any:
        """Coerce a provided value; UNDEFINED stays UNDEFINED."""
        if value is UNDEFINED or self.constructor is None:
            return value
        return self.constructor.new(value)

    def __repr__(self) -> str:
        return f"<Attribute {self.name}>"


def attribute(
    constructor: Any = None,
    default: Optional[Callable[[], Any]] = None,
) -> Attribute:
    """Declare a Struct attribute."""
    return Attribute(constructor, default)


@dataclass(frozen=True)
class StructSchema:
    """Ordered, immutable set of attributes of one Struct class."""
    attributes: tuple[Attribute, ...] = ()
    _index: dict = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(
            self, "_index", {attr.name: attr for attr in self.attributes}
        )

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(attr.name for attr in self.attributes)

    def get(self, name: str) -> Optional[Attribute]:
        return self._index.get(name)

    def merge(self, attributes: Iterable[Attribute]) -> StructSchema:
        """
        Return a schema with `attributes` added after the current ones.

        A name declared again keeps its original position and takes
        the new definition.
        """
        merged = dict(self._index)
        for attr in attributes:
            merged[attr.name] = attr
        return StructSchema(tuple(merged.values()))


EMPTY_SCHEMA = StructSchema()


def to_params(struct: type, params: Any) -> Mapping:
    """Turn Struct input into a mapping, or raise ShapeMismatch."""
    if params is None:
        return {}
    if isinstance(params, Mapping):
        return params
    if isinstance(params, Value):
        plain = params()
        if isinstance(plain, Mapping):
            return plain
        raise ShapeMismatch(params, f"{struct.__name__} needs a mapping")

    mapping = as_mapping(params)
    if mapping is not None:
        return mapping
    if isinstance(params, (str, bytes)):
        raise ShapeMismatch(params, f"{struct.__name__} needs a mapping")
    try:
        return dict(params)
    except (TypeError, ValueError) as error:
        raise ShapeMismatch(params, f"{struct.__name__} needs a mapping") from error


# =============================================================================
# STRUCT
# =============================================================================

class Struct(Value):
    """
    A record of named attributes whose plain form is a mapping.

    Class options:
        strict_keys: Raise UnknownAttributes for undeclared input keys
            instead of dropping them.
        validations: Rules checked by validate() (see tramvalue.validation).
    """

    __schema__: StructSchema = EMPTY_SCHEMA
    strict_keys: bool = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        schema = EMPTY_SCHEMA
        for base in cls.__bases__:
            schema = schema.merge(getattr(base, "__schema__", EMPTY_SCHEMA).attributes)
        own = [value for value in vars(cls).values() if isinstance(value, Attribute)]
        cls.__schema__ = schema.merge(own)

    @classmethod
    def attributes(cls) -> tuple[str, ...]:
        """Names of all declared attributes, in declaration order."""
        return cls.__schema__.names

    def __init__(self, params: Any = None):
        schema = type(self).__schema__
        values = {}
        unknown = []

        for key, value in to_params(type(self), params).items():
            name = str(key)
            attr = schema.get(name)
            if attr is None:
                unknown.append(name)
                continue
            values[name] = attr.build(value)

        if unknown:
            if type(self).strict_keys:
                raise UnknownAttributes(type(self), unknown)
            logger.debug(
                "%s ignores unknown keys: %s",
                type(self).__name__, ", ".join(unknown),
            )

        stored = {}
        for attr in schema.attributes:
            value = values.get(attr.name, UNDEFINED)
            if value is UNDEFINED and attr.default is not None:
                value = attr.build(attr.default())
            if value is not UNDEFINED:
                stored[attr.name] = value
        object.__setattr__(self, "_values", stored)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -------------------------------------------------------------------------
    # Plain representation
    # -------------------------------------------------------------------------

    @cached_property
    def _plain(self) -> dict:
        # Never handed out; callers get copies
        return {name: dump(value) for name, value in self._values.items()}

    def __call__(self) -> dict:
        """
        Mapping of the set attributes.

        The mapping is computed once per instance. Each call returns a
        fresh copy, so changing it leaves the instance untouched.
        """
        return dump(self._plain)

    def to_dict(self) -> dict:
        return self()

    def __getitem__(self, name: str) -> Any:
        attr = type(self).__schema__.get(str(name))
        if attr is None:
            raise KeyError(name)
        return getattr(self, attr.name)

    def __contains__(self, name: str) -> bool:
        """Whether the attribute is set (None counts as set)."""
        return str(name) in self._values

    # -------------------------------------------------------------------------
    # Equality
    # -------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if other is None:
            return False
        if isinstance(other, Mapping):
            return self._plain == dict(other)
        if isinstance(other, Value):
            plain = other()
            return isinstance(plain, Mapping) and self._plain == dict(plain)
        mapping = as_mapping(other)
        if mapping is None:
            return NotImplemented
        return self._plain == dict(mapping)

    __hash__ = None

    def strict_equals(self, other: Any) -> bool:
        """Equal, and of exactly the same class."""
        return type(other) is type(self) and self == other
