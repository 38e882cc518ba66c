"""
Validation rules for value objects.

Every value class may declare a tuple of rules in its `validations`
class attribute. A rule is any callable taking the value object and
yielding Violation records; an empty result means the rule passes.

    class User(Struct):
        first_name = attribute()
        validations = (presence("first_name"),)

Value objects expose the outcome as `errors`, `is_valid()` and the
raising `validate()` used by the `.valid` constructor.
"""

from __future__ import annotations

import inspect
import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Pattern, Union

from .markers import is_blank


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

BLANK_MESSAGE = "can't be blank"
ACCEPTANCE_MESSAGE = "must be accepted"
FORMAT_MESSAGE = "is invalid"


@dataclass(frozen=True)
class Violation:
    """A single failed rule: which attribute, and what is wrong with it."""
    attribute: str
    message: str

    def __str__(self) -> str:
        return f"{self.attribute} {self.message}"


Rule = Callable[[Any], Iterable[Violation]]


def read_attribute(obj: Any, name: str) -> Any:
    """Read an attribute for a rule, calling it when it is a bound method."""
    value = getattr(obj, name, None)
    if inspect.ismethod(value):
        return value()
    return value


# =============================================================================
# RULE FACTORIES
# =============================================================================

def presence(*names: str, message: str = BLANK_MESSAGE) -> Rule:
    """Every named attribute must be present (not blank)."""
    def rule(obj: Any) -> Iterator[Violation]:
        for name in names:
            if is_blank(read_attribute(obj, name)):
                yield Violation(name, message)
    return rule


def acceptance(name: str, message: str = ACCEPTANCE_MESSAGE) -> Rule:
    """The named attribute (or predicate method) must be truthy."""
    def rule(obj: Any) -> Iterator[Violation]:
        if not read_attribute(obj, name):
            yield Violation(name, message)
    return rule


def format_of(
    name: str,
    pattern: Union[str, Pattern[str]],
    message: str = FORMAT_MESSAGE,
) -> Rule:
    """
    The named attribute must fully match a regular expression.

    Unset and None attributes are skipped; combine with presence() to
    require them.
    """
    compiled = re.compile(pattern)

    def rule(obj: Any) -> Iterator[Violation]:
        value = read_attribute(obj, name)
        if value is None:
            return
        if not compiled.fullmatch(str(value)):
            yield Violation(name, message)
    return rule


def run_rules(obj: Any, rules: Iterable[Rule]) -> tuple[Violation, ...]:
    """Evaluate every rule against obj and collect all violations in order."""
    return tuple(
        violation
        for rule in rules
        for violation in rule(obj)
    )
