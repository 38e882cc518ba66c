"""
Tests for tram-value constructor chains.

These tests verify that:
1. Any class or one-argument function gains the value object API
2. Each decorator adds exactly one behaviour and delegates the rest
3. Chains compose by repeated application and never fail at composition
"""

import pytest
from decimal import Decimal

from tramvalue import (
    UNDEFINED,
    BuildKind,
    ConstructorDecorator,
    EitherDecorator,
    ListDecorator,
    NotBuildable,
    ValidDecorator,
    ValidationFailed,
    Value,
    Violation,
)


# =============================================================================
# TEST FIXTURES
# =============================================================================

def to_int(text):
    """Function target used across the tests."""
    return int(text)


def is_x(value):
    return str(value) == "x"


# =============================================================================
# BASE CONSTRUCTOR
# =============================================================================

class TestBaseConstructor:
    """Value[target] wraps classes and functions alike."""

    def test_wrapping_returns_a_constructor(self):
        """Value[...] on the base class wraps instead of building."""
        assert isinstance(Value[Decimal], ConstructorDecorator)

    def test_class_target_is_transparent(self):
        """A class target builds a plain instance of that class."""
        result = Value[Decimal].new("1.5")

        assert isinstance(result, Decimal)
        assert result == Decimal("1.5")

    def test_function_target_is_called(self):
        """A function target is invoked with the single input."""
        assert Value[to_int].new("12") == 12

    def test_construction_synonyms_are_equivalent(self):
        """new, call, load, [] and () all build the same value."""
        chain = Value[to_int]

        assert chain.new("7") == 7
        assert chain.call("7") == 7
        assert chain.load("7") == 7
        assert chain["7"] == 7
        assert chain("7") == 7

    def test_build_kind_resolved_at_composition(self):
        """The construction style is chosen once, when wrapping."""
        assert Value[Decimal].kind is BuildKind.TYPE
        assert Value[to_int].kind is BuildKind.FUNCTION
        assert Value[42].kind is None

    def test_not_buildable_raises_on_build(self):
        """A target with neither style fails on build, naming target and input."""
        chain = Value[42]

        with pytest.raises(NotBuildable, match="42") as exc_info:
            chain.new("foo")

        assert exc_info.value.target == 42
        assert exc_info.value.source == "foo"

    def test_composition_never_fails(self):
        """Decorating an unbuildable target is fine until something is built."""
        chain = Value[42].list.maybe.valid

        assert chain.new(None) is None
        with pytest.raises(NotBuildable):
            chain.new(["foo"])

    def test_unknown_attributes_forwarded_to_target(self):
        """Chains expose the wrapped target's own helpers."""
        assert Value[Decimal].from_float(0.5) == Decimal("0.5")
        assert Value[Decimal].maybe.from_float(0.5) == Decimal("0.5")

    def test_chains_are_immutable(self):
        """Chain nodes cannot be modified after composition."""
        chain = Value[to_int].maybe

        with pytest.raises(AttributeError):
            chain.source = Value[Decimal]

    def test_repr(self):
        """Chains describe their structure."""
        assert repr(Value[Decimal]) == "<Constructor Decimal>"
        assert repr(Value[Decimal].list) == "<List <Constructor Decimal>>"
        assert repr(Value[Decimal].valid) == "<Valid <Constructor Decimal>>"


# =============================================================================
# LIST
# =============================================================================

class TestList:
    """.list lifts an item constructor into a list constructor."""

    def test_wraps_items_of_class_target(self):
        data = Value[Decimal].list.new(["1", "2.5"])

        assert isinstance(data, list)
        assert data == [Decimal("1"), Decimal("2.5")]

    def test_wraps_items_of_function_target(self):
        assert Value[to_int].list.new(["11", "21"]) == [11, 21]

    def test_none_stays_none(self):
        """A list constructor is optional-safe on its own."""
        assert Value[to_int].list.new(None) is None

    def test_preserves_order_and_length(self):
        """No filtering, no deduplication."""
        assert Value[to_int].list.new(["3", "1", "3"]) == [3, 1, 3]

    def test_accepts_any_iterable(self):
        assert Value[to_int].list.new(("1", "2")) == [1, 2]

    def test_first_failure_aborts(self):
        """One bad item fails the whole list with that item's error."""
        with pytest.raises(ValueError):
            Value[to_int].list.new(["1", "oops", "3"])

    def test_nested_lists(self):
        assert Value[to_int].list.list.new([["1", "2"], ["3"]]) == [[1, 2], [3]]

    def test_is_a_list_decorator(self):
        assert isinstance(Value[to_int].list, ListDecorator)


# =============================================================================
# EITHER
# =============================================================================

class TestMaybe:
    """.maybe lets None through unchanged."""

    def test_class_target_transient_when_not_none(self):
        assert Value[Decimal].maybe.new("42") == Decimal("42")

    def test_function_target_transient_when_not_none(self):
        assert Value[to_int].maybe.new("42") == 42

    def test_none_to_none(self):
        assert Value[Decimal].maybe.new(None) is None
        assert Value[to_int].maybe.new(None) is None

    def test_is_an_either_decorator(self):
        chain = Value[to_int].maybe

        assert isinstance(chain, EitherDecorator)
        assert chain.condition is None
        assert chain.replacement is None
        assert repr(chain) == "<Either <Constructor to_int> | None>"


class TestEitherPresentOr:
    """.either_present_or replaces blank input."""

    def test_transient_when_present(self):
        assert Value[to_int].either_present_or("baz").new("42") == 42
        assert Value[Decimal].either_present_or("baz").new("42") == Decimal("42")

    @pytest.mark.parametrize("blank", [None, "", "   ", [], {}])
    def test_blank_becomes_target(self, blank):
        assert Value[to_int].either_present_or("baz").new(blank) == "baz"

    def test_undefined_variant(self):
        chain = Value[to_int].either_present_or_undefined

        assert chain.new("42") == 42
        assert chain.new(None) is UNDEFINED

    def test_replacement_is_not_wrapped(self):
        """The replacement bypasses the wrapped constructor entirely."""
        chain = Value[Decimal].either_present_or("not a number")

        assert chain.new("") == "not a number"

    def test_repr_names_predicate(self):
        chain = Value[to_int].either_present_or("baz")

        assert repr(chain) == "<Either <Constructor to_int> | is_blank as 'baz'>"


class TestGuard:
    """.guard replaces a guarded value or predicate match."""

    def test_value_guard_transient_when_not_guarded(self):
        assert Value[to_int].guard("foo", as_="bar").new("42") == 42
        assert Value[Decimal].guard("foo", as_="bar").new("42") == Decimal("42")

    def test_value_guard_converts_guarded_value(self):
        assert Value[to_int].guard("foo", as_="bar").new("foo") == "bar"
        assert Value[Decimal].guard("foo", as_="bar").new("foo") == "bar"

    def test_predicate_guard(self):
        chain = Value[to_int].guard(is_x, as_="bar")

        assert chain.new("42") == 42
        assert chain.new("x") == "bar"

    def test_lambda_guard(self):
        chain = Value[Decimal].guard(lambda value: value == "n/a", as_=None)

        assert chain.new("n/a") is None
        assert chain.new("3") == Decimal("3")

    def test_replacement_defaults_to_guard(self):
        chain = Value[to_int].guard("n/a")

        assert chain.new("n/a") == "n/a"
        assert chain.replacement == "n/a"

    def test_explicit_none_replacement(self):
        """as_=None is a replacement, not an omission."""
        assert Value[to_int].guard("-", as_=None).new("-") is None

    def test_guard_value_is_compared_by_equality(self):
        chain = Value[to_int].guard(0, as_="zero")

        assert chain.new(0) == "zero"
        assert chain.new("0") == 0

    def test_repr(self):
        chain = Value[to_int].guard("foo", as_="bar")

        assert repr(chain) == "<Either <Constructor to_int> | 'foo' as 'bar'>"


# =============================================================================
# VALID
# =============================================================================

class Checked:
    """Plain class exposing validate() without being a value object."""

    def __init__(self, source):
        self.source = source

    def validate(self):
        if self.source < 0:
            raise ValidationFailed([Violation("source", "must be positive")], self)


class TestValid:
    """.valid validates results that can validate themselves."""

    def test_validates_result(self):
        chain = Value[Checked].valid

        assert chain.new(3).source == 3

    def test_invalid_result_raises(self):
        with pytest.raises(ValidationFailed, match="source must be positive") as exc_info:
            Value[Checked].valid.new(-1)

        assert exc_info.value.errors[0].attribute == "source"

    def test_skips_results_without_validate(self):
        """Scalars and lists pass untouched."""
        assert Value[to_int].valid.new("12") == 12
        assert Value[to_int].list.valid.new(["1"]) == [1]

    def test_stacks_on_short_circuits(self):
        """None from an inner maybe is not validated."""
        assert Value[Checked].maybe.valid.new(None) is None

    def test_is_a_valid_decorator(self):
        assert isinstance(Value[Checked].valid, ValidDecorator)
