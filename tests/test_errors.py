"""Tests for selectorkit.errors."""
from __future__ import annotations

from selectorkit.errors import (
    DuplicateSingleton,
    EmptySelector,
    InvalidCombinator,
    InvalidFragmentValue,
    OrderViolation,
    SelectorError,
)
from selectorkit.model.fragment import FragmentKind


class TestHierarchy:
    def test_base_is_exception(self) -> None:
        assert issubclass(SelectorError, Exception)

    def test_append_errors_are_selector_errors(self) -> None:
        assert issubclass(OrderViolation, SelectorError)
        assert issubclass(DuplicateSingleton, SelectorError)

    def test_value_errors(self) -> None:
        assert issubclass(InvalidFragmentValue, ValueError)
        assert issubclass(InvalidCombinator, ValueError)


class TestFields:
    def test_order_violation(self) -> None:
        err = OrderViolation(FragmentKind.ID, FragmentKind.CLASS)
        assert err.kind is FragmentKind.ID
        assert err.previous is FragmentKind.CLASS
        assert str(err).startswith("Selector parts should be arranged")

    def test_duplicate_singleton(self) -> None:
        err = DuplicateSingleton(FragmentKind.PSEUDO_ELEMENT)
        assert err.kind is FragmentKind.PSEUDO_ELEMENT
        assert "should not occur" in str(err)

    def test_invalid_combinator(self) -> None:
        err = InvalidCombinator("|")
        assert err.symbol == "|"
        assert str(err) == "Unknown combinator: '|'"

    def test_empty_selector(self) -> None:
        err = EmptySelector("left")
        assert err.side == "left"
        assert isinstance(err, SelectorError)
        assert isinstance(err, ValueError)
