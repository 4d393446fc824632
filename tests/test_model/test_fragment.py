"""Tests for selectorkit.model.fragment."""
from __future__ import annotations

import pytest

from selectorkit.errors import InvalidFragmentValue, SelectorError
from selectorkit.model.fragment import Fragment, FragmentKind


# ---------------------------------------------------------------------------
# FragmentKind
# ---------------------------------------------------------------------------


class TestFragmentKindRank:
    def test_ranks_in_css_order(self) -> None:
        assert [k.rank for k in FragmentKind] == [1, 2, 3, 4, 5, 6]
        assert FragmentKind.TYPE.rank < FragmentKind.PSEUDO_ELEMENT.rank

    def test_singletons(self) -> None:
        singletons = {k for k in FragmentKind if k.singleton}
        assert singletons == {
            FragmentKind.TYPE,
            FragmentKind.ID,
            FragmentKind.PSEUDO_ELEMENT,
        }


class TestFragmentKindRender:
    @pytest.mark.parametrize(
        "kind, expected",
        [
            (FragmentKind.TYPE, "div"),
            (FragmentKind.ID, "#div"),
            (FragmentKind.CLASS, ".div"),
            (FragmentKind.ATTRIBUTE, "[div]"),
            (FragmentKind.PSEUDO_CLASS, ":div"),
            (FragmentKind.PSEUDO_ELEMENT, "::div"),
        ],
    )
    def test_render(self, kind: FragmentKind, expected: str) -> None:
        assert kind.render("div") == expected

    def test_attribute_wraps_value_in_brackets(self) -> None:
        assert FragmentKind.ATTRIBUTE.render('href$=".png"') == '[href$=".png"]'


# ---------------------------------------------------------------------------
# Fragment
# ---------------------------------------------------------------------------


class TestFragment:
    def test_str(self) -> None:
        assert str(Fragment(FragmentKind.PSEUDO_CLASS, "hover")) == ":hover"

    def test_frozen(self) -> None:
        frag = Fragment(FragmentKind.CLASS, "x")
        with pytest.raises(AttributeError):
            frag.value = "y"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Fragment(FragmentKind.ID, "a") == Fragment(FragmentKind.ID, "a")
        assert Fragment(FragmentKind.ID, "a") != Fragment(FragmentKind.CLASS, "a")

    def test_empty_value_rejected(self) -> None:
        with pytest.raises(InvalidFragmentValue):
            Fragment(FragmentKind.CLASS, "")

    def test_non_string_value_rejected(self) -> None:
        with pytest.raises(InvalidFragmentValue) as exc_info:
            Fragment(FragmentKind.ID, 42)  # type: ignore[arg-type]
        assert exc_info.value.value == 42

    def test_invalid_value_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Fragment(FragmentKind.TYPE, "")
        with pytest.raises(SelectorError):
            Fragment(FragmentKind.TYPE, "")
