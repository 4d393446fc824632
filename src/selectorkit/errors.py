"""Error hierarchy for selector construction."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.model.fragment import FragmentKind


class SelectorError(Exception):
    """Base error for all selectorkit errors."""


class OrderViolation(SelectorError):
    """A fragment was appended after a fragment of a higher rank."""

    def __init__(self, kind: FragmentKind, previous: FragmentKind) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )
        self.kind = kind
        self.previous = previous


class DuplicateSingleton(SelectorError):
    """A second type, id or pseudo-element was appended to one compound."""

    def __init__(self, kind: FragmentKind) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur "
            "more then one time inside the selector"
        )
        self.kind = kind


class InvalidFragmentValue(SelectorError, ValueError):
    """The literal text of a fragment was empty or not a string."""

    def __init__(self, message: str, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidCombinator(SelectorError, ValueError):
    """The combinator symbol is not one of ' ', '>', '+', '~'."""

    def __init__(self, symbol: object) -> None:
        super().__init__(f"Unknown combinator: {symbol!r}")
        self.symbol = symbol


class EmptySelector(SelectorError, ValueError):
    """An empty compound selector was passed to ``combine``."""

    def __init__(self, side: str) -> None:
        super().__init__(f"Cannot combine an empty selector on the {side}")
        self.side = side
