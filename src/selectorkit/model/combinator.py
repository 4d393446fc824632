"""Combinator model: binding two selector trees with a DOM relationship."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from selectorkit.errors import EmptySelector, InvalidCombinator
from selectorkit.model.compound import CompoundSelector

logger = logging.getLogger(__name__)


class Combinator(Enum):
    """Relationship between the left and right side of a selector."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @property
    def separator(self) -> str:
        """Text placed between the two rendered sides."""
        if self is Combinator.DESCENDANT:
            return " "
        return f" {self.value} "

    @classmethod
    def coerce(cls, symbol: Combinator | str) -> Combinator:
        """Resolve *symbol* to a Combinator.

        Surrounding whitespace is ignored, so ``" > "`` is a child
        combinator and a blank string is the descendant combinator.
        """
        if isinstance(symbol, cls):
            return symbol
        if not isinstance(symbol, str):
            raise InvalidCombinator(symbol)
        stripped = symbol.strip()
        if not stripped:
            return cls.DESCENDANT
        try:
            return cls(stripped)
        except ValueError:
            raise InvalidCombinator(symbol) from None


@dataclass(frozen=True)
class CombinatorNode:
    """Two selector trees joined by a combinator.

    Either side may itself be a CombinatorNode, so arbitrarily deep
    selectors render by left-to-right recursive descent.
    """

    left: SelectorNode
    combinator: Combinator
    right: SelectorNode

    def stringify(self) -> str:
        return (
            self.left.stringify() + self.combinator.separator + self.right.stringify()
        )

    def __str__(self) -> str:
        return self.stringify()


SelectorNode = Union[CompoundSelector, CombinatorNode]


def combine(
    left: SelectorNode, symbol: Combinator | str, right: SelectorNode
) -> CombinatorNode:
    """Join *left* and *right* with the combinator named by *symbol*.

    Neither side is re-validated: each is already a complete selector.
    An empty ``CompoundSelector`` on either side raises EmptySelector.
    """
    combinator = Combinator.coerce(symbol)
    for side, node in (("left", left), ("right", right)):
        if isinstance(node, CompoundSelector) and node.is_empty:
            raise EmptySelector(side)
    logger.debug("Combined selectors with %s combinator", combinator.name.lower())
    return CombinatorNode(left=left, combinator=combinator, right=right)
