"""Selector model layer -- public type re-exports."""

from selectorkit.model.combinator import (
    Combinator,
    CombinatorNode,
    SelectorNode,
    combine,
)
from selectorkit.model.compound import CompoundSelector
from selectorkit.model.fragment import Fragment, FragmentKind

__all__ = [
    # fragment
    "FragmentKind",
    "Fragment",
    # compound
    "CompoundSelector",
    # combinator
    "Combinator",
    "CombinatorNode",
    "SelectorNode",
    "combine",
]
