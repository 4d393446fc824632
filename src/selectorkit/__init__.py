"""selectorkit: fluent builder for canonical CSS selector strings."""
from __future__ import annotations

from selectorkit.builder import SelectorFactory, css_selector_builder
from selectorkit.config import SelectorkitConfig
from selectorkit.errors import (
    DuplicateSingleton,
    EmptySelector,
    InvalidCombinator,
    InvalidFragmentValue,
    OrderViolation,
    SelectorError,
)
from selectorkit.model import (
    Combinator,
    CombinatorNode,
    CompoundSelector,
    Fragment,
    FragmentKind,
    SelectorNode,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # builder
    "SelectorFactory",
    "css_selector_builder",
    # model
    "FragmentKind",
    "Fragment",
    "CompoundSelector",
    "Combinator",
    "CombinatorNode",
    "SelectorNode",
    # errors
    "SelectorError",
    "OrderViolation",
    "DuplicateSingleton",
    "InvalidFragmentValue",
    "InvalidCombinator",
    "EmptySelector",
    # config
    "SelectorkitConfig",
]
