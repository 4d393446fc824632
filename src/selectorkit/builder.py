"""Selector factory: stateless entry points for building selectors.

Example::

    from selectorkit import builder

    builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'

    builder.combine(
        builder.element("ul").class_("menu"),
        ">",
        builder.element("li"),
    ).stringify()
    # 'ul.menu > li'
"""

from __future__ import annotations

from selectorkit.model.combinator import Combinator, CombinatorNode, SelectorNode
from selectorkit.model.combinator import combine as _combine
from selectorkit.model.compound import CompoundSelector
from selectorkit.model.fragment import FragmentKind

__all__ = [
    "start",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "SelectorFactory",
    "css_selector_builder",
]

_EMPTY = CompoundSelector()


def start(kind: FragmentKind, value: str) -> CompoundSelector:
    """Start a new compound selector whose first fragment is *kind*."""
    return _EMPTY.append(kind, value)


def element(value: str) -> CompoundSelector:
    return start(FragmentKind.TYPE, value)


def id(value: str) -> CompoundSelector:  # noqa: A001
    return start(FragmentKind.ID, value)


def class_(value: str) -> CompoundSelector:
    return start(FragmentKind.CLASS, value)


def attr(value: str) -> CompoundSelector:
    return start(FragmentKind.ATTRIBUTE, value)


def pseudo_class(value: str) -> CompoundSelector:
    return start(FragmentKind.PSEUDO_CLASS, value)


def pseudo_element(value: str) -> CompoundSelector:
    return start(FragmentKind.PSEUDO_ELEMENT, value)


def combine(
    left: SelectorNode, symbol: Combinator | str, right: SelectorNode
) -> CombinatorNode:
    """Join two finished selectors with ``' '``, ``'>'``, ``'+'`` or ``'~'``."""
    return _combine(left, symbol, right)


class SelectorFactory:
    """Facade exposing the factory functions as methods.

    Holds no state; :data:`css_selector_builder` is a ready instance.
    """

    element = staticmethod(element)
    id = staticmethod(id)
    class_ = staticmethod(class_)
    attr = staticmethod(attr)
    pseudo_class = staticmethod(pseudo_class)
    pseudo_element = staticmethod(pseudo_element)
    combine = staticmethod(combine)


css_selector_builder = SelectorFactory()
