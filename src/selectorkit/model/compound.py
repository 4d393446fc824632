"""CompoundSelector: an ordered run of fragments with no combinator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from selectorkit.errors import DuplicateSingleton, OrderViolation
from selectorkit.model.fragment import Fragment, FragmentKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompoundSelector:
    """An element-level selector such as ``div#main.container:hover``.

    Instances are immutable: every append returns a new selector, and a
    rejected append leaves the selector exactly as it was.

    Fragments must be appended in rank order (element, id, class,
    attribute, pseudo-class, pseudo-element). Element, id and
    pseudo-element may each occur only once.
    """

    fragments: tuple[Fragment, ...] = ()

    @property
    def last_rank(self) -> int:
        """Rank of the most recently appended fragment, 0 when empty."""
        if not self.fragments:
            return 0
        return self.fragments[-1].kind.rank

    @property
    def is_empty(self) -> bool:
        return not self.fragments

    def __len__(self) -> int:
        return len(self.fragments)

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self.fragments)

    def append(self, kind: FragmentKind, value: str) -> CompoundSelector:
        """Return a new selector with a *kind* fragment appended.

        The value is checked before the rank rules.

        Raises:
            OrderViolation: *kind* ranks below the last fragment.
            DuplicateSingleton: *kind* is a singleton already present.
            InvalidFragmentValue: *value* is empty or not a string.
        """
        fragment = Fragment(kind, value)
        last_rank = self.last_rank
        if kind.rank < last_rank:
            previous = self.fragments[-1].kind
            logger.debug(
                "Rejected %s %r after %s in '%s'",
                kind.label, value, previous.label, self,
            )
            raise OrderViolation(kind, previous)
        if kind.rank == last_rank and kind.singleton:
            logger.debug("Rejected duplicate %s %r in '%s'", kind.label, value, self)
            raise DuplicateSingleton(kind)

        logger.debug("Appended %s fragment %r", kind.label, str(fragment))
        return CompoundSelector(self.fragments + (fragment,))

    # --- one operation per fragment kind ------------------------------------

    def add_type(self, value: str) -> CompoundSelector:
        return self.append(FragmentKind.TYPE, value)

    def add_id(self, value: str) -> CompoundSelector:
        return self.append(FragmentKind.ID, value)

    def add_class(self, value: str) -> CompoundSelector:
        return self.append(FragmentKind.CLASS, value)

    def add_attribute(self, value: str) -> CompoundSelector:
        return self.append(FragmentKind.ATTRIBUTE, value)

    def add_pseudo_class(self, value: str) -> CompoundSelector:
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def add_pseudo_element(self, value: str) -> CompoundSelector:
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    # Fluent aliases matching the factory entry points.
    element = add_type
    id = add_id
    class_ = add_class
    attr = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = add_pseudo_element

    # --- rendering --------------------------------------------------------------

    def stringify(self) -> str:
        """Render the fragments in insertion order with no separator."""
        return "".join(str(fragment) for fragment in self.fragments)

    def __str__(self) -> str:
        return self.stringify()
