"""Fragment model: the typed parts of a compound selector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from selectorkit.errors import InvalidFragmentValue


class FragmentKind(Enum):
    """Kind of a selector fragment.

    The value of each member is its rank: fragments inside one compound
    selector must appear in non-decreasing rank order.
    """

    TYPE = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def rank(self) -> int:
        return self.value

    @property
    def singleton(self) -> bool:
        """True if the kind may occur at most once per compound selector."""
        return self in _SINGLETON_KINDS

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]

    def render(self, value: str) -> str:
        if self is FragmentKind.ATTRIBUTE:
            return f"[{value}]"
        return f"{self.prefix}{value}"


_SINGLETON_KINDS = frozenset(
    {FragmentKind.TYPE, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_PREFIXES = {
    FragmentKind.TYPE: "",
    FragmentKind.ID: "#",
    FragmentKind.CLASS: ".",
    FragmentKind.ATTRIBUTE: "[",
    FragmentKind.PSEUDO_CLASS: ":",
    FragmentKind.PSEUDO_ELEMENT: "::",
}

_LABELS = {
    FragmentKind.TYPE: "element",
    FragmentKind.ID: "id",
    FragmentKind.CLASS: "class",
    FragmentKind.ATTRIBUTE: "attribute",
    FragmentKind.PSEUDO_CLASS: "pseudo-class",
    FragmentKind.PSEUDO_ELEMENT: "pseudo-element",
}


@dataclass(frozen=True)
class Fragment:
    """A single selector part: a kind plus its literal text.

    The value is used verbatim, e.g. ``href$=".png"`` for an attribute
    fragment (without the surrounding brackets).
    """

    kind: FragmentKind
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidFragmentValue(
                f"{self.kind.label} value must be a string, "
                f"got {type(self.value).__name__}",
                value=self.value,
            )
        if not self.value:
            raise InvalidFragmentValue(
                f"{self.kind.label} value must not be empty", value=self.value
            )

    def __str__(self) -> str:
        return self.kind.render(self.value)
