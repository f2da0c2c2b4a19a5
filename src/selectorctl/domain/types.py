"""Selector categories and combinators.

The six categories of a compound selector appear in a fixed order::

    element#id.class[attr]:pseudo-class::pseudo-element

Class, attribute and pseudo-class may repeat; the others may not.
"""

from __future__ import annotations

from enum import StrEnum


class SelectorCategory(StrEnum):
    """Compound selector categories, declared in canonical order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of the category in the canonical order (0-based)."""
        return list(SelectorCategory).index(self)

    @property
    def method_name(self) -> str:
        """Name of the SelectorBuilder method that sets this category."""
        return _METHOD_NAMES[self]

    def wrap(self, value: str) -> str:
        """Return *value* with this category's punctuation applied."""
        prefix, suffix = _PUNCTUATION[self]
        return f"{prefix}{value}{suffix}"

    @classmethod
    def parse(cls, raw: str) -> SelectorCategory:
        """Resolve a category name, accepting common aliases.

        Raises:
            ValueError: If *raw* names no known category.
        """
        key = raw.strip()
        if key in _ALIASES:
            return _ALIASES[key]
        try:
            return cls(key.lower())
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            msg = f"Unknown selector category '{raw}'. Expected one of: {valid}"
            raise ValueError(msg) from None


class Combinator(StrEnum):
    """CSS combinators joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"

    @classmethod
    def parse(cls, raw: str) -> Combinator:
        """Resolve a combinator from its token or its lowercase member name.

        Raises:
            ValueError: If *raw* is neither.
        """
        if raw in cls._value2member_map_:
            return cls(raw)
        stripped = raw.strip()
        if stripped in cls._value2member_map_:
            return cls(stripped)
        if not stripped:
            return cls.DESCENDANT
        try:
            return cls[stripped.upper().replace("-", "_")]
        except KeyError:
            msg = f"Unknown combinator {raw!r}. Expected one of: ' ', '>', '+', '~'"
            raise ValueError(msg) from None


_PUNCTUATION: dict[SelectorCategory, tuple[str, str]] = {
    SelectorCategory.ELEMENT: ("", ""),
    SelectorCategory.ID: ("#", ""),
    SelectorCategory.CLASS: (".", ""),
    SelectorCategory.ATTRIBUTE: ("[", "]"),
    SelectorCategory.PSEUDO_CLASS: (":", ""),
    SelectorCategory.PSEUDO_ELEMENT: ("::", ""),
}

_METHOD_NAMES: dict[SelectorCategory, str] = {
    SelectorCategory.ELEMENT: "element",
    SelectorCategory.ID: "id",
    SelectorCategory.CLASS: "class_",
    SelectorCategory.ATTRIBUTE: "attr",
    SelectorCategory.PSEUDO_CLASS: "pseudo_class",
    SelectorCategory.PSEUDO_ELEMENT: "pseudo_element",
}

_ALIASES: dict[str, SelectorCategory] = {
    "attr": SelectorCategory.ATTRIBUTE,
    "pseudoClass": SelectorCategory.PSEUDO_CLASS,
    "pseudo_class": SelectorCategory.PSEUDO_CLASS,
    "pseudoElement": SelectorCategory.PSEUDO_ELEMENT,
    "pseudo_element": SelectorCategory.PSEUDO_ELEMENT,
}
