"""SelectorBuilder — immutable, chainable CSS selector construction.

Each setter returns a new builder via ``model_copy(update=...)``; the
receiver is never touched, so any intermediate builder can be reused as
the base of several selectors::

    base = builder.element("a")
    base.class_("nav").render()        # 'a.nav'
    base.pseudo_class("hover").render()  # 'a:hover'

Setters gate on state that is already present (a forward-only check):

- element, id and pseudo-element may be set once per lineage.
- a setter fails if a category that must follow it is already set.

``combine`` joins two rendered selectors with a combinator token and
produces a builder whose rendering is that text verbatim.

INVARIANT: A failed call raises before any new builder is produced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from selectorctl.domain.errors import DuplicateCategoryError, OrderError
from selectorctl.domain.types import Combinator, SelectorCategory

if TYPE_CHECKING:
    from collections.abc import Iterable


def _extend(current: str | None, fragment: str) -> str:
    """Append *fragment* to an accumulated part, treating empty as unset."""
    if not current:
        return fragment
    return current + fragment


class SelectorBuilder(BaseModel):
    """A partially or fully built compound selector, or a combination.

    Attributes:
        element_part: Type selector (``div``).
        id_part: Id fragment including ``#``.
        class_parts: One or more ``.class`` fragments.
        attr_parts: One or more ``[attr]`` fragments.
        pseudo_class_parts: One or more ``:name`` fragments.
        pseudo_element_part: The ``::name`` fragment.
        combined_value: Rendered text of a ``combine`` call. When set,
            it is the whole rendering and the part fields are ignored.
    """

    model_config = {"frozen": True}

    element_part: str | None = None
    id_part: str | None = None
    class_parts: str | None = None
    attr_parts: str | None = None
    pseudo_class_parts: str | None = None
    pseudo_element_part: str | None = None
    combined_value: str | None = None

    # --- Part setters ---

    def element(self, value: str) -> SelectorBuilder:
        """Set the type selector."""
        if self.element_part:
            raise DuplicateCategoryError(SelectorCategory.ELEMENT)
        if self.id_part:
            raise OrderError(SelectorCategory.ELEMENT, SelectorCategory.ID)
        return self.model_copy(update={"element_part": _extend(self.element_part, value)})

    def id(self, value: str) -> SelectorBuilder:
        """Set the ``#id`` selector."""
        if self.id_part:
            raise DuplicateCategoryError(SelectorCategory.ID)
        if self.class_parts:
            raise OrderError(SelectorCategory.ID, SelectorCategory.CLASS)
        if self.pseudo_element_part:
            raise OrderError(SelectorCategory.ID, SelectorCategory.PSEUDO_ELEMENT)
        fragment = SelectorCategory.ID.wrap(value)
        return self.model_copy(update={"id_part": _extend(self.id_part, fragment)})

    def class_(self, value: str) -> SelectorBuilder:
        """Append a ``.class`` selector. Also reachable as ``getattr(b, "class")``."""
        if self.attr_parts:
            raise OrderError(SelectorCategory.CLASS, SelectorCategory.ATTRIBUTE)
        fragment = SelectorCategory.CLASS.wrap(value)
        return self.model_copy(update={"class_parts": _extend(self.class_parts, fragment)})

    # ``class`` is a keyword; bind the alias through the class namespace.
    locals()["class"] = class_

    def attr(self, value: str) -> SelectorBuilder:
        """Append an ``[attr]`` selector; *value* is the text between brackets."""
        if self.pseudo_class_parts:
            raise OrderError(SelectorCategory.ATTRIBUTE, SelectorCategory.PSEUDO_CLASS)
        fragment = SelectorCategory.ATTRIBUTE.wrap(value)
        return self.model_copy(update={"attr_parts": _extend(self.attr_parts, fragment)})

    def pseudo_class(self, value: str) -> SelectorBuilder:
        """Append a ``:pseudo-class`` selector."""
        if self.pseudo_element_part:
            raise OrderError(SelectorCategory.PSEUDO_CLASS, SelectorCategory.PSEUDO_ELEMENT)
        fragment = SelectorCategory.PSEUDO_CLASS.wrap(value)
        return self.model_copy(
            update={"pseudo_class_parts": _extend(self.pseudo_class_parts, fragment)}
        )

    def pseudo_element(self, value: str) -> SelectorBuilder:
        """Set the ``::pseudo-element`` selector."""
        if self.pseudo_element_part:
            raise DuplicateCategoryError(SelectorCategory.PSEUDO_ELEMENT)
        fragment = SelectorCategory.PSEUDO_ELEMENT.wrap(value)
        return self.model_copy(
            update={"pseudo_element_part": _extend(self.pseudo_element_part, fragment)}
        )

    def add(self, category: SelectorCategory | str, value: str) -> SelectorBuilder:
        """Dispatch to the setter for *category*."""
        if not isinstance(category, SelectorCategory):
            category = SelectorCategory.parse(category)
        setter = getattr(self, category.method_name)
        return setter(value)

    def extend(self, parts: Iterable[tuple[SelectorCategory | str, str]]) -> SelectorBuilder:
        """Apply ``(category, value)`` pairs in order."""
        result = self
        for category, value in parts:
            result = result.add(category, value)
        return result

    # --- Combination ---

    def combine(
        self,
        first: SelectorBuilder,
        combinator: Combinator | str,
        second: SelectorBuilder,
    ) -> SelectorBuilder:
        """Join two selectors with *combinator*.

        The token is used as given, so ``" "`` yields three spaces between
        the operands. A receiver that already holds a combination gets the
        new text appended without a separator.
        """
        text = f"{first.render()} {combinator} {second.render()}"
        return self.model_copy(update={"combined_value": _extend(self.combined_value, text)})

    # --- Rendering ---

    def render(self) -> str:
        """Return the selector string."""
        if self.combined_value:
            return self.combined_value
        parts = (
            self.element_part,
            self.id_part,
            self.class_parts,
            self.attr_parts,
            self.pseudo_class_parts,
            self.pseudo_element_part,
        )
        return "".join(p for p in parts if p)

    stringify = render

    def __str__(self) -> str:
        return self.render()


builder = SelectorBuilder()
"""Shared empty base; every selector starts from here."""
