"""Selector documents — JSON descriptions of selector trees.

A document is either a *compound* (an ordered list of category/value
parts) or a *combination* of two documents joined by a combinator::

    {"kind": "combination",
     "left": {"kind": "compound", "parts": [{"category": "element", "value": "ul"}]},
     "combinator": ">",
     "right": {"kind": "compound", "parts": [{"category": "element", "value": "li"}]}}

``to_builder()`` replays a document through :data:`builder`, so the
same ordering and cardinality errors apply as for direct calls.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from selectorctl.domain.selector import SelectorBuilder, builder
from selectorctl.domain.types import Combinator, SelectorCategory


class PartSpec(BaseModel):
    """One category/value pair of a compound selector."""

    model_config = {"frozen": True, "extra": "forbid"}

    category: SelectorCategory
    value: str

    @field_validator("category", mode="before")
    @classmethod
    def _parse_category(cls, raw: object) -> object:
        if isinstance(raw, str):
            return SelectorCategory.parse(raw)
        return raw


class CompoundSpec(BaseModel):
    """Ordered parts of a single compound selector."""

    model_config = {"frozen": True, "extra": "forbid"}

    kind: Literal["compound"] = "compound"
    parts: list[PartSpec] = Field(default_factory=list)

    def to_builder(self) -> SelectorBuilder:
        return builder.extend((p.category, p.value) for p in self.parts)


class CombinationSpec(BaseModel):
    """Two selector documents joined by a combinator."""

    model_config = {"frozen": True, "extra": "forbid"}

    kind: Literal["combination"] = "combination"
    left: SelectorDocument
    combinator: Combinator = Combinator.DESCENDANT
    right: SelectorDocument

    @field_validator("combinator", mode="before")
    @classmethod
    def _parse_combinator(cls, raw: object) -> object:
        if isinstance(raw, str):
            return Combinator.parse(raw)
        return raw

    def to_builder(self) -> SelectorBuilder:
        return builder.combine(self.left.to_builder(), self.combinator, self.right.to_builder())


SelectorDocument = Annotated[CompoundSpec | CombinationSpec, Field(discriminator="kind")]

CombinationSpec.model_rebuild()

DOCUMENT_ADAPTER: TypeAdapter[CompoundSpec | CombinationSpec] = TypeAdapter(SelectorDocument)


def compound_document(
    parts: list[tuple[SelectorCategory, str]],
) -> CompoundSpec:
    """Wrap ordered parts in a compound document."""
    return CompoundSpec(parts=[PartSpec(category=c, value=v) for c, v in parts])
