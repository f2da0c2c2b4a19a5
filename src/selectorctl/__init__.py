"""selectorctl — fluent, immutable CSS selector builder.

Also ships the small value-object and JSON helpers that sit alongside
the builder, plus a Click CLI front-end.
"""

from __future__ import annotations

from selectorctl.domain.errors import (
    DUPLICATE_CATEGORY_MESSAGE,
    ORDER_MESSAGE,
    DuplicateCategoryError,
    OrderError,
    SelectorError,
    SerializationError,
)
from selectorctl.domain.selector import SelectorBuilder, builder
from selectorctl.domain.serialization import from_json, to_json
from selectorctl.domain.shapes import Rectangle
from selectorctl.domain.types import Combinator, SelectorCategory

__version__ = "0.1.0"

__all__ = [
    "DUPLICATE_CATEGORY_MESSAGE",
    "ORDER_MESSAGE",
    "Combinator",
    "DuplicateCategoryError",
    "OrderError",
    "Rectangle",
    "SelectorBuilder",
    "SelectorCategory",
    "SelectorError",
    "SerializationError",
    "__version__",
    "builder",
    "from_json",
    "to_json",
]
