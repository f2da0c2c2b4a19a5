"""Domain-layer error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorctl.domain.types import SelectorCategory

DUPLICATE_CATEGORY_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)

# ============================================================================
#                           Selector builder errors
# ============================================================================


class SelectorError(Exception):
    """Base class for selector builder errors."""

    code = "SELECTOR"


class DuplicateCategoryError(SelectorError):
    """Raised when element, id or pseudo-element is supplied a second time."""

    code = "DUPLICATE_CATEGORY"

    def __init__(self, category: SelectorCategory) -> None:
        super().__init__(DUPLICATE_CATEGORY_MESSAGE)
        self.category = category


class OrderError(SelectorError):
    """Raised when a category follows a category that must come after it."""

    code = "ORDER"

    def __init__(self, category: SelectorCategory, conflict: SelectorCategory) -> None:
        super().__init__(ORDER_MESSAGE)
        self.category = category
        self.conflict = conflict


# ============================================================================
#                           Serialization errors
# ============================================================================


class SerializationError(Exception):
    """Raised when JSON text cannot be decoded into the requested type."""

    def __init__(self, type_name: str, detail: str) -> None:
        super().__init__(f"Cannot decode JSON as {type_name}: {detail}")
        self.type_name = type_name
        self.detail = detail
