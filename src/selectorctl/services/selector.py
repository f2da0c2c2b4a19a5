"""SelectorService — build, combine, and render selectors.

Inputs arrive as ``category=value`` strings (CLI) or typed pairs
(Python callers).  Builder errors come back as failed results with
codes ``DUPLICATE_CATEGORY`` or ``ORDER``; malformed input yields
``INVALID_PART``, ``INVALID_COMBINATOR`` or ``INVALID_DOCUMENT``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from selectorctl.domain.document import DOCUMENT_ADAPTER, compound_document
from selectorctl.domain.errors import SelectorError, SerializationError
from selectorctl.domain.selector import builder
from selectorctl.domain.serialization import from_json
from selectorctl.domain.shapes import Rectangle
from selectorctl.domain.types import Combinator, SelectorCategory
from selectorctl.services._helpers import normalize_parts
from selectorctl.services.base import BaseService
from selectorctl.services.result import ServiceResult
from selectorctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

PartInput = str | tuple[SelectorCategory | str, str]


class SelectorService(BaseService):
    """Service facade over :data:`selectorctl.domain.selector.builder`."""

    @traced
    def build(self, parts: Sequence[PartInput]) -> ServiceResult:
        """Build a compound selector from ordered parts."""
        op = "build"
        try:
            typed = normalize_parts(parts)
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_PART", str(exc))

        warnings: list[str] = []
        if not typed:
            warnings.append("No selector parts given; result is empty")

        try:
            with trace_span("apply_parts") as span:
                selector = builder.extend(typed)
                if span is not None:
                    span.annotate("parts", len(typed))
        except SelectorError as exc:
            return self._fail_on(op, exc)

        rendered = selector.render()
        logger.debug("Built %r from %d parts", rendered, len(typed))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "selector": rendered,
                "parts": len(typed),
                "document": compound_document(typed).model_dump(mode="json"),
            },
            warnings=warnings,
        )

    @traced
    def combine(
        self,
        left: Sequence[PartInput],
        combinator: Combinator | str | None,
        right: Sequence[PartInput],
    ) -> ServiceResult:
        """Build two compound selectors and join them.

        A missing *combinator* falls back to ``render.default_combinator``.
        """
        op = "combine"
        raw = combinator if combinator is not None else self.settings.render.default_combinator
        try:
            token = Combinator.parse(raw)
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_COMBINATOR", str(exc))

        try:
            left_parts = normalize_parts(left)
            right_parts = normalize_parts(right)
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_PART", str(exc))

        try:
            with trace_span("combine"):
                selector = builder.combine(
                    builder.extend(left_parts), token, builder.extend(right_parts)
                )
        except SelectorError as exc:
            return self._fail_on(op, exc)

        rendered = selector.render()
        logger.debug("Combined %r with %r", rendered, token.value)
        return ServiceResult(
            ok=True,
            op=op,
            data={"selector": rendered, "combinator": token.value},
        )

    @traced
    def render_document(self, text: str | bytes) -> ServiceResult:
        """Decode a JSON selector document and render it."""
        op = "render"
        try:
            with trace_span("decode"):
                document = from_json(DOCUMENT_ADAPTER, text, type_name="selector document")
        except SerializationError as exc:
            return ServiceResult.failure(op, "INVALID_DOCUMENT", str(exc))

        try:
            with trace_span("replay"):
                selector = document.to_builder()
        except SelectorError as exc:
            return self._fail_on(op, exc)

        rendered = selector.render()
        logger.debug("Rendered %s document as %r", document.kind, rendered)
        return ServiceResult(ok=True, op=op, data={"selector": rendered, "kind": document.kind})

    @traced
    def area(self, width: float, height: float) -> ServiceResult:
        """Compute the area of a width x height rectangle."""
        rect = Rectangle(width, height)
        return ServiceResult(
            ok=True,
            op="area",
            data={"width": rect.width, "height": rect.height, "area": rect.area},
        )
