"""BaseService — shared foundation for selectorctl services.

Every service receives the resolved settings at construction time.
Services never raise domain errors to their callers; they translate
them into failed ServiceResult values via :meth:`_fail_on`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from selectorctl.domain.errors import OrderError, SelectorError
from selectorctl.services.result import ServiceResult

if TYPE_CHECKING:
    from selectorctl.config.settings import SelectorSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class SelectorService(BaseService):
            def build(self, parts) -> ServiceResult:
                try:
                    ...
                except SelectorError as exc:
                    return self._fail_on("build", exc)
    """

    def __init__(self, settings: SelectorSettings | None = None) -> None:
        if settings is None:
            from selectorctl.config.settings import SelectorSettings

            settings = SelectorSettings()
        self._settings = settings

    @property
    def settings(self) -> SelectorSettings:
        return self._settings

    def _fail_on(self, op: str, exc: SelectorError) -> ServiceResult:
        """Convert a builder error into a failed result."""
        detail: dict[str, str | int] = {}
        category = getattr(exc, "category", None)
        if category is not None:
            detail["category"] = str(category)
            detail["rank"] = category.rank
        if isinstance(exc, OrderError):
            detail["conflict"] = str(exc.conflict)
            detail["conflict_rank"] = exc.conflict.rank
        logger.debug("%s rejected: %s (%s)", op, exc.code, detail)
        return ServiceResult.failure(op, exc.code, str(exc), **detail)
