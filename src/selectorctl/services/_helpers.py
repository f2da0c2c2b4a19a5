"""Shared service-layer helper functions."""

from __future__ import annotations

from collections.abc import Iterable

from selectorctl.domain.types import SelectorCategory

PART_SEPARATOR = "="


def parse_part(raw: str) -> tuple[SelectorCategory, str]:
    """Split a ``category=value`` token into its category and value.

    Only the first ``=`` separates, so attribute values keep theirs.

    Examples:
        >>> parse_part("element=a")
        (<SelectorCategory.ELEMENT: 'element'>, 'a')
        >>> parse_part('attr=href$=".png"')
        (<SelectorCategory.ATTRIBUTE: 'attribute'>, 'href$=".png"')

    Raises:
        ValueError: If the separator is missing or the category is unknown.
    """
    name, sep, value = raw.partition(PART_SEPARATOR)
    if not sep or not name.strip():
        msg = f"Invalid selector part {raw!r}: expected 'category=value'"
        raise ValueError(msg)
    return SelectorCategory.parse(name), value


def normalize_parts(
    parts: Iterable[str | tuple[SelectorCategory | str, str]],
) -> list[tuple[SelectorCategory, str]]:
    """Accept ``category=value`` strings or pairs; return typed pairs."""
    normalized: list[tuple[SelectorCategory, str]] = []
    for part in parts:
        if isinstance(part, str):
            normalized.append(parse_part(part))
        else:
            category, value = part
            if not isinstance(category, SelectorCategory):
                category = SelectorCategory.parse(category)
            normalized.append((category, value))
    return normalized
