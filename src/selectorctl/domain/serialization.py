"""Generic JSON encode/decode helpers.

``from_json`` rebuilds a typed object from a *prototype* (any type
pydantic can validate: models, dataclasses, ``list[int]``, ...) and
raw JSON text.  ``to_json`` is its inverse.  Both go through a pydantic
``TypeAdapter`` for the type involved.
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from selectorctl.domain.errors import SerializationError


def _type_name(prototype: Any) -> str:
    return getattr(prototype, "__name__", None) or repr(prototype)


def to_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Pydantic models and dataclasses serialise their fields; builtins
    serialise as ``json.dumps`` would, without spaces.
    """
    return TypeAdapter(type(obj)).dump_json(obj).decode("utf-8")


def from_json(prototype: Any, text: str | bytes, *, type_name: str | None = None) -> Any:
    """Decode *text* into an instance of *prototype*.

    *prototype* may also be a ready-made ``TypeAdapter``; pass *type_name*
    to label it in error messages.

    Raises:
        SerializationError: If *text* is not valid JSON or does not fit
            the shape of *prototype*.
    """
    adapter = prototype if isinstance(prototype, TypeAdapter) else TypeAdapter(prototype)
    try:
        return adapter.validate_json(text)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        detail = errors[0]["msg"] if errors else str(exc)
        raise SerializationError(type_name or _type_name(prototype), detail) from exc
