"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``selectorctl.toml`` only
contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from selectorctl.domain.types import Combinator


class RenderConfig(BaseModel):
    """[render] section."""

    model_config = {"frozen": True}

    default_combinator: str = Combinator.DESCENDANT.value

    @field_validator("default_combinator")
    @classmethod
    def _known_combinator(cls, value: str) -> str:
        return Combinator.parse(value).value


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    json_indent: int = Field(default=2, ge=0)
