"""Attribute declaration models: specs and the per-DSL-call option structs."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


def is_blank(value: Any) -> bool:
    """True for the values a default stands in for: ``None`` and ``False``.

    ``0``, ``""`` and empty containers are real values and are kept.
    """
    return value is None or value is False


class Requiredness(str, Enum):
    """Whether an input attribute must be supplied by the caller."""

    REQUIRED = "required"
    OPTIONAL = "optional"


class AttributeSpec(BaseModel):
    """One declared input attribute.

    ``has_default`` distinguishes "no default" from a falsy default such as
    ``0``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    requiredness: Requiredness
    default: Any = None
    has_default: bool = False


# ---------------------------------------------------------------------------
# Declaration options, one enumerated struct per DSL call.
# Unknown keywords are rejected by ``extra="forbid"``.
# ---------------------------------------------------------------------------


class DeclarationOptions(BaseModel):
    """Base for option structs; accepts no keywords of its own."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class RequiredOptions(DeclarationOptions):
    """Options accepted by ``required(...)``."""


class OptionalOptions(DeclarationOptions):
    """Options accepted by ``optional(...)``."""

    default: Any = None

    @property
    def has_default(self) -> bool:
        # default=None / default=False declare nothing.
        return "default" in self.model_fields_set and not is_blank(self.default)


class FailureOptions(DeclarationOptions):
    """Options accepted by ``failure(...)``."""


class SuccessOptions(DeclarationOptions):
    """Options accepted by ``success(...)``."""
