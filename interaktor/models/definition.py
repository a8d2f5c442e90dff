"""Frozen snapshot of one interaktor type's declarations."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from interaktor.models.attributes import AttributeSpec, Requiredness
from interaktor.models.hooks import Hook


class HookSet(BaseModel):
    """The four hook sequences, each already in execution order."""

    model_config = ConfigDict(frozen=True)

    before: tuple[Hook, ...] = ()
    after: tuple[Hook, ...] = ()
    around: tuple[Hook, ...] = ()
    ensure: tuple[Hook, ...] = ()


class InteraktorDefinition(BaseModel):
    """Immutable contract and hooks of an interaktor type.

    Built once, the first time the type is invoked or described.  No
    declaration made afterwards is accepted.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    required: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()
    defaults: dict[str, Any] = Field(default_factory=dict)
    failure: tuple[str, ...] = ()
    success: tuple[str, ...] = ()
    hooks: HookSet = HookSet()

    @property
    def input_attributes(self) -> tuple[str, ...]:
        return self.required + self.optional

    def attribute_specs(self) -> list[AttributeSpec]:
        """Return one ``AttributeSpec`` per declared input attribute."""
        specs = [
            AttributeSpec(name=name, requiredness=Requiredness.REQUIRED)
            for name in self.required
        ]
        for name in self.optional:
            specs.append(
                AttributeSpec(
                    name=name,
                    requiredness=Requiredness.OPTIONAL,
                    default=self.defaults.get(name),
                    has_default=name in self.defaults,
                )
            )
        return specs
