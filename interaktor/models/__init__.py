"""Interaktor data models: all Pydantic v2, all frozen (immutable)."""

from interaktor.models.attributes import (
    AttributeSpec,
    DeclarationOptions,
    FailureOptions,
    OptionalOptions,
    RequiredOptions,
    Requiredness,
    SuccessOptions,
)
from interaktor.models.definition import HookSet, InteraktorDefinition
from interaktor.models.hooks import ClosureHook, Hook, HookKind, MethodHook, to_hook

__all__ = [
    # attributes
    "Requiredness",
    "AttributeSpec",
    "DeclarationOptions",
    "RequiredOptions",
    "OptionalOptions",
    "FailureOptions",
    "SuccessOptions",
    # hooks
    "HookKind",
    "MethodHook",
    "ClosureHook",
    "Hook",
    "to_hook",
    # definition
    "HookSet",
    "InteraktorDefinition",
]
