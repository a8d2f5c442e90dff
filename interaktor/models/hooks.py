"""Hook models: a closed variant of method-name and closure hooks.

A ``MethodHook`` names a method looked up on the interaktor instance when
the chain is built; leading-underscore and name-mangled methods resolve
too.  A ``ClosureHook`` wraps a plain function that receives the instance
as its first argument.
"""

from __future__ import annotations

import functools
from enum import Enum
from typing import Any, Callable, Union

from pydantic import BaseModel, ConfigDict


class HookKind(str, Enum):
    """Lifecycle point a hook is attached to."""

    BEFORE = "before"
    AFTER = "after"
    AROUND = "around"
    ENSURE = "ensure"


class MethodHook(BaseModel):
    """A hook referring to an instance method by name."""

    model_config = ConfigDict(frozen=True)

    name: str

    def resolve(self, instance: Any) -> Callable[..., Any]:
        """Return the bound method on *instance*, regardless of visibility."""
        try:
            return getattr(instance, self.name)
        except AttributeError:
            pass

        # __private names are stored mangled per defining class
        if self.name.startswith("__") and not self.name.endswith("__"):
            for klass in type(instance).__mro__:
                mangled = f"_{klass.__name__.lstrip('_')}{self.name}"
                if hasattr(instance, mangled):
                    return getattr(instance, mangled)

        raise AttributeError(
            f"{type(instance).__qualname__} has no hook method {self.name!r}"
        )

    def label(self) -> str:
        return self.name


class ClosureHook(BaseModel):
    """A hook wrapping a function called with the instance as receiver."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    fn: Callable[..., Any]

    def resolve(self, instance: Any) -> Callable[..., Any]:
        return functools.partial(self.fn, instance)

    def label(self) -> str:
        name = getattr(self.fn, "__qualname__", None) or repr(self.fn)
        return f"<{name}>"


Hook = Union[MethodHook, ClosureHook]


def to_hook(value: Any) -> Hook:
    """Coerce a DSL argument (method name, callable or Hook) into a Hook."""
    if isinstance(value, (MethodHook, ClosureHook)):
        return value
    if isinstance(value, str):
        return MethodHook(name=value)
    if callable(value):
        return ClosureHook(fn=value)
    raise TypeError(
        f"Hooks must be method names or callables, got a {type(value).__name__}"
    )
