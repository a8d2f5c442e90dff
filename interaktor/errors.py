"""Exception hierarchy for interaktor definition and invocation.

Contract and argument errors are programmer errors: they are raised from
both ``call`` and ``call_strict`` and are never captured in a context.
``Failure`` is the only outcome whose propagation depends on the entry
point.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from interaktor.core.context import Context


def type_name(interaktor: Any) -> str:
    """Return a readable name for an interaktor class (or a plain string)."""
    if interaktor is None:
        return "<unknown interaktor>"
    if isinstance(interaktor, str):
        return interaktor
    return getattr(interaktor, "__qualname__", None) or repr(interaktor)


class InteraktorError(Exception):
    """Base class for every error raised by this package."""


class AttributeContractError(InteraktorError, ValueError):
    """An input context does not match the declared attribute contract.

    Parameters
    ----------
    interaktor:
        The interaktor class whose contract was violated.
    attributes:
        The offending attribute names, in the order they were found.
    """

    description = "attribute contract violated"

    def __init__(self, interaktor: Any, attributes: Iterable[str]) -> None:
        self.interaktor = interaktor
        self.attributes = list(attributes)
        super().__init__(
            f"{type_name(interaktor)}: {self.description}: "
            + ", ".join(str(a) for a in self.attributes)
        )


class MissingAttributeError(AttributeContractError):
    """Raised when required attributes are absent from the input."""

    description = "missing required attributes"


class UnknownAttributeError(AttributeContractError):
    """Raised when the input carries attributes that were never declared."""

    description = "unknown attributes"


class DisallowedAttributeAssignmentError(AttributeContractError):
    """Raised when an optional attribute setter would create a new key."""

    description = "cannot assign optional attributes absent from the context"


class UnknownOptionError(InteraktorError, ValueError):
    """Raised at declaration time for unrecognized DSL option keywords."""

    def __init__(self, interaktor: Any, options: dict[str, Any]) -> None:
        self.interaktor = interaktor
        self.options = dict(options)
        super().__init__(
            f"{type_name(interaktor)}: unknown options: "
            + ", ".join(f"{k}={v!r}" for k, v in self.options.items())
        )


class InvalidArgumentError(InteraktorError, TypeError):
    """Raised when an interaktor is called with neither a mapping nor a Context."""

    def __init__(self, interaktor: Any, value: Any) -> None:
        self.interaktor = interaktor
        self.value = value
        super().__init__(
            f"{type_name(interaktor)}: expected a mapping or Context when "
            f"calling the interaktor, got a {type(value).__name__} instead"
        )


class DefinitionFrozenError(InteraktorError, RuntimeError):
    """Raised when declarations are added after the definition was frozen."""


class Failure(InteraktorError, RuntimeError):
    """Explicit, non-exceptional failure signalled through ``Context.fail``.

    ``call`` captures it and returns the failed context; ``call_strict``
    lets it propagate to the caller.
    """

    def __init__(self, context: Context, interaktor: Any = None) -> None:
        self.context = context
        self.interaktor = interaktor
        super().__init__(context)

    def __str__(self) -> str:
        return f"{type_name(self.interaktor)} failed: {self.context!r}"
