"""AttributeContract: declared input attributes, defaults and validation.

Declarations accumulate while the owning type is being defined; the first
invocation freezes them.  Validation order is fixed:

    apply_defaults -> missing required check -> unknown attribute check
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from interaktor.errors import (
    DefinitionFrozenError,
    DisallowedAttributeAssignmentError,
    MissingAttributeError,
    UnknownAttributeError,
    UnknownOptionError,
)
from interaktor.models.attributes import (
    DeclarationOptions,
    FailureOptions,
    OptionalOptions,
    RequiredOptions,
    SuccessOptions,
    is_blank,
)

logger = logging.getLogger(__name__)


class AttributeContract:
    """Required/optional input attributes of one interaktor type.

    Parameters
    ----------
    owner:
        The interaktor class the contract belongs to.  Used in error
        messages only.
    parent:
        Contract to start from; subclasses inherit their parent's
        declarations.
    """

    def __init__(self, owner: Any, parent: AttributeContract | None = None) -> None:
        self._owner = owner
        self._required: list[str] = list(parent.required) if parent else []
        self._optional: list[str] = list(parent.optional) if parent else []
        self._defaults: dict[str, Any] = dict(parent.defaults) if parent else {}
        self._failure: list[str] = list(parent.failure) if parent else []
        self._success: list[str] = list(parent.success) if parent else []
        self._frozen = False

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def declare_required(self, *names: str, **options: Any) -> None:
        self._parse_options(RequiredOptions, options)
        self._check_open()
        self._required.extend(names)

    def declare_optional(self, *names: str, **options: Any) -> None:
        """Declare optional attributes, recording ``default`` if supplied.

        ``default=None`` and ``default=False`` record nothing.
        """
        parsed = self._parse_options(OptionalOptions, options)
        self._check_open()
        self._optional.extend(names)
        if parsed.has_default:
            for name in names:
                self._defaults[name] = parsed.default

    def declare_failure(self, *names: str, **options: Any) -> None:
        self._parse_options(FailureOptions, options)
        self._check_open()
        self._failure.extend(names)

    def declare_success(self, *names: str, **options: Any) -> None:
        self._parse_options(SuccessOptions, options)
        self._check_open()
        self._success.extend(names)

    def _parse_options(
        self, model: type[DeclarationOptions], options: dict[str, Any]
    ) -> DeclarationOptions:
        try:
            return model(**options)
        except ValidationError as exc:
            unknown = [
                err["loc"][0] for err in exc.errors() if err["type"] == "extra_forbidden"
            ]
            if unknown:
                raise UnknownOptionError(
                    self._owner, {key: options[key] for key in unknown}
                ) from exc
            raise

    def _check_open(self) -> None:
        if self._frozen:
            raise DefinitionFrozenError(
                f"{getattr(self._owner, '__qualname__', self._owner)} has already "
                "been invoked; its attributes can no longer change"
            )

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def required(self) -> tuple[str, ...]:
        return tuple(self._required)

    @property
    def optional(self) -> tuple[str, ...]:
        return tuple(self._optional)

    @property
    def defaults(self) -> Mapping[str, Any]:
        return MappingProxyType(self._defaults)

    @property
    def failure(self) -> tuple[str, ...]:
        return tuple(self._failure)

    @property
    def success(self) -> tuple[str, ...]:
        return tuple(self._success)

    @property
    def input_attributes(self) -> tuple[str, ...]:
        return tuple(self._required + self._optional)

    # ------------------------------------------------------------------
    # Input handling
    # ------------------------------------------------------------------

    def apply_defaults(self, data: MutableMapping[str, Any]) -> None:
        """Fill absent, ``None`` or ``False`` optional attributes with their default.

        Other falsy values (``0``, ``""``, empty containers) are kept.
        """
        for name, default in self._defaults.items():
            if is_blank(data.get(name)):
                data[name] = default

    def validate(self, data: Mapping[str, Any]) -> None:
        """Check *data* against the contract.

        Raises
        ------
        MissingAttributeError
            If any required attribute is absent.  Checked first.
        UnknownAttributeError
            If *data* carries keys outside required and optional.
        """
        missing = [name for name in self._required if name not in data]
        if missing:
            raise MissingAttributeError(self._owner, missing)

        allowed = set(self._required) | set(self._optional)
        extra = [key for key in data if key not in allowed]
        if extra:
            raise UnknownAttributeError(self._owner, extra)

        logger.debug(
            "%s contract satisfied by %s",
            getattr(self._owner, "__qualname__", self._owner),
            sorted(map(str, data)),
        )


# ---------------------------------------------------------------------------
# Accessors installed on the interaktor class for each declared attribute
# ---------------------------------------------------------------------------


def required_accessor(name: str) -> property:
    """Property proxying reads and writes of *name* to the instance context."""

    def getter(self: Any) -> Any:
        return self.context.get(name)

    def setter(self: Any, value: Any) -> None:
        self.context[name] = value

    return property(getter, setter, doc=f"Required attribute {name!r}.")


def optional_accessor(name: str) -> property:
    """Like ``required_accessor``, but the setter never creates a new key."""

    def getter(self: Any) -> Any:
        return self.context.get(name)

    def setter(self: Any, value: Any) -> None:
        if name not in self.context:
            raise DisallowedAttributeAssignmentError(type(self), [name])
        self.context[name] = value

    return property(getter, setter, doc=f"Optional attribute {name!r}.")
