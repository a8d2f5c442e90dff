"""HookRegistry: ordered before/after/around/ensure hooks of one type.

Ordering rules:

* ``before``, ``around`` and ``ensure`` append in declaration order.
* ``after`` inserts each call's group at the *front*, so the most recent
  ``after(...)`` call runs first, while hooks listed together in one call
  keep their listed order.
"""

from __future__ import annotations

import logging
from typing import Any

from interaktor.errors import DefinitionFrozenError
from interaktor.models.definition import HookSet
from interaktor.models.hooks import Hook, HookKind, to_hook

logger = logging.getLogger(__name__)


class HookRegistry:
    """Per-type hook sequences, frozen before the first invocation.

    Parameters
    ----------
    owner:
        The interaktor class the hooks belong to.
    parent:
        Registry to start from; subclasses inherit their parent's hooks.
    """

    def __init__(self, owner: Any, parent: HookRegistry | None = None) -> None:
        self._owner = owner
        self._hooks: dict[HookKind, list[Hook]] = {
            kind: list(parent.hooks(kind)) if parent else [] for kind in HookKind
        }
        self._frozen = False

    def add_before(self, *hooks: Any) -> None:
        self._append(HookKind.BEFORE, hooks)

    def add_around(self, *hooks: Any) -> None:
        self._append(HookKind.AROUND, hooks)

    def add_ensure(self, *hooks: Any) -> None:
        self._append(HookKind.ENSURE, hooks)

    def add_after(self, *hooks: Any) -> None:
        group = self._coerce(hooks)
        self._check_open()
        self._hooks[HookKind.AFTER][:0] = group
        logger.debug("%s: %d after hook(s) prepended", self._owner_name, len(group))

    def _append(self, kind: HookKind, hooks: tuple[Any, ...]) -> None:
        group = self._coerce(hooks)
        self._check_open()
        self._hooks[kind].extend(group)
        logger.debug("%s: %d %s hook(s) appended", self._owner_name, len(group), kind.value)

    @staticmethod
    def _coerce(hooks: tuple[Any, ...]) -> list[Hook]:
        return [to_hook(hook) for hook in hooks]

    def _check_open(self) -> None:
        if self._frozen:
            raise DefinitionFrozenError(
                f"{self._owner_name} has already been invoked; "
                "its hooks can no longer change"
            )

    @property
    def _owner_name(self) -> str:
        return getattr(self._owner, "__qualname__", str(self._owner))

    def hooks(self, kind: HookKind) -> tuple[Hook, ...]:
        """Return the hooks of *kind* in execution order."""
        return tuple(self._hooks[kind])

    def freeze(self) -> HookSet:
        """Stop accepting hooks and return the immutable ``HookSet``."""
        self._frozen = True
        return HookSet(
            before=self.hooks(HookKind.BEFORE),
            after=self.hooks(HookKind.AFTER),
            around=self.hooks(HookKind.AROUND),
            ensure=self.hooks(HookKind.ENSURE),
        )

    @property
    def frozen(self) -> bool:
        return self._frozen
