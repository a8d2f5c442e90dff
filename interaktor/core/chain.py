"""HookChain: nests hooks around a core step.

For around hooks ``[x, y]``, before ``[a, b]`` and after ``[q, p]`` the
composed call is::

    try:
        x(proceed=lambda: y(proceed=lambda: (a(), b(), core(), q(), p())))
    finally:
        ensure hooks, in declared order

Each around hook receives the rest of the chain as a zero-argument
``proceed`` callable.  Not calling it skips everything nested inside.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from interaktor.config import settings
from interaktor.models.definition import HookSet
from interaktor.models.hooks import Hook

logger = logging.getLogger(__name__)

Step = Callable[[], Any]


class HookChain:
    """The executable chain for one interaktor instance.

    Ensure hooks are resolved when the chain is built. Every other hook is
    resolved at the start of ``run()``, inside its cleanup block, so a
    misspelled method name fails before any hook runs but the ensure hooks
    still do.

    Parameters
    ----------
    instance:
        The interaktor instance hooks are bound to.
    hooks:
        The frozen hook sequences of the instance's type.
    core:
        The terminal step, normally ``instance.perform``.
    """

    def __init__(self, instance: Any, hooks: HookSet, core: Step) -> None:
        self._instance = instance
        self._core = core
        self._hooks = hooks
        self._ensure = self._resolve(hooks.ensure)
        self._before: list[tuple[str, Callable[..., Any]]] = []
        self._after: list[tuple[str, Callable[..., Any]]] = []

    def _resolve(self, hooks: tuple[Hook, ...]) -> list[tuple[str, Callable[..., Any]]]:
        return [(hook.label(), hook.resolve(self._instance)) for hook in hooks]

    def _compose(self) -> Step:
        self._before = self._resolve(self._hooks.before)
        self._after = self._resolve(self._hooks.after)
        chain: Step = self._terminal
        for label, hook in reversed(self._resolve(self._hooks.around)):
            chain = self._wrap(label, hook, chain)
        return chain

    def _wrap(self, label: str, hook: Callable[..., Any], proceed: Step) -> Step:
        def step() -> None:
            self._trace("around", label)
            hook(proceed)

        return step

    def _terminal(self) -> None:
        for label, hook in self._before:
            self._trace("before", label)
            hook()
        self._core()
        for label, hook in self._after:
            self._trace("after", label)
            hook()

    def _trace(self, kind: str, label: str) -> None:
        if settings.trace_hooks:
            logger.debug(
                "%s: running %s hook %s", type(self._instance).__qualname__, kind, label
            )

    def run(self) -> None:
        """Run the chain, then every ensure hook no matter how it exited."""
        try:
            self._compose()()
        finally:
            for label, hook in self._ensure:
                self._trace("ensure", label)
                hook()


def execution_plan(hooks: HookSet, core: str = "perform") -> list[tuple[str, str]]:
    """Return ``(stage, label)`` pairs in the order a full run visits them.

    Around hooks are listed on entry only; their exits mirror them in
    reverse after the after hooks.
    """
    plan = [("around", hook.label()) for hook in hooks.around]
    plan += [("before", hook.label()) for hook in hooks.before]
    plan.append(("core", core))
    plan += [("after", hook.label()) for hook in hooks.after]
    plan += [("ensure", hook.label()) for hook in hooks.ensure]
    return plan
