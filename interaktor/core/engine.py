"""ExecutionEngine: the one procedure behind ``call`` and ``call_strict``.

Lifecycle of an invocation:

    normalize input -> (mapping only) apply defaults, validate contract
        -> instantiate -> HookChain.run -> capture or escalate Failure

Contract and argument errors always raise.  A ``Failure`` signalled by the
invocation's own context is captured unless *escalate* is set.  Any other
exception propagates unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from interaktor.config import settings
from interaktor.core.chain import HookChain
from interaktor.core.context import Context
from interaktor.core.contract import AttributeContract
from interaktor.errors import Failure, InvalidArgumentError
from interaktor.models.definition import HookSet

logger = logging.getLogger(__name__)


class ExecutionEngine:
    """Runs one interaktor type.

    Parameters
    ----------
    interaktor_cls:
        The interaktor class to instantiate.  It must accept the context
        as its only constructor argument and expose ``perform()``.
    contract:
        The type's attribute contract, applied to mapping input.
    hooks:
        The type's frozen hook sequences.
    """

    def __init__(
        self,
        interaktor_cls: type,
        contract: AttributeContract,
        hooks: HookSet,
    ) -> None:
        self._cls = interaktor_cls
        self._contract = contract
        self._hooks = hooks

    def execute(self, context: Any, escalate: bool) -> Context:
        """Invoke the interaktor and return its context.

        Parameters
        ----------
        context:
            A mapping of input attributes, an existing ``Context`` (used
            as-is, without validation) or ``None`` for no input.
        escalate:
            Re-raise a captured ``Failure`` instead of returning the
            failed context.

        Raises
        ------
        MissingAttributeError, UnknownAttributeError
            Mapping input violates the contract.
        InvalidArgumentError
            *context* is neither a mapping nor a ``Context``.
        Failure
            Only when *escalate* is set and the body failed the context.
        """
        ctx = self._build_context(context)
        instance = self._cls(ctx)
        name = self._cls.__qualname__

        try:
            HookChain(instance, self._hooks, instance.perform).run()
        except Failure as failure:
            if failure.context is not ctx:
                raise
            if failure.interaktor is None:
                failure.interaktor = self._cls
            if settings.log_failures:
                logger.info("%s failed: %s", name, ctx.to_dict())
            if escalate:
                raise
            return ctx

        logger.info("%s finished (%s)", name, "failure" if ctx.failure else "success")
        return ctx

    def _build_context(self, context: Any) -> Context:
        if context is None:
            context = {}

        # Context is itself a Mapping, so it must be checked first.
        if isinstance(context, Context):
            return context

        if isinstance(context, Mapping):
            data = dict(context)
            self._contract.apply_defaults(data)
            self._contract.validate(data)
            return Context(data)

        raise InvalidArgumentError(self._cls, context)
