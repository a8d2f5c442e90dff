"""Base class for interaktors: the definition DSL and the two entry points.

Subclasses implement ``perform()`` and declare their contract and hooks
with class methods right after the class statement::

    class PlaceOrder(Interaktor):
        def perform(self):
            if not self.items:
                self.context.fail(error="empty order")
            self.context["order_id"] = submit(self.customer, self.items)

        def _open_transaction(self, proceed):
            with db.transaction():
                proceed()

    PlaceOrder.required("customer", "items")
    PlaceOrder.optional("coupon", default="NONE")
    PlaceOrder.success("order_id")
    PlaceOrder.failure("error")
    PlaceOrder.around("_open_transaction")

    @PlaceOrder.ensure_hook
    def _audit(interaktor):
        audit_log.write(interaktor.context.to_dict())

    PlaceOrder.call({"customer": c, "items": items})         # never raises Failure
    PlaceOrder.call_strict({"customer": c, "items": items})  # raises Failure

Declarations are frozen by the first invocation.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from interaktor.core.context import Context
from interaktor.core.contract import (
    AttributeContract,
    optional_accessor,
    required_accessor,
)
from interaktor.core.engine import ExecutionEngine
from interaktor.core.registry import HookRegistry
from interaktor.models.definition import InteraktorDefinition
from interaktor.models.hooks import Hook, HookKind

logger = logging.getLogger(__name__)


def _decorator_result(hooks: tuple[Any, ...]) -> Any:
    # A lone callable is handed back so hook methods double as decorators.
    if len(hooks) == 1 and callable(hooks[0]) and not isinstance(hooks[0], str):
        return hooks[0]
    return None


class Interaktor:
    """A unit of business logic invoked through ``call`` / ``call_strict``.

    Instances are created by the execution engine, one per invocation, and
    hold the invocation's ``context``.

    A subclass copies its parent's contract and hooks when the subclass is
    created.  Declare on the parent first: attributes it declares later are
    not in an existing subclass's contract, even though the subclass
    inherits their accessors, so calling the subclass with them raises
    ``UnknownAttributeError``.
    """

    _contract: ClassVar[AttributeContract]
    _registry: ClassVar[HookRegistry]
    _definition: ClassVar[InteraktorDefinition | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        parent = next(
            (base for base in cls.__mro__[1:] if "_contract" in vars(base)), None
        )
        cls._contract = AttributeContract(cls, parent._contract if parent else None)
        cls._registry = HookRegistry(cls, parent._registry if parent else None)
        cls._definition = None

    def __init__(self, context: Context) -> None:
        self.context = context

    def perform(self) -> None:
        """The interaktor's business logic.  Subclasses override this."""

    def __repr__(self) -> str:
        return f"<{type(self).__qualname__} context={self.context!r}>"

    # ------------------------------------------------------------------
    # Attribute DSL
    # ------------------------------------------------------------------

    @classmethod
    def required(cls, *names: str, **options: Any) -> None:
        """Declare attributes the caller must supply."""
        cls._check_names(names)
        cls._contract.declare_required(*names, **options)
        for name in names:
            setattr(cls, name, required_accessor(name))

    @classmethod
    def optional(cls, *names: str, **options: Any) -> None:
        """Declare attributes the caller may supply.

        ``default=`` fills the attribute when it is missing or falsy.  The
        generated setter refuses to create a key absent from the context.
        """
        cls._check_names(names)
        cls._contract.declare_optional(*names, **options)
        for name in names:
            setattr(cls, name, optional_accessor(name))

    @classmethod
    def failure(cls, *names: str, **options: Any) -> None:
        """Document attributes set on the context when the body fails."""
        cls._contract.declare_failure(*names, **options)

    @classmethod
    def success(cls, *names: str, **options: Any) -> None:
        """Document attributes set on the context when the body succeeds."""
        cls._contract.declare_success(*names, **options)

    @classmethod
    def _check_names(cls, names: tuple[str, ...]) -> None:
        for name in names:
            if not isinstance(name, str) or not name.isidentifier():
                raise ValueError(f"{cls.__qualname__}: invalid attribute name {name!r}")
            if name in RESERVED_NAMES:
                raise ValueError(
                    f"{cls.__qualname__}: attribute {name!r} would shadow the "
                    "Interaktor API"
                )

    # ------------------------------------------------------------------
    # Hook DSL
    # ------------------------------------------------------------------

    @classmethod
    def before(cls, *hooks: Any) -> Any:
        """Run hooks before ``perform``, in declared order."""
        cls._registry.add_before(*hooks)
        return _decorator_result(hooks)

    @classmethod
    def after(cls, *hooks: Any) -> Any:
        """Run hooks after ``perform``; later calls run before earlier ones."""
        cls._registry.add_after(*hooks)
        return _decorator_result(hooks)

    @classmethod
    def around(cls, *hooks: Any) -> Any:
        """Wrap the rest of the chain; each hook receives a ``proceed`` callable."""
        cls._registry.add_around(*hooks)
        return _decorator_result(hooks)

    @classmethod
    def ensure_hook(cls, *hooks: Any) -> Any:
        """Run hooks last, however the chain exits."""
        cls._registry.add_ensure(*hooks)
        return _decorator_result(hooks)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @classmethod
    def required_attributes(cls) -> tuple[str, ...]:
        return cls._contract.required

    @classmethod
    def optional_attributes(cls) -> tuple[str, ...]:
        return cls._contract.optional

    @classmethod
    def optional_defaults(cls) -> dict[str, Any]:
        return dict(cls._contract.defaults)

    @classmethod
    def input_attributes(cls) -> tuple[str, ...]:
        return cls._contract.input_attributes

    @classmethod
    def failure_attributes(cls) -> tuple[str, ...]:
        return cls._contract.failure

    @classmethod
    def success_attributes(cls) -> tuple[str, ...]:
        return cls._contract.success

    @classmethod
    def before_hooks(cls) -> tuple[Hook, ...]:
        return cls._registry.hooks(HookKind.BEFORE)

    @classmethod
    def after_hooks(cls) -> tuple[Hook, ...]:
        return cls._registry.hooks(HookKind.AFTER)

    @classmethod
    def around_hooks(cls) -> tuple[Hook, ...]:
        return cls._registry.hooks(HookKind.AROUND)

    @classmethod
    def ensure_hooks(cls) -> tuple[Hook, ...]:
        return cls._registry.hooks(HookKind.ENSURE)

    @classmethod
    def definition(cls) -> InteraktorDefinition:
        """Freeze the declarations (once) and return their snapshot."""
        if cls._definition is None:
            hooks = cls._registry.freeze()
            cls._contract.freeze()
            cls._definition = InteraktorDefinition(
                name=cls.__qualname__,
                required=cls._contract.required,
                optional=cls._contract.optional,
                defaults=dict(cls._contract.defaults),
                failure=cls._contract.failure,
                success=cls._contract.success,
                hooks=hooks,
            )
            logger.debug("%s definition frozen", cls.__qualname__)
        return cls._definition

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    @classmethod
    def call(cls, context: Any = None) -> Context:
        """Invoke the interaktor.  Failures are returned, not raised."""
        return cls._execute(context, escalate=False)

    @classmethod
    def call_strict(cls, context: Any = None) -> Context:
        """Invoke the interaktor, raising ``Failure`` if the body fails."""
        return cls._execute(context, escalate=True)

    @classmethod
    def _execute(cls, context: Any, escalate: bool) -> Context:
        engine = ExecutionEngine(cls, cls._contract, cls.definition().hooks)
        return engine.execute(context, escalate)


Interaktor._contract = AttributeContract(Interaktor)
Interaktor._registry = HookRegistry(Interaktor)

RESERVED_NAMES: frozenset[str] = frozenset(dir(Interaktor)) | {"context"}
