"""Interaktor core: context, contract, hook registry, chain and engine."""

from interaktor.core.chain import HookChain, execution_plan
from interaktor.core.context import Context
from interaktor.core.contract import AttributeContract
from interaktor.core.engine import ExecutionEngine
from interaktor.core.registry import HookRegistry

__all__ = [
    "AttributeContract",
    "Context",
    "ExecutionEngine",
    "HookChain",
    "HookRegistry",
    "execution_plan",
]
