"""Interaktor: service objects with declared inputs and lifecycle hooks.

An interaktor wraps one piece of business logic behind a uniform call
convention:
  - Inputs are declared as required or optional attributes (with defaults)
    and validated before the body runs
  - before / after / around / ensure hooks compose around ``perform()``
  - ``call`` returns a failed context, ``call_strict`` raises ``Failure``
"""

__version__ = "0.1.0"
__description__ = "Service objects with attribute contracts and lifecycle hooks"

from interaktor.base import Interaktor
from interaktor.core.context import Context
from interaktor.errors import (
    AttributeContractError,
    DefinitionFrozenError,
    DisallowedAttributeAssignmentError,
    Failure,
    InteraktorError,
    InvalidArgumentError,
    MissingAttributeError,
    UnknownAttributeError,
    UnknownOptionError,
)

__all__ = [
    "Interaktor",
    "Context",
    "InteraktorError",
    "AttributeContractError",
    "MissingAttributeError",
    "UnknownAttributeError",
    "DisallowedAttributeAssignmentError",
    "UnknownOptionError",
    "InvalidArgumentError",
    "DefinitionFrozenError",
    "Failure",
    "__version__",
]
