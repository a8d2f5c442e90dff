"""Shared mutable context threaded through one interaktor invocation.

A ``Context`` is a plain string-keyed mapping plus a success/failure
status.  ``fail()`` marks the context failed and raises ``Failure`` so the
body stops immediately; the execution engine decides whether that failure
is captured or re-raised.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from interaktor.errors import Failure


class Context(MutableMapping):
    """Mapping of attribute name to value, with an explicit outcome flag.

    Parameters
    ----------
    data:
        Initial attributes.  The mapping is copied.
    **attributes:
        Additional attributes merged over *data*.
    """

    def __init__(self, data: Mapping[str, Any] | None = None, **attributes: Any) -> None:
        self._data: dict[str, Any] = dict(data or {})
        self._data.update(attributes)
        self._failure = False

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the current attributes."""
        return dict(self._data)

    # ------------------------------------------------------------------
    # Outcome
    # ------------------------------------------------------------------

    @property
    def success(self) -> bool:
        return not self._failure

    @property
    def failure(self) -> bool:
        return self._failure

    def fail(self, **attributes: Any) -> None:
        """Merge *attributes*, mark the context failed and unwind the body.

        Raises
        ------
        Failure
            Always.  ``call`` captures it, ``call_strict`` propagates it.
        """
        self._data.update(attributes)
        self._failure = True
        raise Failure(self)

    def succeed(self, **attributes: Any) -> None:
        """Merge *attributes* and mark the context successful."""
        self._data.update(attributes)
        self._failure = False

    def __repr__(self) -> str:
        status = "failure" if self._failure else "success"
        return f"<Context {status} {self._data!r}>"
