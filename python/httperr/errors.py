from __future__ import annotations

"""Structured errors: a message for humans plus a payload for programs."""

from typing import Any, Callable, Iterator, Optional, Protocol, runtime_checkable


@runtime_checkable
class HasPayload(Protocol):
    """Anything exposing a display message and an inspectable payload."""

    @property
    def message(self) -> str: ...

    @property
    def payload(self) -> Any: ...


class StructuredError(Exception):
    """Failure carrying a message, an opaque payload and an optional cause.

    The payload is kept by reference. Nothing here copies, validates or
    inspects it; its shape belongs to whichever component raised the error.
    """

    def __init__(
        self,
        message: str,
        payload: Any = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._payload = payload
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def message(self) -> str:
        return self._message

    @property
    def payload(self) -> Any:
        return self._payload

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    def wrap(self, message: str, payload: Any = None) -> "StructuredError":
        """Return a new error that carries this one as its cause."""
        return StructuredError(message, payload, cause=self)

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message!r}, payload={self._payload!r})"

    def __reduce__(self):
        state = {
            key: value
            for key, value in self.__dict__.items()
            if key not in ("_message", "_payload", "_cause")
        }
        if self.__cause__ is not None and self._cause is None:
            state["__cause__"] = self.__cause__
        return type(self), (self._message, self._payload, self._cause), state or None


def payload_of(exc: BaseException, default: Any = None) -> Any:
    """Return the payload attached to ``exc`` or ``default`` when it has none."""
    if isinstance(exc, HasPayload):
        return exc.payload
    return default


def iter_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield ``exc`` followed by each error it wraps, outermost first."""
    seen: set[int] = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if isinstance(current, StructuredError) and current.cause is not None:
            current = current.cause
        else:
            current = current.__cause__


def root_cause(exc: BaseException) -> BaseException:
    """Return the innermost error reachable from ``exc``."""
    last = exc
    for last in iter_chain(exc):
        pass
    return last


def find_payload(exc: BaseException, predicate: Callable[[Any], bool]) -> Any:
    """Return the first payload in the chain matching ``predicate``."""
    for item in iter_chain(exc):
        if isinstance(item, HasPayload) and predicate(item.payload):
            return item.payload
    return None


def format_chain(exc: BaseException) -> str:
    """Join every message in the chain, suitable for a single log line."""
    return ": ".join(str(item) or type(item).__name__ for item in iter_chain(exc))


__all__ = [
    "HasPayload",
    "StructuredError",
    "find_payload",
    "format_chain",
    "iter_chain",
    "payload_of",
    "root_cause",
]
