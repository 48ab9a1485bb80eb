from __future__ import annotations

"""Middleware helpers that pass structured errors up without losing them."""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

import httpx

from .client import Handler, Middleware
from .errors import StructuredError, format_chain


@contextmanager
def annotate(message: str, payload: Any = None) -> Iterator[None]:
    """Re-raise any StructuredError in the block wrapped with ``message``.

    Works inside coroutines too since nothing in it awaits.
    """
    try:
        yield
    except StructuredError as exc:
        raise exc.wrap(message, payload) from exc


def annotating(message: str, payload: Any = None) -> Middleware:
    """Middleware that wraps downstream failures using :func:`annotate`."""

    async def middleware(request: httpx.Request, call_next: Handler) -> httpx.Response:
        with annotate(message, payload):
            return await call_next(request)

    return middleware


def log_failures(logger: logging.Logger, level: int = logging.ERROR) -> Middleware:
    """Middleware that logs failures and re-raises the same instance."""

    async def middleware(request: httpx.Request, call_next: Handler) -> httpx.Response:
        try:
            return await call_next(request)
        except StructuredError as exc:
            logger.log(level, "%s %s: %s", request.method, request.url, format_chain(exc))
            raise

    return middleware


__all__ = ["annotate", "annotating", "log_failures"]
