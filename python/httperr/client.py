from __future__ import annotations

"""Asynchronous HTTP client that reports failures as structured errors."""

import logging
import time
from functools import partial
from typing import Any, Awaitable, Callable, Optional, Sequence

import httpx

from .config import ClientConfig
from .errors import StructuredError, format_chain
from .models import ResponseFailure, TransportFailure

Handler = Callable[[httpx.Request], Awaitable[httpx.Response]]
Middleware = Callable[[httpx.Request, Handler], Awaitable[httpx.Response]]

logger = logging.getLogger(__name__)


def response_error(response: httpx.Response, request_time: float) -> StructuredError:
    """Build the error raised for a response with an exceptional status."""
    request = response.request
    failure = ResponseFailure(
        method=request.method,
        url=str(request.url),
        status=response.status_code,
        headers=dict(response.headers),
        body=response.text,
        request_time=request_time,
    )
    return StructuredError(
        f"{request.method} {request.url} failed: {response.status_code}", failure
    )


def transport_error(
    request: httpx.Request, exc: httpx.HTTPError, request_time: float
) -> StructuredError:
    """Translate an httpx transport failure, keeping it as the cause."""
    failure = TransportFailure(
        method=request.method,
        url=str(request.url),
        reason=str(exc) or type(exc).__name__,
        request_time=request_time,
    )
    return StructuredError(
        f"failed to perform {request.method} {request.url}", failure, cause=exc
    )


class HttpClient:
    """Thin wrapper over httpx that raises StructuredError for failed requests."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        client: Optional[httpx.AsyncClient] = None,
        middleware: Sequence[Middleware] = (),
    ) -> None:
        """Initialise the client with an optional custom httpx client and middleware."""
        self._config = config
        self._client = client or httpx.AsyncClient(timeout=config.http_timeout)
        self._owns_client = client is None
        self._middleware = tuple(middleware)

    async def aclose(self) -> None:
        """Close the underlying HTTP client when this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", path, **kwargs)

    async def request(
        self,
        method: str,
        path: str,
        *,
        throw_exceptions: Optional[bool] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Issue a request through the middleware chain.

        Extra keyword arguments are handed to ``httpx.AsyncClient.build_request``.
        ``throw_exceptions`` overrides the configured behaviour for this call.
        """
        throw = self._config.throw_exceptions if throw_exceptions is None else throw_exceptions
        request = self._client.build_request(method, self._config.api_url(path), **kwargs)
        handler: Handler = partial(self._send, throw=throw)
        for middleware in reversed(self._middleware):
            handler = partial(middleware, call_next=handler)

        try:
            return await handler(request)
        except StructuredError as exc:
            logger.warning("request failed: %s", format_chain(exc))
            raise

    async def _send(self, request: httpx.Request, *, throw: bool) -> httpx.Response:
        logger.debug("sending %s %s", request.method, request.url)
        started = time.perf_counter()
        try:
            response = await self._client.send(request)
        except httpx.HTTPError as exc:
            raise transport_error(request, exc, time.perf_counter() - started) from exc
        elapsed = time.perf_counter() - started

        if throw and not self._config.is_unexceptional(response.status_code):
            raise response_error(response, elapsed)
        return response


__all__ = ["Handler", "HttpClient", "Middleware", "response_error", "transport_error"]
