from __future__ import annotations

"""Configuration helpers for the httperr client."""

from dataclasses import dataclass, field
from typing import FrozenSet
from urllib.parse import urljoin, urlparse

DEFAULT_HTTP_TIMEOUT = 30.0
UNEXCEPTIONAL_STATUSES = frozenset(
    {200, 201, 202, 203, 204, 205, 206, 207, 300, 301, 302, 303, 304, 307, 308}
)


def _normalise_base(url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"invalid base URL: {url}")
    if not url.endswith("/"):
        return url + "/"
    return url


@dataclass(slots=True)
class ClientConfig:
    """Holds the settings the client needs to issue requests and report failures."""

    base_url: str
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    throw_exceptions: bool = True
    unexceptional_statuses: FrozenSet[int] = field(default=UNEXCEPTIONAL_STATUSES)

    def __post_init__(self) -> None:
        self.base_url = _normalise_base(self.base_url.strip())
        if self.http_timeout <= 0:
            raise ValueError("http_timeout must be > 0")
        statuses = frozenset(self.unexceptional_statuses)
        if any(status < 100 or status > 599 for status in statuses):
            raise ValueError("unexceptional_statuses must be HTTP status codes")
        self.unexceptional_statuses = statuses

    def api_url(self, path: str) -> str:
        """Resolve an absolute URL for the provided path."""
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return urljoin(self.base_url, path.lstrip("/"))

    def is_unexceptional(self, status: int) -> bool:
        return status in self.unexceptional_statuses

    @classmethod
    def from_env(
        cls,
        *,
        base_url_env: str = "HTTPERR_BASE_URL",
        timeout_env: str = "HTTPERR_HTTP_TIMEOUT",
    ) -> "ClientConfig":
        """Build a configuration from environment variables."""
        import os

        base_url = os.environ.get(base_url_env)
        if not base_url:
            raise ValueError(f"missing environment variables: {base_url_env}")
        timeout = os.environ.get(timeout_env)
        if timeout is None:
            return cls(base_url=base_url)
        try:
            http_timeout = float(timeout)
        except ValueError as exc:
            raise ValueError(f"invalid {timeout_env}: {timeout}") from exc
        return cls(base_url=base_url, http_timeout=http_timeout)
