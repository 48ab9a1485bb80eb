from __future__ import annotations

"""Pydantic payload shapes raised by the HTTP client."""

from typing import Dict

from pydantic import BaseModel, Field

RETRYABLE_STATUSES = frozenset({502, 503, 504})


class ResponseFailure(BaseModel):
    """Facts about a response whose status the client treats as a failure."""

    method: str
    url: str
    status: int
    headers: Dict[str, str] = Field(default_factory=dict)
    body: str = ""
    request_time: float = 0.0

    model_config = {
        "frozen": True,
    }

    @property
    def is_retryable(self) -> bool:
        return self.status in RETRYABLE_STATUSES


class TransportFailure(BaseModel):
    """Facts about a request that never produced a response."""

    method: str
    url: str
    reason: str
    request_time: float = 0.0

    model_config = {
        "frozen": True,
    }


__all__ = ["RETRYABLE_STATUSES", "ResponseFailure", "TransportFailure"]
