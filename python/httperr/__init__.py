"""Public exports for httperr."""

from .client import HttpClient
from .config import ClientConfig
from .errors import (
    HasPayload,
    StructuredError,
    find_payload,
    format_chain,
    iter_chain,
    payload_of,
    root_cause,
)
from .middleware import annotate, annotating, log_failures
from .models import ResponseFailure, TransportFailure

__all__ = [
    "ClientConfig",
    "HasPayload",
    "HttpClient",
    "ResponseFailure",
    "StructuredError",
    "TransportFailure",
    "annotate",
    "annotating",
    "find_payload",
    "format_chain",
    "iter_chain",
    "log_failures",
    "payload_of",
    "root_cause",
]
