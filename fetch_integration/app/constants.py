"""Fetch-level constants shared across modules."""
from __future__ import annotations

HTTP_METHODS = frozenset(
    {"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"}
)

JSON_CONTENT_TYPE = "application/json"
CONTENT_TYPE_HEADER = "Content-Type"
HEADER_VALUE_SEPARATOR = ", "

# Status reported when a transport failure carries no response.
DEFAULT_TRANSPORT_ERROR_STATUS = 500
DEFAULT_LOGICAL_ERROR_STATUS = 400


class FETCH_BACKEND:
    HTTPX = "httpx"
