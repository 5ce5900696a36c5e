"""Exception hierarchy for ecwid_api.

All exceptions inherit from :class:`EcwidApiError` so callers can catch
every library failure with a single ``except`` clause.  Errors raised while
talking to the API carry the request ``method`` and ``url`` so that log
lines and tracebacks identify the failing call without extra bookkeeping.

Subclass hierarchy::

    EcwidApiError
    +-- ConfigurationError
    +-- TransportError
    +-- DecodeError
    +-- ApiError
        +-- AuthError       (401 / 403)
        +-- NotFoundError   (404)
        +-- ServerError     (5xx)
"""

from __future__ import annotations

from typing import Optional


class EcwidApiError(Exception):
    """Base exception for all ecwid_api errors."""


class ConfigurationError(EcwidApiError):
    """Raised for configuration problems (missing store id, secret keys, bad config files)."""


class RequestError(EcwidApiError):
    """Base for errors tied to a specific request.

    Args:
        message: Human-readable error description.
        method: HTTP method of the failing request.
        url: Fully resolved URL of the failing request.
    """

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class TransportError(RequestError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused)."""


class DecodeError(RequestError):
    """Raised when a response claims a JSON content type but the body is not valid JSON."""


class ApiError(RequestError):
    """Raised for HTTP error statuses by :meth:`~ecwid_api.client.response.ApiResponse.raise_for_status`.

    Args:
        message: Human-readable error description.
        status_code: The HTTP status code returned by the API.
        method: HTTP method of the failing request.
        url: Fully resolved URL of the failing request.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message, method=method, url=url)
        self.status_code = status_code


class AuthError(ApiError):
    """Raised when the API rejects the credentials (HTTP 401 / 403)."""


class NotFoundError(ApiError):
    """Raised when the API returns HTTP 404 (resource not found)."""


class ServerError(ApiError):
    """Raised when the API returns an HTTP 5xx server error."""
