"""Typed error hierarchy: local input failures and classified API errors."""

from __future__ import annotations

import copy
from typing import Any

_DEFAULT_MESSAGE = "Received an error without a message"


class MollieError(Exception):
    """Base exception for all Mollie client errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(MollieError):
    """Raised locally, before any request, for bad ids or unavailable methods."""


class TransportError(MollieError):
    """Raised by a transport for a non-2xx response or a failed round trip.

    Never reaches callers: the resource engine converts it with ``classify``.
    """

    def __init__(self, message: str, status_code: int | None = None, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class APIError(MollieError):
    """The API rejected the request, the transport failed, or the response was malformed."""

    def __init__(
        self,
        message: str,
        title: str | None = None,
        status_code: int | None = None,
        field: str | None = None,
        links: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.title = title
        self.status_code = status_code
        self.field = field
        self.links = links or {}

    def __str__(self) -> str:
        return self.message

    def has_link(self, key: str) -> bool:
        return key in self.links

    def get_link(self, key: str) -> dict[str, Any] | None:
        link = self.links.get(key)
        return link if isinstance(link, dict) else None

    def get_url(self, key: str) -> str | None:
        link = self.get_link(key)
        return link.get("href") if link else None

    @property
    def documentation_url(self) -> str | None:
        return self.get_url("documentation")

    @property
    def dashboard_url(self) -> str | None:
        return self.get_url("dashboard")

    @classmethod
    def from_response(cls, body: Any, status_code: int | None = None) -> APIError:
        """Build the matching APIError subclass from a (possibly absent) error body.

        Mollie error bodies look like ``{"status", "title", "detail", "field", "_links"}``;
        every key is optional here and a non-dict body is treated as empty.
        """
        data = body if isinstance(body, dict) else {}

        status = data.get("status")
        if not isinstance(status, int) or isinstance(status, bool):
            status = status_code
        links = data.get("_links")
        links = copy.deepcopy(links) if isinstance(links, dict) else {}

        message = data.get("detail") or _DEFAULT_MESSAGE
        exc_cls = STATUS_MAP.get(status, APIError) if status is not None else APIError
        return exc_cls(
            str(message),
            title=data.get("title"),
            status_code=status,
            field=data.get("field"),
            links=links,
        )


class AuthenticationError(APIError):
    """401: invalid or missing API key."""


class PermissionDeniedError(APIError):
    """403: the key may not access this resource."""


class NotFoundError(APIError):
    """404: resource does not exist."""


class ConflictError(APIError):
    """409: duplicate request or conflicting state."""


class ValidationError(APIError):
    """400/422: the API refused the parameters."""


class RateLimitError(APIError):
    """429: too many requests."""


# Map HTTP status codes to exception classes.
STATUS_MAP: dict[int, type[APIError]] = {
    400: ValidationError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}


def classify(exc: TransportError) -> APIError:
    """Turn a transport failure into a typed APIError."""
    if isinstance(exc.body, dict):
        return APIError.from_response(exc.body, status_code=exc.status_code)
    # No usable body: connection failure, timeout, or a non-JSON response.
    exc_cls = STATUS_MAP.get(exc.status_code, APIError) if exc.status_code else APIError
    return exc_cls(exc.message or _DEFAULT_MESSAGE, status_code=exc.status_code)
