"""Thin async HTTP client wrapping httpx.AsyncClient with auth and error capture."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from . import __version__
from ._exceptions import TransportError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.mollie.com/v2"


class Transport(Protocol):
    """What the resource engine needs from the outbound HTTP layer."""

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> Any: ...


def encode_query(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Flatten query params: lists repeat the key, mappings use ``key[sub]``."""
    pairs: list[tuple[str, str]] = []

    def _add(key: str, value: Any) -> None:
        if value is None:
            return
        if isinstance(value, Mapping):
            for sub, sub_value in value.items():
                _add(f"{key}[{sub}]", sub_value)
        elif isinstance(value, (list, tuple)):
            for item in value:
                _add(key, item)
        elif isinstance(value, bool):
            pairs.append((key, "true" if value else "false"))
        else:
            pairs.append((key, str(value)))

    for key, value in (params or {}).items():
        _add(key, value)
    return pairs


def _error_body(resp: httpx.Response) -> Any:
    """Best-effort JSON decode of an error response; ``None`` when unparseable."""
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        logger.debug("Failed to parse error body: %s", resp.text[:200])
        return None


class HTTPClient:
    """Minimal async HTTP client with Bearer auth. No retries."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30,
        *,
        client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Accept-Encoding": "gzip",
            "Content-Type": "application/json",
            "User-Agent": f"mollie-client-python/{__version__}",
        }

    def _url(self, path: str) -> str:
        # Pagination cursors are absolute links.
        if path.startswith(("http://", "https://")):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Send one request; return the decoded JSON body, or ``None`` for an empty body."""
        url = self._url(path)
        logger.debug("%s %s", method, url)
        try:
            resp = await self._client.request(
                method,
                url,
                params=encode_query(params) or None,
                json=json,
                headers=self._headers,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Request failed: %s %s: %s", method, url, e)
            raise TransportError(str(e) or type(e).__name__) from e

        if resp.is_error:
            raise TransportError(
                f"HTTP {resp.status_code}", status_code=resp.status_code, body=_error_body(resp)
            )

        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(
                "Invalid JSON response from server", status_code=resp.status_code
            ) from e

    async def aclose(self) -> None:
        await self._client.aclose()
