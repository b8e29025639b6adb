"""Mock transports for mollie_client tests."""

import asyncio
from dataclasses import dataclass
from typing import Any

from mollie_client._exceptions import TransportError


@dataclass
class RecordedCall:
    method: str
    path: str
    params: dict[str, Any] | None
    json: Any


class SpyTransport:
    """Transport double: canned responses keyed by method and path, every call recorded."""

    def __init__(self):
        self.calls: list[RecordedCall] = []
        self._responses: dict[str, Any] = {}

    def add_response(
        self,
        method: str,
        path: str,
        response_data: Any = None,
        status_code: int = 200,
    ):
        """Add a canned response. Status >= 400 raises TransportError with the data as body."""
        key = f"{method.upper()} {path}"
        self._responses[key] = (response_data, status_code)

    def add_error(self, method: str, path: str, error: TransportError):
        """Make a request fail with a specific transport error."""
        self._responses[f"{method.upper()} {path}"] = error

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        self.calls.append(
            RecordedCall(method.upper(), path, dict(params) if params else None, json)
        )
        # Yield to the loop so overlapping calls really interleave.
        await asyncio.sleep(0)

        key = f"{method.upper()} {path}"
        if key not in self._responses:
            raise AssertionError(f"Unexpected request: {key}")
        canned = self._responses[key]
        if isinstance(canned, TransportError):
            raise canned
        data, status_code = canned
        if status_code >= 400:
            raise TransportError(f"HTTP {status_code}", status_code=status_code, body=data)
        return data
