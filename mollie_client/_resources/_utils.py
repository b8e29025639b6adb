"""Shared helpers for the resource engine."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

Callback = Callable[[Any, Any], Any]


def _split_callback(
    params: Mapping[str, Any] | Callback | None, callback: Callback | None
) -> tuple[dict[str, Any], Callback | None]:
    """Resolve the legacy ``op(id, callback)`` form into ``(params, callback)``."""
    if callable(params):
        if callback is not None:
            raise TypeError("Pass the callback either positionally or as callback=, not both")
        return {}, params
    return dict(params or {}), callback


def _pop_parent_id(params: dict[str, Any], keys: tuple[str, ...]) -> Any:
    """Remove every spelling of the parent-id key from params; return the first value found."""
    found = None
    for key in keys:
        value = params.pop(key, None)
        if found is None and value is not None:
            found = value
    return found
