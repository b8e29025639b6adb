"""Local validation of Mollie resource identifiers."""

from typing import Any


def validate_id(value: Any, prefix: str, label: str) -> str | None:
    """
    Check an id against its id-prefix convention.

    Args:
        value: Identifier supplied by the caller
        prefix: Literal prefix ids of this kind start with, e.g. ``"ord_"``
        label: Human-readable kind used in the message, e.g. ``"order"``

    Returns:
        Error message if invalid, None if valid
    """
    if not isinstance(value, str) or not value:
        return f"The {label} id is invalid"

    if not value.startswith(prefix) or value == prefix:
        return f"The {label} id is invalid"

    return None
