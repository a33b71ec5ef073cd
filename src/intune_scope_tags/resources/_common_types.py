"""Shared types and validation helpers for resources.

This module contains:
- Validation mode type (shared across all resources)
- Identifier patterns for Graph object IDs and role scope tag IDs
- Normalizers for scope tag IDs and tag lists
"""

from __future__ import annotations

import re
from typing import Literal, Sequence

# --- Shared Validation Mode --- #
ValidationMode = Literal["off", "warn", "strict"]


# --- Identifier Patterns --- #
DEFAULT_SCOPE_TAG_ID = "0"

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    flags=re.IGNORECASE,
)
SCOPE_TAG_ID_PATTERN = re.compile(r"^\d+$")


def _is_object_id(value: object) -> bool:
    """Return True when ``value`` is a Graph object ID (UUID string)."""
    return isinstance(value, str) and bool(UUID_PATTERN.match(value.strip()))


def _normalize_scope_tag_id(value: object) -> str | None:
    """Normalize a scope tag ID to its digit-string form.

    Parameters
    ----------
    value
        Digit string (surrounding whitespace is ignored) or non-negative int.

    Returns
    -------
    str | None
        The digit string, or None if the input is not a valid scope tag ID.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value) if value >= 0 else None
    if isinstance(value, str):
        text = value.strip()
        if SCOPE_TAG_ID_PATTERN.match(text):
            return text
    return None


def _coerce_scope_tag_ids(value: object) -> list[str]:
    """Copy a fetched ``roleScopeTagIds`` value into a fresh list of strings.

    A missing or null list reads as empty. Order and duplicates are kept as
    the service returned them.
    """
    if value is None:
        return []
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return [str(item) for item in value if item is not None]
    return []
