"""Access token context injected into the Intune client."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

TOKEN_ENV = "INTUNE_GRAPH_TOKEN"
EXPIRES_ON_ENV = "INTUNE_GRAPH_TOKEN_EXPIRES_ON"


@dataclass(frozen=True)
class AccessToken:
    """Bearer token plus the moment it stops being valid.

    Token acquisition and refresh happen elsewhere; this only carries the
    result so callers can check it before touching the network.
    """

    token: str
    expires_on: datetime

    def remaining_seconds(self, *, now: Optional[datetime] = None) -> float:
        """Return seconds until expiry (zero or negative once expired)."""
        current = now or datetime.now(timezone.utc)
        expires_on = self.expires_on
        if expires_on.tzinfo is None:
            expires_on = expires_on.replace(tzinfo=timezone.utc)
        return (expires_on - current).total_seconds()

    def is_valid(self, *, now: Optional[datetime] = None) -> bool:
        return bool(self.token) and self.remaining_seconds(now=now) > 0

    @property
    def authorization_header(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    @classmethod
    def from_env(cls) -> AccessToken | None:
        """Build a token from ``INTUNE_GRAPH_TOKEN`` / ``INTUNE_GRAPH_TOKEN_EXPIRES_ON``.

        Returns
        -------
        AccessToken or None
            ``None`` when the token variable is unset or empty.

        Raises
        ------
        ValueError
            If the expiry variable is missing or cannot be parsed.
        """
        token = os.environ.get(TOKEN_ENV, "").strip()
        if not token:
            return None
        raw_expiry = os.environ.get(EXPIRES_ON_ENV)
        if not raw_expiry:
            raise ValueError(f"{EXPIRES_ON_ENV} must be set alongside {TOKEN_ENV}")
        return cls(token=token, expires_on=parse_expiry(raw_expiry))


def parse_expiry(value: str | int | float) -> datetime:
    """Parse an ISO-8601 timestamp or epoch seconds into an aware datetime."""
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    text = value.strip()
    if text.isdigit():
        return datetime.fromtimestamp(int(text), tz=timezone.utc)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"Unsupported expiry value {value!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


__all__ = ["AccessToken", "EXPIRES_ON_ENV", "TOKEN_ENV", "parse_expiry"]
