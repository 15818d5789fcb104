# jobportal/auth/claims.py
"""
Verified token claims for the current request.

Claims are built only from a token whose signature, expiry and issuer have
been checked. They live on ``request.state`` for the duration of a single
request and are never returned to clients.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class Claims:
    """
    Registered JWT claims identifying the requester.

    Attributes:
        subject: The ``sub`` claim. Holds the internal user id as a string.
        issuer: The ``iss`` claim.
        issued_at: The ``iat`` claim as an aware UTC datetime.
        expires_at: The ``exp`` claim as an aware UTC datetime.
        raw: Full decoded payload, for logging and debugging only.
    """

    subject: str
    issuer: str | None = None
    issued_at: datetime | None = None
    expires_at: datetime | None = None
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Claims:
        return cls(
            subject=str(payload.get("sub") or ""),
            issuer=payload.get("iss"),
            issued_at=_from_timestamp(payload.get("iat")),
            expires_at=_from_timestamp(payload.get("exp")),
            raw=dict(payload),
        )

    @property
    def user_id(self) -> int | None:
        try:
            return int(self.subject)
        except ValueError:
            return None


def _from_timestamp(value: Any) -> datetime | None:
    if value is None:
        return None
    return datetime.fromtimestamp(int(value), tz=timezone.utc)
