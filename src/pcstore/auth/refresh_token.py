"""RefreshToken aggregate: a single-use credential for renewing access tokens."""

import secrets
from datetime import UTC, datetime, timedelta

from protean.fields import Boolean, DateTime, Identifier, String

from pcstore.domain import store


@store.aggregate
class RefreshToken:
    token: String(required=True, max_length=255)
    user_id: Identifier(required=True)
    expires_at: DateTime(required=True)
    is_used: Boolean(default=False)
    created_at: DateTime()

    @classmethod
    def issue(cls, user_id, lifetime: timedelta):
        now = datetime.now(UTC)
        return cls(
            token=secrets.token_urlsafe(48),
            user_id=user_id,
            expires_at=now + lifetime,
            is_used=False,
            created_at=now,
        )

    def is_expired(self, now=None) -> bool:
        now = now or datetime.now(UTC)
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)
        return expires_at <= now

    def mark_used(self):
        self.is_used = True


@store.repository(part_of=RefreshToken)
class RefreshTokenRepository:
    def find_by_token(self, token: str) -> RefreshToken | None:
        tokens = self._dao.query.filter(token=token).all().items
        return tokens[0] if tokens else None
