"""Access token (JWT) issuing and decoding."""

import uuid
from datetime import UTC, datetime, timedelta

import jwt
from protean.utils.globals import current_domain

from pcstore import config
from pcstore.auth.refresh_token import RefreshToken


def generate_access_token(user) -> str:
    now = datetime.now(UTC)
    claims = {
        "sub": str(user.id),
        "email": user.email,
        "roles": user.role_names(),
        "iat": now,
        "exp": now + timedelta(minutes=config.access_token_lifetime_minutes()),
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(claims, config.jwt_secret(), algorithm=config.jwt_algorithm())


def decode_access_token(token: str, verify_exp: bool = True) -> dict:
    """Decode and verify a token's signature.

    Raises ``jwt.ExpiredSignatureError`` or another ``jwt.InvalidTokenError``.
    """
    return jwt.decode(
        token,
        config.jwt_secret(),
        algorithms=[config.jwt_algorithm()],
        options={"verify_exp": verify_exp, "require": ["sub", "exp"]},
    )


def issue_token_pair(user) -> dict:
    """Create an access token and persist a fresh refresh token for ``user``."""
    access_token = generate_access_token(user)
    refresh_token = RefreshToken.issue(user.id, timedelta(days=config.refresh_token_lifetime_days()))
    current_domain.repository_for(RefreshToken).add(refresh_token)
    return {"access_token": access_token, "refresh_token": refresh_token.token}
