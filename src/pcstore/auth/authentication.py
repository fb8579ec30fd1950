"""Sign-up, sign-in and token refresh: commands and handlers."""

import jwt
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from pcstore.auth.passwords import hash_password, verify_password
from pcstore.auth.refresh_token import RefreshToken
from pcstore.auth.tokens import decode_access_token, issue_token_pair
from pcstore.domain import logger, store
from pcstore.shared.errors import (
    AuthenticationUnknown,
    EmailOrPasswordIncorrect,
    InvalidAccessToken,
    InvalidToken,
    TokenExpired,
    UserByThisEmailAlreadyExists,
    UserNotFound,
)
from pcstore.user.user import User


@store.command(part_of="User")
class SignUp:
    email: String(required=True, max_length=254)
    password: String(required=True, min_length=6, max_length=128)


@store.command(part_of="User")
class SignIn:
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)


@store.command(part_of="RefreshToken")
class RefreshTokens:
    access_token: String(required=True, max_length=4096)
    refresh_token: String(required=True, max_length=255)


def _issue(user, message: str) -> dict:
    try:
        tokens = issue_token_pair(user)
    except Exception as exc:
        raise AuthenticationUnknown(user.id, exc) from exc
    return {"message": message, "user_id": str(user.id), **tokens}


@store.command_handler(part_of=User)
class AuthenticationHandler:
    @handle(SignUp)
    def sign_up(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise UserByThisEmailAlreadyExists(command.email)

        user = User.register(email=command.email, password_hash=hash_password(command.password))
        repo.add(user)
        logger.info("user_signed_up", user_id=str(user.id))
        return _issue(user, "You're registered")

    @handle(SignIn)
    def sign_in(self, command):
        user = current_domain.repository_for(User).find_by_email(command.email)
        if user is None or not verify_password(command.password, user.password_hash):
            raise EmailOrPasswordIncorrect()

        logger.info("user_signed_in", user_id=str(user.id))
        return _issue(user, "You're logged in")


@store.command_handler(part_of=RefreshToken)
class RefreshTokensHandler:
    @handle(RefreshTokens)
    def refresh_tokens(self, command):
        try:
            claims = decode_access_token(command.access_token, verify_exp=False)
        except jwt.InvalidTokenError:
            raise InvalidAccessToken() from None

        repo = current_domain.repository_for(RefreshToken)
        stored = repo.find_by_token(command.refresh_token)
        if stored is None or stored.is_used or str(stored.user_id) != claims["sub"]:
            raise InvalidToken()
        if stored.is_expired():
            raise TokenExpired()

        user = current_domain.repository_for(User).get_or_none(stored.user_id)
        if user is None:
            raise UserNotFound(stored.user_id)

        stored.mark_used()
        repo.add(stored)
        return _issue(user, "Tokens refreshed")
