"""Application tests for sign-up, sign-in and token refresh."""

from datetime import UTC, datetime, timedelta

import pytest
from factories import create_product, create_user, process
from pcstore.auth.authentication import RefreshTokens, SignIn, SignUp
from pcstore.auth.refresh_token import RefreshToken
from pcstore.shared.errors import (
    EmailOrPasswordIncorrect,
    InvalidAccessToken,
    InvalidToken,
    ProductNotFound,
    TokenExpired,
    UserByThisEmailAlreadyExists,
    UserNotFound,
)
from pcstore.user.favorites import AddFavoriteProduct, RemoveFavoriteProduct
from pcstore.user.user import User
from protean.utils.globals import current_domain


class TestSignUp:
    def test_sign_up_registers_user_and_issues_tokens(self):
        result = process(SignUp(email="new@example.com", password="secret-pass"))

        assert result["message"] == "You're registered"
        assert result["access_token"]
        assert result["refresh_token"]
        assert current_domain.repository_for(User).find_by_email("new@example.com") is not None

    def test_duplicate_email(self):
        create_user(email="jane@example.com")

        with pytest.raises(UserByThisEmailAlreadyExists):
            process(SignUp(email="JANE@example.com", password="secret-pass"))


class TestSignIn:
    def test_sign_in(self):
        create_user(email="jane@example.com", password="secret-pass")

        result = process(SignIn(email="jane@example.com", password="secret-pass"))
        assert result["message"] == "You're logged in"

    def test_wrong_password_and_unknown_email_look_the_same(self):
        create_user(email="jane@example.com", password="secret-pass")

        with pytest.raises(EmailOrPasswordIncorrect) as wrong_password:
            process(SignIn(email="jane@example.com", password="not-it"))
        with pytest.raises(EmailOrPasswordIncorrect) as unknown_email:
            process(SignIn(email="nobody@example.com", password="secret-pass"))

        assert wrong_password.value.message == unknown_email.value.message == "Email or password are incorrect"


class TestRefreshTokens:
    def _signed_in(self):
        create_user(email="jane@example.com", password="secret-pass")
        return process(SignIn(email="jane@example.com", password="secret-pass"))

    def test_refresh_issues_new_pair_and_spends_old_token(self):
        tokens = self._signed_in()

        refreshed = process(RefreshTokens(access_token=tokens["access_token"], refresh_token=tokens["refresh_token"]))
        assert refreshed["refresh_token"] != tokens["refresh_token"]

        old = current_domain.repository_for(RefreshToken).find_by_token(tokens["refresh_token"])
        assert old.is_used is True

    def test_refresh_token_cannot_be_reused(self):
        tokens = self._signed_in()
        process(RefreshTokens(access_token=tokens["access_token"], refresh_token=tokens["refresh_token"]))

        with pytest.raises(InvalidToken):
            process(RefreshTokens(access_token=tokens["access_token"], refresh_token=tokens["refresh_token"]))

    def test_unknown_refresh_token(self):
        tokens = self._signed_in()
        with pytest.raises(InvalidToken):
            process(RefreshTokens(access_token=tokens["access_token"], refresh_token="bogus"))

    def test_malformed_access_token(self):
        tokens = self._signed_in()
        with pytest.raises(InvalidAccessToken):
            process(RefreshTokens(access_token="not-a-jwt", refresh_token=tokens["refresh_token"]))

    def test_expired_refresh_token(self):
        tokens = self._signed_in()
        repo = current_domain.repository_for(RefreshToken)
        stored = repo.find_by_token(tokens["refresh_token"])
        stored.expires_at = datetime.now(UTC) - timedelta(minutes=1)
        repo.add(stored)

        with pytest.raises(TokenExpired):
            process(RefreshTokens(access_token=tokens["access_token"], refresh_token=tokens["refresh_token"]))


class TestFavoriteProducts:
    def test_add_and_remove(self):
        user = create_user()
        product = create_product()

        process(AddFavoriteProduct(user_id=user.id, product_id=product.id))
        assert current_domain.repository_for(User).get(user.id).favorites() == [str(product.id)]

        process(RemoveFavoriteProduct(user_id=user.id, product_id=product.id))
        assert current_domain.repository_for(User).get(user.id).favorites() == []

    def test_unknown_user(self):
        product = create_product()
        with pytest.raises(UserNotFound):
            process(AddFavoriteProduct(user_id="missing", product_id=product.id))

    def test_unknown_product(self):
        user = create_user()
        with pytest.raises(ProductNotFound):
            process(AddFavoriteProduct(user_id=user.id, product_id="missing"))
