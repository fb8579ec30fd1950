"""Tests for the User aggregate."""

import pytest
from pcstore.user.events import FavoriteProductAdded, UserRegistered
from pcstore.user.user import Role, User
from protean.exceptions import ValidationError


def _user(email="Jane@Example.com"):
    user = User.register(email=email, password_hash="hashed")
    user._events.clear()
    return user


class TestRegistration:
    def test_email_is_normalised(self):
        assert _user().email == "jane@example.com"

    def test_default_role(self):
        assert _user().role_names() == [Role.USER.value]

    def test_admin_role(self):
        user = User.register(email="admin@example.com", password_hash="hashed", roles=[Role.ADMIN])
        assert user.role_names() == ["Admin"]

    def test_registration_event(self):
        user = User.register(email="jane@example.com", password_hash="hashed")
        assert isinstance(user._events[-1], UserRegistered)

    @pytest.mark.parametrize("email", ["not-an-email", "jane@", "jane..doe@example.com", "jane doe@example.com"])
    def test_malformed_email_rejected(self, email):
        with pytest.raises(ValidationError) as exc:
            User.register(email=email, password_hash="hashed")
        assert "Invalid email address" in str(exc.value)


class TestFavorites:
    def test_add_favorite(self):
        user = _user()
        user.add_favorite_product("prod-1")

        assert user.favorites() == ["prod-1"]
        assert isinstance(user._events[-1], FavoriteProductAdded)

    def test_add_favorite_twice_is_a_no_op(self):
        user = _user()
        user.add_favorite_product("prod-1")
        user.add_favorite_product("prod-1")

        assert user.favorites() == ["prod-1"]
        assert len(user._events) == 1

    def test_remove_favorite(self):
        user = _user()
        user.add_favorite_product("prod-1")
        user.remove_favorite_product("prod-1")
        assert user.favorites() == []

    def test_remove_unknown_favorite(self):
        with pytest.raises(ValidationError):
            _user().remove_favorite_product("prod-1")
