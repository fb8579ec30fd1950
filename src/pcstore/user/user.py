"""User aggregate: an account that can sign in, fill a cart and place orders."""

import json
import re
from datetime import datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, String, Text

from pcstore.domain import store

_EMAIL_PATTERN = re.compile(r"^[^@\s;,()<>\[\]\\]+@[^@\s;,()<>\[\]\\]+\.[^@\s;,()<>\[\]\\]+$")


class Role(Enum):
    USER = "User"
    ADMIN = "Admin"


@store.aggregate
class User:
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=255)
    roles: Text()  # JSON array of role names
    favorite_product_ids: Text()  # JSON array of product ids
    created_at: DateTime(default=datetime.now)

    @invariant.post
    def email_must_be_well_formed(self):
        if not _EMAIL_PATTERN.match(self.email or "") or ".." in self.email:
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @classmethod
    def register(cls, email, password_hash, roles=None):
        from pcstore.user.events import UserRegistered

        role_names = [r.value if isinstance(r, Role) else r for r in (roles or [Role.USER])]
        now = datetime.now()
        user = cls(
            email=email.strip().lower(),
            password_hash=password_hash,
            roles=json.dumps(role_names),
            favorite_product_ids=json.dumps([]),
            created_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                email=user.email,
                roles=user.roles,
                registered_at=now,
            )
        )
        return user

    def role_names(self) -> list[str]:
        return json.loads(self.roles) if self.roles else []

    def favorites(self) -> list[str]:
        return json.loads(self.favorite_product_ids) if self.favorite_product_ids else []

    def add_favorite_product(self, product_id):
        from pcstore.user.events import FavoriteProductAdded

        favorites = self.favorites()
        if str(product_id) in favorites:
            return

        favorites.append(str(product_id))
        self.favorite_product_ids = json.dumps(favorites)
        self.raise_(FavoriteProductAdded(user_id=self.id, product_id=str(product_id)))

    def remove_favorite_product(self, product_id):
        from pcstore.user.events import FavoriteProductRemoved

        favorites = self.favorites()
        if str(product_id) not in favorites:
            raise ValidationError({"product_id": [f"Product {product_id} is not among favorites"]})

        favorites.remove(str(product_id))
        self.favorite_product_ids = json.dumps(favorites)
        self.raise_(FavoriteProductRemoved(user_id=self.id, product_id=str(product_id)))


@store.repository(part_of=User)
class UserRepository:
    def get_or_none(self, user_id) -> User | None:
        try:
            return self.get(user_id)
        except ObjectNotFoundError:
            return None

    def find_by_email(self, email: str) -> User | None:
        users = self._dao.query.filter(email=email.strip().lower()).all().items
        return users[0] if users else None
