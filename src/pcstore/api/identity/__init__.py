"""Identity API package."""

from pcstore.api.identity.routes import auth_router, user_router

__all__ = ["auth_router", "user_router"]
