"""Runtime settings read from the environment."""

import os


def get_env() -> str:
    return (os.getenv("PROTEAN_ENV") or os.getenv("ENVIRONMENT") or "development").lower()


def jwt_secret() -> str:
    return os.getenv("JWT_SECRET", "pcstore-development-secret-change-me")


def jwt_algorithm() -> str:
    return os.getenv("JWT_ALGORITHM", "HS256")


def access_token_lifetime_minutes() -> int:
    return int(os.getenv("ACCESS_TOKEN_LIFETIME_MINUTES", "60"))


def refresh_token_lifetime_days() -> int:
    return int(os.getenv("REFRESH_TOKEN_LIFETIME_DAYS", "7"))
