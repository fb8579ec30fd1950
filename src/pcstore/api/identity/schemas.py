"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SignUpRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "builder@example.com", "password": "s3cret-pass"}]}}

    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=6, max_length=128)


class SignInRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "builder@example.com", "password": "s3cret-pass"}]}}

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


class RefreshTokensRequest(BaseModel):
    access_token: str
    refresh_token: str


class TokenResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "message": "You're logged in",
                    "user_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "access_token": "eyJhbGciOi...",
                    "refresh_token": "q9Zb...",
                }
            ]
        }
    }

    message: str
    user_id: str
    access_token: str
    refresh_token: str


class UserResponse(BaseModel):
    id: str
    email: str
    roles: list[str]
    favorite_product_ids: list[str]

    @classmethod
    def from_aggregate(cls, user) -> UserResponse:
        return cls(
            id=str(user.id),
            email=user.email,
            roles=user.role_names(),
            favorite_product_ids=user.favorites(),
        )
