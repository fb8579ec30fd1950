"""FastAPI endpoints for authentication and user accounts."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from pcstore.api.identity.schemas import (
    RefreshTokensRequest,
    SignInRequest,
    SignUpRequest,
    TokenResponse,
    UserResponse,
)
from pcstore.auth.authentication import RefreshTokens, SignIn, SignUp
from pcstore.shared.errors import UserNotFound
from pcstore.shared.http import http_error, raise_for_error
from pcstore.shared.result import dispatch
from pcstore.user.favorites import AddFavoriteProduct, RemoveFavoriteProduct
from pcstore.user.user import User

auth_router = APIRouter(prefix="/auth", tags=["auth"])
user_router = APIRouter(prefix="/users", tags=["users"])


@auth_router.post("/sign-up", status_code=201, response_model=TokenResponse)
async def sign_up(body: SignUpRequest) -> TokenResponse:
    result = dispatch(SignUp, email=body.email, password=body.password)
    return TokenResponse(**raise_for_error(result))


@auth_router.post("/sign-in", response_model=TokenResponse)
async def sign_in(body: SignInRequest) -> TokenResponse:
    result = dispatch(SignIn, email=body.email, password=body.password)
    return TokenResponse(**raise_for_error(result))


@auth_router.post("/refresh-token", response_model=TokenResponse)
async def refresh_token(body: RefreshTokensRequest) -> TokenResponse:
    result = dispatch(RefreshTokens, access_token=body.access_token, refresh_token=body.refresh_token)
    return TokenResponse(**raise_for_error(result))


@user_router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str) -> UserResponse:
    user = current_domain.repository_for(User).get_or_none(user_id)
    if user is None:
        raise http_error(UserNotFound(user_id))
    return UserResponse.from_aggregate(user)


@user_router.post("/{user_id}/favorites/{product_id}", response_model=UserResponse)
async def add_favorite_product(user_id: str, product_id: str) -> UserResponse:
    result = dispatch(AddFavoriteProduct, user_id=user_id, product_id=product_id)
    return UserResponse.from_aggregate(raise_for_error(result))


@user_router.delete("/{user_id}/favorites/{product_id}", response_model=UserResponse)
async def remove_favorite_product(user_id: str, product_id: str) -> UserResponse:
    result = dispatch(RemoveFavoriteProduct, user_id=user_id, product_id=product_id)
    return UserResponse.from_aggregate(raise_for_error(result))
