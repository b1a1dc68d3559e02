"""Profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from paire.application.usecase.profile import (
    GetProfileRequest,
    GetProfileUseCase,
    ProfileResponse,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from paire.domain.error import DomainError
from paire.domain.service import JWTService
from paire.interface.api.auth import authenticate
from paire.interface.api.errors import to_http_exception

router = APIRouter(prefix="/profile", tags=["profile"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the caller's profile."""

    display_name: str | None = Field(default=None, max_length=100)
    avatar_url: str | None = Field(default=None, max_length=2048)


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    get_profile_use_case: FromDishka[GetProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ProfileResponse:
    """Get the caller's profile."""
    payload = authenticate(jwt_service, auth_token)

    try:
        return await get_profile_use_case.execute(
            GetProfileRequest(user_id=payload.user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/me", response_model=ProfileResponse)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ProfileResponse:
    """Update the caller's display name and avatar.

    Args:
        request: Fields to update; omitted fields are left unchanged
        update_profile_use_case: Update profile use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie

    Raises:
        HTTPException: 401 not authenticated, 404 unknown user
    """
    payload = authenticate(jwt_service, auth_token)

    try:
        return await update_profile_use_case.execute(
            UpdateProfileRequest(
                user_id=payload.user_id,
                display_name=request.display_name,
                avatar_url=request.avatar_url,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
