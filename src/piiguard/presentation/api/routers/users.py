"""User router for registration and lookups."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from piiguard.presentation.api.dependencies import CurrentClaims, DBSession, UserSvc
from piiguard.presentation.api.schemas.users import CreateUserRequest, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        409: {"description": "User already exists"},
    },
)
async def create_user(
    request: CreateUserRequest,
    user_service: UserSvc,
    session: DBSession,
) -> UserResponse:
    view = await user_service.register(
        email=request.email,
        password=request.password,
        name=request.name,
    )
    await session.commit()
    return UserResponse.model_validate(view)


@router.get(
    "",
    summary="List users",
    responses={401: {"description": "Missing or invalid token"}},
)
async def list_users(
    user_service: UserSvc,
    claims: CurrentClaims,
) -> list[UserResponse]:
    views = await user_service.list_all()
    logger.debug("User %s listed %d users", claims.subject, len(views))
    return [UserResponse.model_validate(view) for view in views]


@router.get(
    "/{user_id}",
    summary="Get a user by id",
    responses={
        401: {"description": "Missing or invalid token"},
        404: {"description": "User not found"},
    },
)
async def get_user(
    user_id: UUID,
    user_service: UserSvc,
    claims: CurrentClaims,
) -> UserResponse:
    view = await user_service.get_by_id(user_id)
    return UserResponse.model_validate(view)
