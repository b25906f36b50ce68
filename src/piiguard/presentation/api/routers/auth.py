"""Authentication router for login."""

from fastapi import APIRouter

from piiguard.presentation.api.dependencies import AuthService
from piiguard.presentation.api.schemas.auth import LoginRequest, TokenResponse

router = APIRouter()


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Email or password is incorrect"},
    },
)
async def login(request: LoginRequest, auth_service: AuthService) -> TokenResponse:
    """
    Authenticate with email and password.

    Returns a Bearer access token valid for 24 hours. Unknown email and
    wrong password produce the same 401 response.
    """
    token = await auth_service.sign_in(request.email, request.password)
    return TokenResponse(
        access_token=token.access_token,
        token_type=token.token_type,
        expires_in=token.expires_in,
    )
