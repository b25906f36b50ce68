"""Authentication schemas for request/response models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "password123",
            },
        },
    )


class TokenResponse(BaseModel):
    """Response schema for a successful login."""

    access_token: str
    token_type: Literal["Bearer"] = "Bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")
