"""Auth schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from fittrack.core.constants import MIN_PASSWORD_LENGTH


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    email: str


class AuthResponse(BaseModel):
    """Token plus the identity it was issued for."""

    token: str
    user: UserRead
