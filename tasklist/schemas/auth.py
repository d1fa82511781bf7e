import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, SecretStr, field_validator

from tasklist.core.constants import PASSWORD_MAX_BYTES


# Authentication schemas
class UserCreate(BaseModel):
    """
    Schema for user registration inputs.
    """
    email: EmailStr = Field(..., description="User's email address")
    name: Optional[str] = Field(default=None, max_length=100, description="Display name")

    # SecretStr prevents the password from being logged in tracebacks
    password: SecretStr = Field(..., description="User's password", min_length=8, max_length=64)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: SecretStr) -> SecretStr:
        """
        Enforce strong password policies.
        """
        password = v.get_secret_value()

        if len(password) < 8:
            raise ValueError("Password must be at least 8 characters long")
        if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes")
        if not re.search(r"[A-Z]", password):
            raise ValueError("Password must contain at least one uppercase letter")
        if not re.search(r"[0-9]", password):
            raise ValueError("Password must contain at least one number")
        if not re.search(r'[!@#$%^&*(),.?":{}|<>]', password):
            raise ValueError("Password must contain at least one special character")

        return v


class UserLogin(BaseModel):
    email: EmailStr
    password: SecretStr


class Token(BaseModel):
    """
    Schema for the JWT Access Token Response.
    """
    access_token: str = Field(..., description="The JWT Access Token")
    token_type: str = Field(default="bearer", description="The type of token")
    expires_at: datetime = Field(..., description="The token expiration timestamp")


class UserRead(BaseModel):
    """
    Public user profile schema (safe return to frontend).
    The password hash is never part of it.
    """
    id: int
    email: str
    name: Optional[str] = None
    created_at: datetime


class AuthResponse(BaseModel):
    user: UserRead
    token: Token


class SignOutResponse(BaseModel):
    success: bool = True
