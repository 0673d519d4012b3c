"""Pydantic models for API request/response.

JSON bodies use camelCase; snake_case is accepted on input too.
None of the response models has a password or hash field.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterRequest(CamelModel):
    """Request model for user registration."""
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginRequest(CamelModel):
    """Request model for user login."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class UpdateUserRequest(CamelModel):
    """Partial update. Omitted fields are left untouched."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='forbid')

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=1)


class AuthResponse(CamelModel):
    """Response model for register and login."""
    id: str
    name: str = Field(..., description="First and last name")
    email: str
    token: str = Field(..., description="Bearer access token")


class UserSummaryResponse(CamelModel):
    name: str
    email: str


class MeResponse(CamelModel):
    id: str
    email: str
    message: str


class UserResponse(CamelModel):
    """Public view of a user record."""
    id: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime
    updated_at: datetime


class MessageResponse(CamelModel):
    message: str
