"""
Authentication schemas
"""
from pydantic import BaseModel, Field, field_validator
from leavedesk.core.security import validate_password
from leavedesk.models.user import Role


class LoginRequest(BaseModel):
    """Login request schema"""
    username: str = Field(..., min_length=1, description="Username")
    password: str = Field(..., min_length=1, description="Password")


class RegisterUserRequest(BaseModel):
    """Registration request schema"""
    username: str = Field(..., min_length=3, max_length=50, description="Unique username")
    password: str = Field(..., min_length=6, max_length=40, description="Password")

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        return validate_password(v)


class TokenResponse(BaseModel):
    """Token response schema"""
    access_token: str
    token_type: str = "bearer"
    username: str
    role: Role


class MessageResponse(BaseModel):
    message: str
