from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .shared.schemas import ResponseModel
from .shared.validators import validate_email


class RegisterRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(..., min_length=3, max_length=255)
    # bcrypt only uses the first 72 bytes
    password: str = Field(..., min_length=8, max_length=72)
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        return validate_email(v)


class LoginRequest(BaseModel):
    email: str
    password: str


class UserResponse(ResponseModel):
    id: str
    email: str
    name: str


class TokenResponse(ResponseModel):
    access_token: str
    token_type: str = "bearer"
    user: Optional[UserResponse] = None
