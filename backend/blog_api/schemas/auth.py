# blog_api/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines request models for registration and login.
"""
from pydantic import BaseModel, EmailStr, Field, field_validator


class RegisterIn(BaseModel):
    """
    Request model for the registration endpoint.
    Email is trimmed and lowercased; name is trimmed.
    """
    name: str = Field(min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6)  # Plain text, hashed server-side

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()


class LoginIn(BaseModel):
    """
    Request model for the login endpoint.
    Email is not format-validated here so a malformed address fails with the
    same credentials error as an unknown one.
    """
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()
