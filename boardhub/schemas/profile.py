"""Schemas for profiles and their credentials"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, model_validator

from boardhub.models.auth import AuthType


class ProfileCreate(BaseModel):
    first: Optional[str] = Field(None, max_length=100)
    last: Optional[str] = Field(None, max_length=100)
    display: Optional[str] = Field(None, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=100)


class ProfileResponse(BaseModel):
    id: int
    first: Optional[str] = None
    last: Optional[str] = None
    display: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class AuthCreate(BaseModel):
    type: AuthType
    oauth_id: Optional[str] = Field(None, max_length=30)
    password: Optional[str] = Field(None, max_length=100)
    salt: Optional[str] = Field(None, max_length=100)
    profile_id: int

    @model_validator(mode="after")
    def check_credentials_match_type(self):
        if self.type == AuthType.OAUTH:
            if not self.oauth_id:
                raise ValueError("oauth auths require an oauth_id")
            if self.password or self.salt:
                raise ValueError("oauth auths cannot carry a password")
        else:
            if not (self.password and self.salt):
                raise ValueError("password auths require a password and salt")
            if self.oauth_id:
                raise ValueError("password auths cannot carry an oauth_id")
        return self


class AuthResponse(BaseModel):
    id: int
    type: AuthType
    oauth_id: Optional[str] = None
    profile_id: Optional[int] = None

    class Config:
        from_attributes = True
