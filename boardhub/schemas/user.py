"""Schemas for users"""
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class UserBase(BaseModel):
    github_handle: str = Field(..., min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    profile_photo: Optional[str] = Field(None, max_length=200)
    oauth_id: Optional[str] = Field(None, max_length=30)


class UserCreate(UserBase):
    api_key: Optional[str] = Field(None, max_length=100)
    verified: bool = True
    profile_id: Optional[int] = None


class UserUpdate(BaseModel):
    github_handle: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    profile_photo: Optional[str] = Field(None, max_length=200)
    oauth_id: Optional[str] = Field(None, max_length=30)
    api_key: Optional[str] = Field(None, max_length=100)
    verified: Optional[bool] = None
    profile_id: Optional[int] = None


class UserResponse(BaseModel):
    id: int
    github_handle: str
    email: Optional[str] = None
    profile_photo: Optional[str] = None
    oauth_id: Optional[str] = None
    verified: bool
    profile_id: Optional[int] = None

    class Config:
        from_attributes = True


class UserPrivate(UserResponse):
    """User shape including credentials; never returned by the default lookups."""

    api_key: Optional[str] = None
