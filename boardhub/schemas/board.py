"""Schemas for boards"""
from typing import Optional

from pydantic import BaseModel, Field


class BoardCreate(BaseModel):
    board_name: str = Field(..., min_length=1, max_length=50)
    repo_name: Optional[str] = Field(None, max_length=100)
    repo_url: Optional[str] = Field(None, max_length=200)
    owner_id: int


class BoardUpdate(BaseModel):
    board_name: Optional[str] = Field(None, min_length=1, max_length=50)
    repo_name: Optional[str] = Field(None, max_length=100)
    repo_url: Optional[str] = Field(None, max_length=200)
    owner_id: Optional[int] = None


class BoardResponse(BaseModel):
    id: int
    board_name: str
    repo_name: Optional[str] = None
    repo_url: Optional[str] = None
    owner_id: int

    class Config:
        from_attributes = True
