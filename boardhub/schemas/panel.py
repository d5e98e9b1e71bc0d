"""Schemas for panels"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class PanelCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    due_date: Optional[date] = None
    board_id: int


class PanelUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=50)
    due_date: Optional[date] = None
    board_id: Optional[int] = None


class PanelResponse(BaseModel):
    id: int
    name: str
    due_date: Optional[date] = None
    board_id: int

    class Config:
        from_attributes = True
