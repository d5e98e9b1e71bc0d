"""Schemas for tickets"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TicketCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=200)
    status: str = Field(..., min_length=1, max_length=20)
    priority: int
    type: Optional[str] = Field(None, max_length=20)
    creator_id: Optional[int] = None
    assignee_handle: Optional[str] = Field(None, max_length=100)
    panel_id: int
    board_id: int


class TicketUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=200)
    status: Optional[str] = Field(None, min_length=1, max_length=20)
    priority: Optional[int] = None
    type: Optional[str] = Field(None, max_length=20)
    creator_id: Optional[int] = None
    assignee_handle: Optional[str] = Field(None, max_length=100)
    panel_id: Optional[int] = None
    board_id: Optional[int] = None


class TicketResponse(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    status: str
    priority: int
    type: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    creator_id: Optional[int] = None
    assignee_handle: Optional[str] = None
    panel_id: int
    board_id: int

    class Config:
        from_attributes = True
