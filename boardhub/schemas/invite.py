"""Schemas for board invites"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, model_validator

from boardhub.schemas.board import BoardResponse
from boardhub.schemas.user import UserResponse


class BoardInviteResponse(BaseModel):
    id: int
    invitee_handle: str
    board_id: int
    last_email: Optional[datetime] = None
    created_at: datetime

    class Config:
        from_attributes = True


class InvitedBoard(BoardResponse):
    """A board a user is invited to, with the invite it came from."""

    invite_id: int
    last_email: Optional[datetime] = None


class InviteeResponse(UserResponse):
    invited_to_boards: List[InvitedBoard] = Field(
        default_factory=list, serialization_alias="invitedToBoards"
    )


class InviteCreate(BaseModel):
    """Invite someone by GitHub handle or by email (exactly one of the two)."""

    github_handle: Optional[str] = None
    email: Optional[EmailStr] = None

    @model_validator(mode="after")
    def check_single_target(self):
        if bool(self.github_handle) == bool(self.email):
            raise ValueError("give either github_handle or email")
        return self


class InviteIdList(BaseModel):
    ids: List[int] = Field(default_factory=list)


class OutcomeResponse(BaseModel):
    result: str
