"""
Pydantic schemas for store input and output
"""
from boardhub.schemas.user import UserCreate, UserUpdate, UserResponse, UserPrivate
from boardhub.schemas.profile import ProfileCreate, ProfileResponse, AuthCreate, AuthResponse
from boardhub.schemas.board import BoardCreate, BoardUpdate, BoardResponse
from boardhub.schemas.panel import PanelCreate, PanelUpdate, PanelResponse
from boardhub.schemas.ticket import TicketCreate, TicketUpdate, TicketResponse
from boardhub.schemas.invite import (
    BoardInviteResponse,
    InvitedBoard,
    InviteeResponse,
    InviteCreate,
    InviteIdList,
    OutcomeResponse,
)

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserPrivate",
    "ProfileCreate",
    "ProfileResponse",
    "AuthCreate",
    "AuthResponse",
    "BoardCreate",
    "BoardUpdate",
    "BoardResponse",
    "PanelCreate",
    "PanelUpdate",
    "PanelResponse",
    "TicketCreate",
    "TicketUpdate",
    "TicketResponse",
    "BoardInviteResponse",
    "InvitedBoard",
    "InviteeResponse",
    "InviteCreate",
    "InviteIdList",
    "OutcomeResponse",
]
