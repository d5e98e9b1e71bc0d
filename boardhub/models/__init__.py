"""BoardHub Database Models"""
from boardhub.models.profile import Profile
from boardhub.models.auth import Auth, AuthType
from boardhub.models.user import User
from boardhub.models.board import Board
from boardhub.models.board_user import BoardUser
from boardhub.models.board_invite import BoardInvite
from boardhub.models.panel import Panel
from boardhub.models.ticket import Ticket

__all__ = [
    "Profile",
    "Auth",
    "AuthType",
    "User",
    "Board",
    "BoardUser",
    "BoardInvite",
    "Panel",
    "Ticket",
]
