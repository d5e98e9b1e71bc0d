"""Version 1 HTTP routes."""
from fastapi import APIRouter

from boardhub.api.v1 import boards, invites, panels, tickets, users

api_router = APIRouter()
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(boards.router, prefix="/boards", tags=["boards"])
api_router.include_router(panels.router, prefix="/panels", tags=["panels"])
api_router.include_router(tickets.router, prefix="/tickets", tags=["tickets"])
api_router.include_router(invites.router, tags=["invites"])
