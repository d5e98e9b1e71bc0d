"""Data-access functions over the BoardHub schema, one module per entity."""
from boardhub.stores import boards, invites, memberships, panels, tickets, users
from boardhub.stores.results import Outcome

__all__ = ["boards", "invites", "memberships", "panels", "tickets", "users", "Outcome"]
