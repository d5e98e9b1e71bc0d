"""BoardHub: boards, panels, tickets and board invitations."""

__version__ = "1.0.0"
