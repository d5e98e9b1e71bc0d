"""
Board Invite Model
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from boardhub.database import Base


class BoardInvite(Base):
    __tablename__ = "boards_invites"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    invitee_handle = Column(
        String(100),
        ForeignKey("users.github_handle", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    board_id = Column(Integer, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False)
    last_email = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    invitee = relationship("User", back_populates="invites")
    board = relationship("Board", back_populates="invites")

    __table_args__ = (
        UniqueConstraint("invitee_handle", "board_id", name="unique_board_invite"),
    )
