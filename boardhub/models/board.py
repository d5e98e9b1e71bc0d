"""
Board Model
"""
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from boardhub.database import Base


class Board(Base):
    __tablename__ = "boards"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    board_name = Column(String(50), unique=True, nullable=False)
    repo_name = Column(String(100), nullable=True)
    repo_url = Column(String(200), nullable=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    # Relationships
    owner = relationship("User", back_populates="owned_boards")
    memberships = relationship(
        "BoardUser", back_populates="board", cascade="all, delete-orphan", passive_deletes=True
    )
    invites = relationship(
        "BoardInvite", back_populates="board", cascade="all, delete-orphan", passive_deletes=True
    )
    panels = relationship(
        "Panel", back_populates="board", cascade="all, delete-orphan", passive_deletes=True
    )
    tickets = relationship(
        "Ticket", back_populates="board", cascade="all, delete-orphan", passive_deletes=True
    )
