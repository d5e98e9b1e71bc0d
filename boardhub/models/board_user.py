"""
Board membership Model
"""
from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from boardhub.database import Base


class BoardUser(Base):
    __tablename__ = "boards_users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    board_id = Column(Integer, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False)

    # Relationships
    user = relationship("User", back_populates="memberships")
    board = relationship("Board", back_populates="memberships")

    __table_args__ = (
        UniqueConstraint("user_id", "board_id", name="unique_board_user"),
    )
