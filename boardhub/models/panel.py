"""
Panel Model
"""
from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sqlalchemy.orm import relationship
from boardhub.database import Base


class Panel(Base):
    __tablename__ = "panels"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(50), unique=True, nullable=False)
    due_date = Column(Date, nullable=True)
    board_id = Column(Integer, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False)

    # Relationships
    board = relationship("Board", back_populates="panels")
    tickets = relationship(
        "Ticket", back_populates="panel", cascade="all, delete-orphan", passive_deletes=True
    )
