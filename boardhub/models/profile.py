"""
Profile Model
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from boardhub.database import Base


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    first = Column(String(100), nullable=True)
    last = Column(String(100), nullable=True)
    display = Column(String(100), nullable=True)
    email = Column(String(100), unique=True, nullable=True)
    phone = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    auths = relationship("Auth", back_populates="profile", cascade="all, delete-orphan", passive_deletes=True)
    users = relationship("User", back_populates="profile", passive_deletes=True)
