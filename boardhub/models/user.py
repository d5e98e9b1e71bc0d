"""
User Model
"""
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from boardhub.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    email = Column(String(100), nullable=True, index=True)
    github_handle = Column(String(100), unique=True, index=True, nullable=False)
    profile_photo = Column(String(200), nullable=True)
    oauth_id = Column(String(30), nullable=True)
    api_key = Column(String(100), unique=True, nullable=True, index=True)
    verified = Column(Boolean, default=True, nullable=False)
    profile_id = Column(Integer, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True)

    # Relationships
    profile = relationship("Profile", back_populates="users")
    owned_boards = relationship(
        "Board", back_populates="owner", cascade="all, delete-orphan", passive_deletes=True
    )
    memberships = relationship(
        "BoardUser", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    invites = relationship(
        "BoardInvite", back_populates="invitee", cascade="all, delete-orphan", passive_deletes=True
    )
