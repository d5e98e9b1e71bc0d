"""
Auth Model
"""
import enum

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from boardhub.database import Base


class AuthType(str, enum.Enum):
    OAUTH = "oauth"
    PASSWORD = "password"


class Auth(Base):
    __tablename__ = "auths"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    type = Column(String(8), nullable=False)
    oauth_id = Column(String(30), nullable=True)
    password = Column(String(100), nullable=True)
    salt = Column(String(100), nullable=True)
    profile_id = Column(Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=True)

    # Relationships
    profile = relationship("Profile", back_populates="auths")
