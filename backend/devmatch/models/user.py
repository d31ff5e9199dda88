"""
User Model - Developer profile built from GitHub data

Each user is created on first GitHub sign-in and refreshed on every
subsequent sign-in. The matching columns (languages, activity_level,
interests, location) feed the swipe-feed score engine.

Activity Levels:
    low → medium → high (derived from public repos and followers)
"""

from sqlalchemy import Column, String, Text, JSON, DateTime
from devmatch.database import Base, utcnow
import uuid


class User(Base):
    """
    Developer account and public profile.

    Attributes:
        id: UUID primary key
        github_id: GitHub numeric user id as string (unique)
        username: GitHub login
        languages: JSON list of language names, most used first
        repos: JSON list of top repos ({name, url, description, language, stars})
        activity_level: "low" | "medium" | "high" (nullable until synced)
        interests: JSON list of interests (repo topics or user-edited)
        tagline: Short user-written pitch shown on the swipe card
    """

    __tablename__ = "users"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    github_id = Column(String(50), nullable=True, unique=True, index=True)
    username = Column(String(100), nullable=True)
    name = Column(String(200), nullable=True)
    email = Column(String(320), nullable=True)
    avatar_url = Column(String(2000), nullable=True)
    bio = Column(Text, nullable=True)
    tagline = Column(String(500), nullable=True)
    location = Column(String(500), nullable=True)
    languages = Column(JSON, nullable=False, default=list)
    repos = Column(JSON, nullable=False, default=list)
    activity_level = Column(String(20), nullable=True)
    interests = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
