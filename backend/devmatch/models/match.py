"""
Match and Message Models

A Match is created when two users have liked each other. Messages
belong to a match and are exchanged between its two members.
A pair has at most one match, stored with the smaller user id first.
"""

from sqlalchemy import Column, String, Boolean, Text, DateTime, ForeignKey, UniqueConstraint
from devmatch.database import Base, utcnow
import uuid


class Match(Base):
    __tablename__ = "matches"
    __table_args__ = (UniqueConstraint("user1_id", "user2_id", name="uq_match_pair"),)

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user1_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    user2_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow)

    def other_user_id(self, user_id: str) -> str:
        return self.user2_id if self.user1_id == user_id else self.user1_id


class Message(Base):
    __tablename__ = "messages"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    match_id = Column(String, ForeignKey("matches.id"), nullable=False, index=True)
    sender_id = Column(String, ForeignKey("users.id"), nullable=False)
    receiver_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow)
