from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, UniqueConstraint
from devmatch.database import Base, utcnow
import uuid


class Swipe(Base):
    """A like (liked=True) or pass from user_id on target_id. One per pair."""

    __tablename__ = "swipes"
    __table_args__ = (UniqueConstraint("user_id", "target_id", name="uq_swipe_pair"),)

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    target_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    liked = Column(Boolean, nullable=False)
    created_at = Column(DateTime, default=utcnow)
