from pydantic import BaseModel, StrictBool
from datetime import datetime
from typing import Optional


class SwipeRequest(BaseModel):
    target_id: str
    liked: StrictBool


class SwipeOut(BaseModel):
    id: str
    user_id: str
    target_id: str
    liked: bool
    created_at: datetime

    class Config:
        from_attributes = True


class MatchOut(BaseModel):
    id: str
    user1_id: str
    user2_id: str
    created_at: datetime

    class Config:
        from_attributes = True


class SwipeResponse(BaseModel):
    success: bool
    swipe: SwipeOut
    match: Optional[MatchOut] = None
