from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import Optional
from devmatch.schemas.profile import ProfileSummary


class MessageCreate(BaseModel):
    match_id: str
    content: str

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Message content must not be blank")
        return value


class MessageResponse(BaseModel):
    id: str
    match_id: str
    sender_id: str
    receiver_id: str
    content: str
    read: bool
    created_at: datetime

    class Config:
        from_attributes = True


class MatchResponse(BaseModel):
    id: str
    matched_at: datetime
    user: ProfileSummary
    last_message: Optional[MessageResponse] = None
