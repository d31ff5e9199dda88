from pydantic import BaseModel
from typing import Optional


class GithubLoginRequest(BaseModel):
    access_token: str


class LoginResponse(BaseModel):
    success: bool
    message: str
    user_id: Optional[str] = None
