from devmatch.schemas.profile import (
    LanguageResponse,
    RepoSummary,
    ProfileUpdate,
    ProfileSummary,
    ProfileResponse,
    RankedProfileResponse,
)
from devmatch.schemas.swipe import SwipeRequest, SwipeResponse, SwipeOut, MatchOut
from devmatch.schemas.match import MessageCreate, MessageResponse, MatchResponse
from devmatch.schemas.auth import GithubLoginRequest, LoginResponse

__all__ = [
    "LanguageResponse",
    "RepoSummary",
    "ProfileUpdate",
    "ProfileSummary",
    "ProfileResponse",
    "RankedProfileResponse",
    "SwipeRequest",
    "SwipeResponse",
    "SwipeOut",
    "MatchOut",
    "MessageCreate",
    "MessageResponse",
    "MatchResponse",
    "GithubLoginRequest",
    "LoginResponse",
]
