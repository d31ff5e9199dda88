from pydantic import BaseModel
from typing import Optional
from devmatch.services.github import get_language_color


class LanguageResponse(BaseModel):
    name: str
    percentage: float = 0
    color: str


class RepoSummary(BaseModel):
    name: str
    url: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None
    stars: int = 0


class ProfileUpdate(BaseModel):
    tagline: Optional[str] = None
    location: Optional[str] = None
    interests: Optional[list[str]] = None


class ProfileSummary(BaseModel):
    id: str
    username: Optional[str] = None
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    tagline: Optional[str] = None
    location: Optional[str] = None
    languages: list[LanguageResponse]

    @classmethod
    def from_user(cls, user, **extra):
        # Percentages are not persisted; the store keeps names only
        languages = [
            LanguageResponse(name=name, percentage=0, color=get_language_color(name))
            for name in (user.languages or [])
        ]
        return cls(
            id=user.id,
            username=user.username,
            name=user.name,
            avatar_url=user.avatar_url,
            bio=user.bio,
            tagline=user.tagline,
            location=user.location,
            languages=languages,
            **cls.detail_fields(user),
            **extra,
        )

    @classmethod
    def detail_fields(cls, user) -> dict:
        return {}


class ProfileResponse(ProfileSummary):
    repos: list[RepoSummary]
    activity_level: Optional[str] = None
    interests: list[str]

    @classmethod
    def detail_fields(cls, user) -> dict:
        return {
            "repos": [RepoSummary(**repo) for repo in (user.repos or [])],
            "activity_level": user.activity_level,
            "interests": list(user.interests or []),
        }


class RankedProfileResponse(ProfileResponse):
    match_score: int
