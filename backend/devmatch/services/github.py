"""
GitHub Service - Profile data for matching

Fetches a developer's GitHub account and repositories and derives the
attributes the score engine compares:

    - languages: primary language of each recent repo, by share of repos
    - interests: unique repository topics (first 5)
    - activity_level: banded estimate from public repos and followers

API Usage:
    - GET /user or /users/{username}
    - GET /users/{username}/repos?sort=updated (10 most recent)
    - GET /repos/{owner}/{repo}/languages (optional byte breakdown)
"""

import logging
from collections import Counter
from typing import Any, Dict, List, Optional

import httpx

from devmatch.config import get_settings
from devmatch.services.matcher import ActivityLevel, Language, round_half_up

logger = logging.getLogger(__name__)

settings = get_settings()

# GitHub linguist colours for common languages
LANGUAGE_COLORS = {
    "JavaScript": "#f1e05a",
    "TypeScript": "#3178c6",
    "Python": "#3572A5",
    "Java": "#b07219",
    "C#": "#178600",
    "PHP": "#4F5D95",
    "Ruby": "#701516",
    "Go": "#00ADD8",
    "Rust": "#dea584",
    "Swift": "#F05138",
    "Kotlin": "#A97BFF",
    "Dart": "#00B4AB",
    "HTML": "#e34c26",
    "CSS": "#563d7c",
    "C++": "#f34b7d",
    "C": "#555555",
    "Shell": "#89e051",
    "Jupyter Notebook": "#DA5B0B",
    "Vue": "#41b883",
    "React": "#61dafb",
    "Angular": "#dd0031",
}

DEFAULT_LANGUAGE_COLOR = "#8e44ad"

HIGH_ACTIVITY_THRESHOLD = 500
MEDIUM_ACTIVITY_THRESHOLD = 100

MAX_INTERESTS = 5
MAX_STORED_REPOS = 5


class GitHubError(Exception):
    """Raised when the GitHub API cannot be reached or rejects a request."""


def get_language_color(language: str) -> str:
    return LANGUAGE_COLORS.get(language, DEFAULT_LANGUAGE_COLOR)


def determine_activity_level(commit_count: int) -> ActivityLevel:
    """Band a contribution count: >500 high, >100 medium, otherwise low."""
    if commit_count > HIGH_ACTIVITY_THRESHOLD:
        return ActivityLevel.HIGH
    if commit_count > MEDIUM_ACTIVITY_THRESHOLD:
        return ActivityLevel.MEDIUM
    return ActivityLevel.LOW


def estimate_activity(public_repos: int, followers: int) -> ActivityLevel:
    """Activity estimate used at sign-in, where commit counts are not fetched."""
    return determine_activity_level((public_repos or 0) * 50 + (followers or 0) * 10)


def extract_languages_from_repos(repos: List[Dict[str, Any]]) -> List[Language]:
    """
    Share of repos per primary language, most common first.

    Repos without a detected language are ignored. Percentages are rounded half up
    to whole numbers; ties keep first-seen order.
    """
    counts = Counter(repo["language"] for repo in repos if repo.get("language"))
    total = sum(counts.values())
    if not total:
        return []

    languages = [
        Language(name=name, percentage=round_half_up(count / total * 100))
        for name, count in counts.items()
    ]
    return sorted(languages, key=lambda lang: lang.percentage, reverse=True)


def extract_interests(repos: List[Dict[str, Any]], limit: int = MAX_INTERESTS) -> List[str]:
    """Unique repo topics in first-seen order, capped at `limit`."""
    topics: Dict[str, None] = {}
    for repo in repos:
        for topic in repo.get("topics") or []:
            topics.setdefault(topic, None)
    return list(topics)[:limit]


def summarize_repo(repo: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": repo.get("name"),
        "url": repo.get("html_url"),
        "description": repo.get("description"),
        "language": repo.get("language"),
        "stars": repo.get("stargazers_count") or 0,
    }


def build_user_data(github_user: Dict[str, Any], repos: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Transform raw GitHub API payloads into User column values.

    Args:
        github_user: Response body of GET /user
        repos: Response body of GET /users/{login}/repos

    Returns:
        Dict of User attributes (github_id, username, languages, repos, ...)
    """
    languages = extract_languages_from_repos(repos)
    activity = estimate_activity(
        github_user.get("public_repos", 0),
        github_user.get("followers", 0),
    )
    top_repos = sorted(repos, key=lambda r: r.get("stargazers_count") or 0, reverse=True)

    return {
        "github_id": str(github_user["id"]),
        "username": github_user.get("login"),
        "name": github_user.get("name"),
        "email": github_user.get("email"),
        "avatar_url": github_user.get("avatar_url"),
        "bio": github_user.get("bio"),
        "location": github_user.get("location") or None,
        "languages": [lang.name for lang in languages],
        "repos": [summarize_repo(repo) for repo in top_repos[:MAX_STORED_REPOS]],
        "activity_level": activity.value,
        "interests": extract_interests(repos),
    }


class GitHubClient:
    """
    Minimal async client for the GitHub REST API.

    Args:
        access_token: OAuth token of the signed-in user
        transport: Optional httpx transport (tests inject a MockTransport)
    """

    def __init__(
        self,
        access_token: str,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.access_token = access_token
        self.base_url = (base_url or settings.github_api_url).rstrip("/")
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {self.access_token}",
                "Accept": "application/vnd.github+json",
            },
            timeout=settings.github_timeout,
            transport=self.transport,
        )

    async def _get(self, path: str, params: Optional[dict] = None) -> Any:
        async with self._client() as client:
            try:
                response = await client.get(path, params=params)
                response.raise_for_status()
                return response.json()
            except (httpx.HTTPError, ValueError) as e:
                # ValueError covers a 2xx body that is not JSON
                logger.warning(f"GitHub API error for {path}: {e}")
                raise GitHubError(f"GitHub request failed: {path}") from e

    async def fetch_user(self, username: Optional[str] = None) -> Dict[str, Any]:
        """Fetch a user; the token's owner when username is None."""
        path = f"/users/{username}" if username else "/user"
        return await self._get(path)

    async def fetch_user_repos(
        self,
        username: str,
        per_page: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Most recently updated repos of a user."""
        params = {
            "sort": "updated",
            "direction": "desc",
            "per_page": per_page or settings.github_repos_per_page,
        }
        return await self._get(f"/users/{username}/repos", params=params)

    async def fetch_repo_languages(self, owner: str, repo: str) -> List[Language]:
        """Byte share per language of one repo, as whole-number percentages."""
        data = await self._get(f"/repos/{owner}/{repo}/languages")
        total = sum(data.values())
        if not total:
            return []
        return [
            Language(name=name, percentage=round_half_up(count / total * 100))
            for name, count in data.items()
        ]
