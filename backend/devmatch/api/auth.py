import logging
from fastapi import APIRouter, Depends, Response, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from devmatch.database import get_db
from devmatch.config import get_settings
from devmatch.models import User
from devmatch.schemas import GithubLoginRequest, LoginResponse
from devmatch.auth import create_session_token, get_current_user, COOKIE_NAME
from devmatch.services.github import GitHubClient, GitHubError, build_user_data

logger = logging.getLogger(__name__)

router = APIRouter()
settings = get_settings()


def get_github_client(access_token: str) -> GitHubClient:
    return GitHubClient(access_token)


@router.post("/github", response_model=LoginResponse)
async def github_login(
    request: GithubLoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """
    Sign in with a GitHub OAuth access token.

    Fetches the GitHub account and recent repos, creates or refreshes the
    matching User, and sets the session cookie.
    """
    client = get_github_client(request.access_token)
    try:
        github_user = await client.fetch_user()
        repos = await client.fetch_user_repos(github_user["login"])
    except GitHubError as e:
        logger.error(f"GitHub sign-in failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Could not fetch GitHub profile",
        )

    user_data = build_user_data(github_user, repos)

    result = await db.execute(select(User).where(User.github_id == user_data["github_id"]))
    user = result.scalar_one_or_none()

    if user:
        # Keep user-edited fields if GitHub has nothing for them
        if user.location and not user_data["location"]:
            user_data.pop("location")
        for field, value in user_data.items():
            setattr(user, field, value)
    else:
        user = User(**user_data)
        db.add(user)

    await db.commit()
    await db.refresh(user)
    logger.info(f"GitHub sign-in for {user.username} ({user.id})")

    token = create_session_token(user.id)
    response.set_cookie(
        key=COOKIE_NAME,
        value=token,
        httponly=True,
        max_age=settings.session_expire_days * 24 * 60 * 60,
        samesite="lax",
    )
    return LoginResponse(success=True, message="Logged in successfully", user_id=user.id)


@router.post("/logout", response_model=LoginResponse)
async def logout(response: Response):
    response.delete_cookie(COOKIE_NAME)
    return LoginResponse(success=True, message="Logged out successfully")


@router.get("/check")
async def check_auth(user_id: str = Depends(get_current_user)):
    return {"authenticated": True, "user_id": user_id}
