from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from devmatch.database import get_db
from devmatch.schemas import RankedProfileResponse
from devmatch.auth import get_current_user
from devmatch.api.profile import get_user_or_404
from devmatch.services.feed import build_feed

router = APIRouter()


@router.get("", response_model=list[RankedProfileResponse])
async def list_profiles(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user),
):
    """Un-swiped candidates for the swipe feed, best match first."""
    viewer = await get_user_or_404(db, user_id)
    feed = await build_feed(db, viewer)
    return [
        RankedProfileResponse.from_user(user, match_score=score)
        for user, score in feed
    ]
