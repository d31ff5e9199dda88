import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select
from devmatch.database import get_db
from devmatch.models import Swipe, Match
from devmatch.schemas import SwipeRequest, SwipeResponse, SwipeOut, MatchOut
from devmatch.auth import get_current_user
from devmatch.api.profile import get_user_or_404
from devmatch.middleware.metrics import record_swipe, record_match_created

logger = logging.getLogger(__name__)

router = APIRouter()


async def get_swipe(
    db: AsyncSession,
    user_id: str,
    target_id: str,
    liked: Optional[bool] = None,
) -> Optional[Swipe]:
    query = select(Swipe).where(Swipe.user_id == user_id, Swipe.target_id == target_id)
    if liked is not None:
        query = query.where(Swipe.liked.is_(liked))
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def create_match(db: AsyncSession, user_id: str, other_id: str) -> Optional[Match]:
    """
    Persist the match for a pair, stored with the smaller id first.

    Returns None when the pair already has a match, which happens when
    both users like each other at the same moment.
    """
    user1_id, user2_id = sorted((user_id, other_id))
    match = Match(user1_id=user1_id, user2_id=user2_id)
    db.add(match)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.info(f"Match between {user1_id} and {user2_id} already exists")
        return None

    await db.refresh(match)
    record_match_created()
    logger.info(f"Match {match.id} created between {user1_id} and {user2_id}")
    return match


@router.post("", response_model=SwipeResponse)
async def create_swipe(
    request: SwipeRequest,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user),
):
    """
    Record a like or pass on another developer.

    A like on someone who already liked the viewer creates a Match,
    returned alongside the swipe. The reverse like is looked up after the
    swipe is committed.
    """
    if request.target_id == user_id:
        raise HTTPException(status_code=400, detail="Cannot swipe on yourself")

    await get_user_or_404(db, request.target_id)

    conflict = HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Profile already swiped")
    if await get_swipe(db, user_id, request.target_id):
        raise conflict

    swipe = Swipe(user_id=user_id, target_id=request.target_id, liked=request.liked)
    db.add(swipe)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise conflict

    await db.refresh(swipe)
    record_swipe(request.liked)
    swipe_out = SwipeOut.model_validate(swipe)

    match = None
    if request.liked and await get_swipe(db, request.target_id, user_id, liked=True):
        match = await create_match(db, user_id, request.target_id)

    return SwipeResponse(
        success=True,
        swipe=swipe_out,
        match=MatchOut.model_validate(match) if match else None,
    )
