from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, or_
from devmatch.database import get_db
from devmatch.models import Swipe, Match, Message
from devmatch.auth import get_current_user

router = APIRouter()


@router.get("")
async def get_stats(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user),
):
    # Swipes given, split by liked/passed in one GROUP BY
    swipe_query = (
        select(Swipe.liked, func.count(Swipe.id))
        .where(Swipe.user_id == user_id)
        .group_by(Swipe.liked)
    )
    swipe_result = await db.execute(swipe_query)
    swipe_counts = {bool(row[0]): row[1] for row in swipe_result.all()}

    likes_result = await db.execute(
        select(func.count(Swipe.id)).where(Swipe.target_id == user_id, Swipe.liked.is_(True))
    )
    likes_received = likes_result.scalar() or 0

    matches_result = await db.execute(
        select(func.count(Match.id)).where(
            or_(Match.user1_id == user_id, Match.user2_id == user_id)
        )
    )
    total_matches = matches_result.scalar() or 0

    unread_result = await db.execute(
        select(func.count(Message.id)).where(
            Message.receiver_id == user_id, Message.read.is_(False)
        )
    )
    unread_messages = unread_result.scalar() or 0

    return {
        "likes_given": swipe_counts.get(True, 0),
        "passes_given": swipe_counts.get(False, 0),
        "likes_received": likes_received,
        "matches": total_matches,
        "unread_messages": unread_messages,
    }
