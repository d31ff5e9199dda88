"""
Feed Service - Swipe feed assembly

Loads the viewer and a capped batch of candidates they have not swiped on
yet, converts the ORM rows to score-engine profiles and ranks them.

Flow:
    1. Collect ids the viewer already swiped (batched single query)
    2. Load up to feed_batch_size other users with GitHub data
    3. rank_profiles(viewer, candidates), stable on ties
"""

import logging
import time
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from devmatch.config import get_settings
from devmatch.middleware.metrics import record_match_score_latency
from devmatch.models import Swipe, User
from devmatch.services.matcher import (
    ActivityLevel,
    Language,
    MatchProfile,
    rank_profiles,
)

logger = logging.getLogger(__name__)

settings = get_settings()


def to_match_profile(user: User) -> MatchProfile:
    """
    Convert a stored user to a score-engine profile.

    An unset activity level is treated as medium. A stored value outside
    low/medium/high raises ValueError.
    """
    return MatchProfile(
        id=user.id,
        languages=tuple(Language(name=name) for name in (user.languages or [])),
        activity_level=ActivityLevel(user.activity_level or ActivityLevel.MEDIUM.value),
        interests=tuple(user.interests or []),
        location=user.location or None,
    )


async def load_candidates(
    db: AsyncSession,
    user_id: str,
    limit: Optional[int] = None,
) -> List[User]:
    """Users other than the viewer, not yet swiped by them, with GitHub data."""
    swiped = select(Swipe.target_id).where(Swipe.user_id == user_id)
    query = (
        select(User)
        .where(
            User.id != user_id,
            User.id.not_in(swiped),
            User.github_id.is_not(None),
        )
        .order_by(User.created_at, User.id)
        .limit(settings.feed_batch_size if limit is None else limit)
    )
    result = await db.execute(query)
    return list(result.scalars().all())


async def build_feed(db: AsyncSession, viewer: User) -> List[Tuple[User, int]]:
    """
    Ranked swipe feed for a viewer.

    Returns:
        (candidate user, match score) pairs, highest score first
    """
    candidates = await load_candidates(db, viewer.id)
    by_id = {user.id: user for user in candidates}

    start = time.perf_counter()
    ranked = rank_profiles(
        to_match_profile(viewer),
        [to_match_profile(user) for user in candidates],
    )
    record_match_score_latency(time.perf_counter() - start)

    logger.info(f"Built feed of {len(ranked)} profiles for user {viewer.id}")
    return [(by_id[item.profile.id], item.match_score) for item in ranked]
