from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_
from devmatch.database import get_db
from devmatch.models import Match, Message, User
from devmatch.schemas import MatchResponse, MessageResponse, ProfileSummary
from devmatch.auth import get_current_user

router = APIRouter()


@router.get("", response_model=list[MatchResponse])
async def list_matches(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user),
):
    """The viewer's matches, newest first, with the other member and last message."""
    result = await db.execute(
        select(Match)
        .where(or_(Match.user1_id == user_id, Match.user2_id == user_id))
        .order_by(Match.created_at.desc())
    )
    matches = result.scalars().all()
    if not matches:
        return []

    other_ids = {match.other_user_id(user_id) for match in matches}
    users_result = await db.execute(select(User).where(User.id.in_(other_ids)))
    users = {user.id: user for user in users_result.scalars().all()}

    # Newest message per match, in a single query
    match_ids = [match.id for match in matches]
    messages_result = await db.execute(
        select(Message)
        .where(Message.match_id.in_(match_ids))
        .order_by(Message.created_at.desc())
    )
    last_messages = {}
    for message in messages_result.scalars().all():
        last_messages.setdefault(message.match_id, message)

    response = []
    for match in matches:
        other = users.get(match.other_user_id(user_id))
        if other is None:
            continue
        last = last_messages.get(match.id)
        response.append(
            MatchResponse(
                id=match.id,
                matched_at=match.created_at,
                user=ProfileSummary.from_user(other),
                last_message=MessageResponse.model_validate(last) if last else None,
            )
        )
    return response
