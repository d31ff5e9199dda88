from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, or_
from devmatch.database import get_db
from devmatch.models import Match, Message
from devmatch.schemas import MessageCreate, MessageResponse
from devmatch.auth import get_current_user

router = APIRouter()


async def get_member_match(db: AsyncSession, match_id: str, user_id: str) -> Match:
    """Load a match the user belongs to; 404 otherwise."""
    result = await db.execute(
        select(Match).where(
            Match.id == match_id,
            or_(Match.user1_id == user_id, Match.user2_id == user_id),
        )
    )
    match = result.scalar_one_or_none()

    if not match:
        raise HTTPException(status_code=404, detail="Match not found or unauthorized")

    return match


@router.get("", response_model=list[MessageResponse])
async def list_messages(
    match_id: str = Query(...),
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user),
):
    """Conversation of a match, oldest first. Marks incoming messages read."""
    await get_member_match(db, match_id, user_id)

    result = await db.execute(
        select(Message)
        .where(Message.match_id == match_id)
        .order_by(Message.created_at.asc())
    )
    messages = [MessageResponse.model_validate(m) for m in result.scalars().all()]

    await db.execute(
        update(Message)
        .where(
            Message.match_id == match_id,
            Message.receiver_id == user_id,
            Message.read.is_(False),
        )
        .values(read=True)
    )
    await db.commit()

    return messages


@router.post("", response_model=MessageResponse)
async def send_message(
    request: MessageCreate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user),
):
    match = await get_member_match(db, request.match_id, user_id)

    message = Message(
        match_id=match.id,
        sender_id=user_id,
        receiver_id=match.other_user_id(user_id),
        content=request.content,
    )
    db.add(message)
    await db.commit()
    await db.refresh(message)

    return MessageResponse.model_validate(message)
