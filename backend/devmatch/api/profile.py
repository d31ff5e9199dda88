from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from devmatch.database import get_db
from devmatch.models import User
from devmatch.schemas import ProfileResponse, ProfileUpdate
from devmatch.auth import get_current_user

router = APIRouter()


async def get_user_or_404(db: AsyncSession, user_id: str) -> User:
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()

    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    return user


@router.get("", response_model=ProfileResponse)
async def get_profile(
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user),
):
    user = await get_user_or_404(db, user_id)
    return ProfileResponse.from_user(user)


@router.patch("", response_model=ProfileResponse)
async def update_profile(
    update: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user),
):
    user = await get_user_or_404(db, user_id)

    update_data = update.model_dump(exclude_unset=True)

    # interests is a list column; an explicit null is ignored
    if update_data.get("interests", []) is None:
        update_data.pop("interests")

    for field, value in update_data.items():
        setattr(user, field, value)

    await db.commit()
    await db.refresh(user)

    return ProfileResponse.from_user(user)
