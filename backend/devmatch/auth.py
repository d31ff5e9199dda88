from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Request, HTTPException, status
from jose import JWTError, jwt
from devmatch.config import get_settings

settings = get_settings()

ALGORITHM = "HS256"
COOKIE_NAME = "session_token"


def create_session_token(user_id: str) -> str:
    expire = datetime.now(timezone.utc) + timedelta(days=settings.session_expire_days)
    to_encode = {"sub": user_id, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=ALGORITHM)


def verify_session_token(token: str) -> Optional[str]:
    """Return the user id carried by a valid token, else None."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
        return payload.get("sub")
    except JWTError:
        return None


async def get_current_user(request: Request) -> str:
    token = request.cookies.get(COOKIE_NAME)
    user_id = verify_session_token(token) if token else None
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user_id
