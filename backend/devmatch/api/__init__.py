from fastapi import APIRouter
from devmatch.api import auth, profile, profiles, swipe, matches, messages, stats

api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
api_router.include_router(profiles.router, prefix="/profiles", tags=["feed"])
api_router.include_router(swipe.router, prefix="/swipe", tags=["swipe"])
api_router.include_router(matches.router, prefix="/matches", tags=["matches"])
api_router.include_router(messages.router, prefix="/messages", tags=["messages"])
api_router.include_router(stats.router, prefix="/stats", tags=["stats"])
