"""
DevMatch API - Main Application Entry Point

This module initializes the FastAPI application with:
- Logging configuration from settings
- Database schema initialization
- CORS middleware for frontend communication
- Prometheus metrics middleware
- API router registration

Architecture:
    FastAPI App
    ├── Lifespan Management (startup)
    ├── CORS Middleware (settings.cors_origins)
    ├── Prometheus Middleware (/metrics)
    └── API Router
        ├── /auth - GitHub sign-in, session cookie
        ├── /profile - Own profile read/update
        ├── /profiles - Ranked swipe feed
        ├── /swipe - Like/pass, mutual-like matching
        ├── /matches - Match list
        ├── /messages - Per-match chat
        └── /stats - Dashboard counters
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from devmatch.config import get_settings
from devmatch.database import init_db
from devmatch.api import api_router
from devmatch.middleware import setup_metrics

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle events.

    Startup:
        1. Initialize database tables

    Yields:
        Control to the application during its runtime
    """
    await init_db()
    logger.info("DevMatch API started")
    yield


app = FastAPI(
    title="DevMatch API",
    description="Swipe to match developers by GitHub profile similarity",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_metrics(app)

app.include_router(api_router)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("devmatch.main:app", host="0.0.0.0", port=8000)
