#!/usr/bin/env python3
"""
Seed demo developers, swipes and a match for local development.

Creates a handful of GitHub-style profiles so the swipe feed has
candidates to rank without signing in real accounts.

Usage:
    cd backend
    python -m scripts.seed_users            # seed if the users table is empty
    python -m scripts.seed_users --reset    # drop and recreate all tables first
    python -m scripts.seed_users --verify   # print users with scores vs the first one
"""

import argparse
import asyncio
import logging
import uuid

from sqlalchemy import select, func

from devmatch.database import Base, async_session, engine, init_db
from devmatch.models import Match, Swipe, User
from devmatch.services.feed import to_match_profile
from devmatch.services.matcher import rank_profiles

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


SEED_USERS = [
    {
        "name": "John Doe",
        "email": "john@example.com",
        "username": "johndoe",
        "avatar_url": "https://avatars.githubusercontent.com/u/1?v=4",
        "bio": "Full-stack developer passionate about React and Node.js",
        "tagline": "Building the future, one line of code at a time",
        "languages": ["JavaScript", "TypeScript", "Python"],
        "repos": [
            {"name": "awesome-project", "description": "An awesome project", "stars": 100, "language": "TypeScript"},
        ],
        "activity_level": "high",
        "interests": ["Web Development", "Open Source", "AI"],
        "location": "San Francisco, CA",
    },
    {
        "name": "Jane Smith",
        "email": "jane@example.com",
        "username": "janesmith",
        "avatar_url": "https://avatars.githubusercontent.com/u/2?v=4",
        "bio": "Backend developer specializing in Python and Go",
        "tagline": "Making the backend magic happen",
        "languages": ["Python", "Go", "Rust"],
        "repos": [
            {"name": "backend-service", "description": "A high-performance backend service", "stars": 50, "language": "Go"},
        ],
        "activity_level": "medium",
        "interests": ["Backend Development", "DevOps", "Cloud Computing"],
        "location": "New York, NY",
    },
    {
        "name": "Alex Johnson",
        "email": "alex@example.com",
        "username": "alexjohnson",
        "avatar_url": "https://avatars.githubusercontent.com/u/3?v=4",
        "bio": "Frontend developer with a passion for design systems",
        "tagline": "Creating beautiful user experiences",
        "languages": ["JavaScript", "TypeScript", "CSS"],
        "repos": [
            {"name": "design-system", "description": "A comprehensive design system", "stars": 200, "language": "TypeScript"},
        ],
        "activity_level": "high",
        "interests": ["UI/UX", "Design Systems", "Accessibility"],
        "location": "London, UK",
    },
    {
        "name": "Priya Patel",
        "email": "priya@example.com",
        "username": "priyapatel",
        "avatar_url": "https://avatars.githubusercontent.com/u/4?v=4",
        "bio": "ML engineer shipping models to production",
        "tagline": "Gradients all the way down",
        "languages": ["Python", "Jupyter Notebook"],
        "repos": [
            {"name": "tiny-transformers", "description": "Small transformer experiments", "stars": 320, "language": "Python"},
        ],
        "activity_level": "medium",
        "interests": ["AI", "Open Source"],
        "location": "Remote",
    },
]


async def seed(session) -> int:
    """Insert seed users, two swipes and the resulting match. Returns users created."""
    users = []
    for data in SEED_USERS:
        user = User(github_id=f"seed-{uuid.uuid4().hex[:8]}", **data)
        session.add(user)
        users.append(user)
    await session.flush()

    # John and Jane like each other; Alex likes John
    session.add_all([
        Swipe(user_id=users[0].id, target_id=users[1].id, liked=True),
        Swipe(user_id=users[1].id, target_id=users[0].id, liked=True),
        Swipe(user_id=users[2].id, target_id=users[0].id, liked=True),
    ])
    user1_id, user2_id = sorted((users[0].id, users[1].id))
    session.add(Match(user1_id=user1_id, user2_id=user2_id))

    await session.commit()
    return len(users)


async def verify(session) -> None:
    """Log every seeded user ranked against the first one."""
    result = await session.execute(select(User).order_by(User.created_at))
    users = result.scalars().all()
    if not users:
        logger.info("No users in database")
        return

    viewer, candidates = users[0], users[1:]
    logger.info(f"Scores against {viewer.username}:")
    ranked = rank_profiles(to_match_profile(viewer), [to_match_profile(u) for u in candidates])
    by_id = {u.id: u for u in candidates}
    for item in ranked:
        logger.info(f"  {item.match_score:3d}  {by_id[item.profile.id].username}")


async def main() -> None:
    parser = argparse.ArgumentParser(description="Seed DevMatch demo data")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate tables first")
    parser.add_argument("--verify", action="store_true", help="Print scores instead of seeding")

    args = parser.parse_args()

    if args.reset:
        logger.info("Dropping all tables...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    await init_db()

    async with async_session() as session:
        if args.verify:
            await verify(session)
            return

        count_result = await session.execute(select(func.count(User.id)))
        if count_result.scalar():
            logger.info("Users already present, skipping seed (use --reset to reseed)")
            return

        count = await seed(session)
        logger.info(f"Seeded {count} users")


if __name__ == "__main__":
    asyncio.run(main())
