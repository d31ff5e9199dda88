"""
Tests for swipe feed assembly.

Run with: cd backend && pytest tests/test_feed.py -v
"""
import pytest
from unittest.mock import MagicMock

from devmatch.models import Swipe
from devmatch.services.feed import build_feed, load_candidates, to_match_profile
from devmatch.services.matcher import ActivityLevel, Language


class TestToMatchProfile:
    """Tests for ORM row → score-engine profile conversion."""

    def _user(self, **kwargs):
        user = MagicMock()
        user.id = "u1"
        user.languages = ["Python", "Go"]
        user.activity_level = "high"
        user.interests = ["AI"]
        user.location = "Berlin, Germany"
        for key, value in kwargs.items():
            setattr(user, key, value)
        return user

    def test_converts_fields(self):
        profile = to_match_profile(self._user())

        assert profile.id == "u1"
        assert profile.languages == (Language("Python"), Language("Go"))
        assert profile.activity_level is ActivityLevel.HIGH
        assert profile.interests == ("AI",)
        assert profile.location == "Berlin, Germany"

    def test_missing_activity_defaults_to_medium(self):
        profile = to_match_profile(self._user(activity_level=None))
        assert profile.activity_level is ActivityLevel.MEDIUM

    def test_invalid_activity_raises(self):
        with pytest.raises(ValueError):
            to_match_profile(self._user(activity_level="legendary"))

    def test_null_collections(self):
        profile = to_match_profile(self._user(languages=None, interests=None, location=""))
        assert profile.languages == ()
        assert profile.interests == ()
        assert profile.location is None


class TestLoadCandidates:
    """Tests for candidate batch selection."""

    @pytest.mark.asyncio
    async def test_excludes_self_swiped_and_non_github(self, db_session, create_user):
        viewer = await create_user()
        swiped = await create_user()
        fresh = await create_user()
        await create_user(github_id=None)

        db_session.add(Swipe(user_id=viewer.id, target_id=swiped.id, liked=False))
        await db_session.commit()

        candidates = await load_candidates(db_session, viewer.id)

        assert [c.id for c in candidates] == [fresh.id]

    @pytest.mark.asyncio
    async def test_swipes_by_others_do_not_hide_candidates(self, db_session, create_user):
        viewer = await create_user()
        other = await create_user()
        target = await create_user()

        db_session.add(Swipe(user_id=other.id, target_id=target.id, liked=True))
        await db_session.commit()

        candidates = await load_candidates(db_session, viewer.id)

        assert {c.id for c in candidates} == {other.id, target.id}

    @pytest.mark.asyncio
    async def test_batch_is_capped(self, db_session, create_user):
        viewer = await create_user()
        for _ in range(5):
            await create_user()

        candidates = await load_candidates(db_session, viewer.id, limit=3)

        assert len(candidates) == 3

    @pytest.mark.asyncio
    async def test_zero_limit_returns_nothing(self, db_session, create_user):
        viewer = await create_user()
        await create_user()

        assert await load_candidates(db_session, viewer.id, limit=0) == []


class TestBuildFeed:
    """Tests for ranked feed output."""

    @pytest.mark.asyncio
    async def test_ranked_highest_first(self, db_session, create_user):
        viewer = await create_user(
            languages=["TypeScript", "Python"],
            activity_level="high",
            interests=["AI", "Web"],
            location="NYC, USA",
        )
        weak = await create_user(activity_level="low", location="Paris, France")
        strong = await create_user(
            languages=["TypeScript", "Go"],
            activity_level="high",
            interests=["AI", "DevOps"],
            location="Boston, USA",
        )

        feed = await build_feed(db_session, viewer)

        assert [(user.id, score) for user, score in feed] == [(strong.id, 64), (weak.id, 0)]

    @pytest.mark.asyncio
    async def test_empty_feed(self, db_session, create_user):
        viewer = await create_user()
        assert await build_feed(db_session, viewer) == []
