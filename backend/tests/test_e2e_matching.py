"""
End-to-end Integration Test for developer matching

This test verifies the complete user flow:
1. Developers sign in with GitHub (API mocked) and profiles are derived
2. The feed ranks candidates by match score, stable on ties
3. Mutual likes create a match
4. Matched developers exchange messages
"""

import pytest
from unittest.mock import AsyncMock, patch


def github_account(id, login, languages, topics, location, public_repos=20, followers=10):
    """GitHub user + repos payloads; one repo per language, topics on the first."""
    user = {
        "id": id,
        "login": login,
        "name": login.title(),
        "avatar_url": f"https://avatars.githubusercontent.com/u/{id}",
        "bio": None,
        "location": location,
        "public_repos": public_repos,
        "followers": followers,
    }
    repos = [
        {
            "name": f"{login}-{i}",
            "html_url": f"https://github.com/{login}/{login}-{i}",
            "description": None,
            "language": language,
            "stargazers_count": i,
            "topics": list(topics) if i == 0 else [],
        }
        for i, language in enumerate(languages)
    ]
    return user, repos


class TestEndToEndMatching:
    """Full flow through the HTTP API."""

    async def sign_in(self, client, account):
        user, repos = account
        github = AsyncMock()
        github.fetch_user.return_value = user
        github.fetch_user_repos.return_value = repos

        with patch("devmatch.api.auth.get_github_client", return_value=github):
            response = await client.post("/auth/github", json={"access_token": f"token-{user['login']}"})

        assert response.status_code == 200
        return response.json()["user_id"]

    @pytest.mark.asyncio
    async def test_feed_scores_match_worked_example(self, client, auth_headers):
        """TypeScript/Python NYC dev vs TypeScript/Go Boston dev scores 64."""
        viewer_id = await self.sign_in(client, github_account(
            1, "viewer", ["TypeScript", "Python"], ["AI", "Web"], "NYC, USA"))
        candidate_id = await self.sign_in(client, github_account(
            2, "candidate", ["TypeScript", "Go"], ["AI", "DevOps"], "Boston, USA"))

        response = await client.get("/profiles", headers=auth_headers(viewer_id))

        body = response.json()
        assert [(p["id"], p["match_score"]) for p in body] == [(candidate_id, 64)]

    @pytest.mark.asyncio
    async def test_feed_order_is_stable_for_ties(self, client, auth_headers):
        viewer_id = await self.sign_in(client, github_account(
            10, "viewer", ["Python", "Go"], ["AI", "Web"], "London, UK"))
        x_id = await self.sign_in(client, github_account(
            11, "xavier", ["Python"], [], "Paris, France"))
        y_id = await self.sign_in(client, github_account(
            12, "yara", ["Python", "Go"], ["AI", "Web"], "Leeds, UK"))
        z_id = await self.sign_in(client, github_account(
            13, "zed", ["Go"], [], "Tokyo, Japan"))

        response = await client.get("/profiles", headers=auth_headers(viewer_id))

        ranked = [(p["id"], p["match_score"]) for p in response.json()]
        assert ranked == [(y_id, 94), (x_id, 60), (z_id, 60)]

    @pytest.mark.asyncio
    async def test_like_match_and_chat(self, client, auth_headers):
        alice_id = await self.sign_in(client, github_account(
            20, "alice", ["Rust"], ["systems"], "Remote"))
        bob_id = await self.sign_in(client, github_account(
            21, "bob", ["Rust", "C"], ["systems"], "remote-first, EU"))

        alice = auth_headers(alice_id)
        bob = auth_headers(bob_id)

        feed = (await client.get("/profiles", headers=alice)).json()
        assert feed[0]["id"] == bob_id
        assert feed[0]["match_score"] == 100

        first = await client.post("/swipe", json={"target_id": bob_id, "liked": True}, headers=alice)
        assert first.json()["match"] is None

        second = await client.post("/swipe", json={"target_id": alice_id, "liked": True}, headers=bob)
        match_id = second.json()["match"]["id"]

        # Both feeds are now empty; both see the match
        assert (await client.get("/profiles", headers=alice)).json() == []
        assert (await client.get("/profiles", headers=bob)).json() == []
        assert (await client.get("/matches", headers=alice)).json()[0]["user"]["id"] == bob_id

        await client.post("/messages", json={"match_id": match_id, "content": "Borrow checker pairing?"},
                          headers=bob)
        stats = (await client.get("/stats", headers=alice)).json()
        assert stats["unread_messages"] == 1

        messages = (await client.get("/messages", params={"match_id": match_id}, headers=alice)).json()
        assert [m["content"] for m in messages] == ["Borrow checker pairing?"]

        stats = (await client.get("/stats", headers=alice)).json()
        assert stats["unread_messages"] == 0
        assert stats["matches"] == 1
