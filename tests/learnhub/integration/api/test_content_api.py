"""API tests for the /content endpoints."""

import logging
from uuid import uuid4

import pytest


@pytest.fixture
def content_payload(created_user, created_category) -> dict:
    return {
        "title": "Intro",
        "description": "First steps",
        "type": "VIDEO",
        "topic": created_category["id"],
        "created_by": created_user["id"],
    }


@pytest.fixture
async def created_content(client, api_v1_prefix, content_payload) -> dict:
    response = await client.post(f"{api_v1_prefix}/content", json=content_payload)
    assert response.status_code == 201
    return response.json()


class TestCreateContent:
    """POST /content."""

    @pytest.mark.asyncio
    async def test_create(self, client, api_v1_prefix, content_payload):
        response = await client.post(f"{api_v1_prefix}/content", json=content_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "Intro"
        assert body["type"] == "video"
        assert body["topic"] == content_payload["topic"]
        assert body["created_by"] == content_payload["created_by"]

    @pytest.mark.asyncio
    async def test_duplicate_title_ignoring_case_is_409(
        self, client, api_v1_prefix, content_payload, created_content
    ):
        payload = {**content_payload, "title": "intro"}

        response = await client.post(f"{api_v1_prefix}/content", json=payload)

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_TITLE"

    @pytest.mark.asyncio
    async def test_duplicate_accented_title_is_409(
        self, client, api_v1_prefix, content_payload
    ):
        url = f"{api_v1_prefix}/content"
        first = await client.post(url, json={**content_payload, "title": "École"})

        second = await client.post(url, json={**content_payload, "title": "école"})
        listing = await client.get(url)

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()["code"] == "DUPLICATE_TITLE"
        assert [c["title"] for c in listing.json()] == ["École"]

    @pytest.mark.asyncio
    async def test_unknown_topic_is_404_and_nothing_stored(
        self, client, api_v1_prefix, content_payload
    ):
        payload = {**content_payload, "topic": str(uuid4())}

        response = await client.post(f"{api_v1_prefix}/content", json=payload)
        listed = await client.get(f"{api_v1_prefix}/content")

        assert response.status_code == 404
        assert response.json()["code"] == "CATEGORY_NOT_FOUND"
        assert listed.json() == []

    @pytest.mark.asyncio
    async def test_malformed_topic_is_400(self, client, api_v1_prefix, content_payload):
        payload = {**content_payload, "topic": "python"}

        response = await client.post(f"{api_v1_prefix}/content", json=payload)

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_FORMAT"

    @pytest.mark.asyncio
    async def test_unknown_creator_is_404(
        self, client, api_v1_prefix, content_payload
    ):
        payload = {**content_payload, "created_by": str(uuid4())}

        response = await client.post(f"{api_v1_prefix}/content", json=payload)

        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_inactive_creator_is_409(
        self, client, api_v1_prefix, content_payload, created_user
    ):
        await client.delete(f"{api_v1_prefix}/users/{created_user['id']}")

        response = await client.post(f"{api_v1_prefix}/content", json=content_payload)

        assert response.status_code == 409
        assert response.json()["code"] == "INACTIVE_CREATOR"

    @pytest.mark.asyncio
    async def test_unsupported_type_is_400(
        self, client, api_v1_prefix, content_payload
    ):
        payload = {**content_payload, "type": "podcast"}

        response = await client.post(f"{api_v1_prefix}/content", json=payload)

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_CONTENT_TYPE"


class TestContentLifecycle:
    """GET, PUT, PATCH type and DELETE."""

    @pytest.mark.asyncio
    async def test_get(self, client, api_v1_prefix, created_content):
        response = await client.get(f"{api_v1_prefix}/content/{created_content['id']}")

        assert response.status_code == 200
        assert response.json()["title"] == "Intro"

    @pytest.mark.asyncio
    async def test_update_keeping_own_title(
        self, client, api_v1_prefix, content_payload, created_content
    ):
        response = await client.put(
            f"{api_v1_prefix}/content/{created_content['id']}",
            json={
                "title": "INTRO",
                "description": "Reworded",
                "topic": content_payload["topic"],
            },
        )

        assert response.status_code == 200
        assert response.json()["title"] == "INTRO"
        assert response.json()["description"] == "Reworded"
        assert response.json()["created_at"] == created_content["created_at"]

    @pytest.mark.asyncio
    async def test_update_to_taken_title_is_409(
        self, client, api_v1_prefix, content_payload, created_content
    ):
        second = await client.post(
            f"{api_v1_prefix}/content",
            json={**content_payload, "title": "Advanced"},
        )

        response = await client.put(
            f"{api_v1_prefix}/content/{second.json()['id']}",
            json={"title": "intro", "topic": content_payload["topic"]},
        )

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_change_type(self, client, api_v1_prefix, created_content):
        response = await client.patch(
            f"{api_v1_prefix}/content/{created_content['id']}/type",
            json={"type": "Quiz"},
        )

        assert response.status_code == 200
        assert response.json()["type"] == "quiz"

    @pytest.mark.asyncio
    async def test_delete(self, client, api_v1_prefix, created_content):
        url = f"{api_v1_prefix}/content/{created_content['id']}"

        delete_response = await client.delete(url)
        get_response = await client.get(url)

        assert delete_response.status_code == 204
        assert get_response.status_code == 404
        assert get_response.json()["code"] == "CONTENT_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_delete_logged_once(
        self, client, api_v1_prefix, created_content, caplog
    ):
        caplog.set_level(logging.INFO, logger="learnhub")
        caplog.clear()

        await client.delete(f"{api_v1_prefix}/content/{created_content['id']}")

        deletions = [
            r
            for r in caplog.records
            if r.name.startswith("learnhub")
            and r.levelno >= logging.INFO
            and created_content["id"] in r.getMessage()
        ]
        assert len(deletions) == 1


class TestSearchContent:
    """GET /content/search."""

    @pytest.mark.asyncio
    async def test_search(self, client, api_v1_prefix, content_payload):
        for title, description in [
            ("Intro", "basics"),
            ("Loops", "for and while"),
            ("Decorators", "Advanced intro to wrappers"),
        ]:
            await client.post(
                f"{api_v1_prefix}/content",
                json={**content_payload, "title": title, "description": description},
            )

        response = await client.get(
            f"{api_v1_prefix}/content/search", params={"q": "INTRO"}
        )

        assert response.status_code == 200
        assert {c["title"] for c in response.json()} == {"Intro", "Decorators"}

    @pytest.mark.asyncio
    async def test_empty_query_returns_everything(
        self, client, api_v1_prefix, created_content
    ):
        response = await client.get(f"{api_v1_prefix}/content/search")

        assert [c["id"] for c in response.json()] == [created_content["id"]]
