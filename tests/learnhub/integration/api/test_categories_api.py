"""API tests for the /categories endpoints."""

from uuid import uuid4

import pytest


class TestCategoriesApi:
    """CRUD over /categories."""

    @pytest.mark.asyncio
    async def test_create(self, client, api_v1_prefix):
        response = await client.post(
            f"{api_v1_prefix}/categories", json={"name": "  Python  "}
        )

        assert response.status_code == 201
        assert response.json()["name"] == "Python"
        assert response.json()["description"] is None

    @pytest.mark.asyncio
    async def test_blank_name_is_400(self, client, api_v1_prefix):
        response = await client.post(f"{api_v1_prefix}/categories", json={"name": " "})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_list_and_get(self, client, api_v1_prefix, created_category):
        listed = await client.get(f"{api_v1_prefix}/categories")
        fetched = await client.get(
            f"{api_v1_prefix}/categories/{created_category['id']}"
        )

        assert [c["id"] for c in listed.json()] == [created_category["id"]]
        assert fetched.status_code == 200
        assert fetched.json()["name"] == "Python"

    @pytest.mark.asyncio
    async def test_update(self, client, api_v1_prefix, created_category):
        response = await client.put(
            f"{api_v1_prefix}/categories/{created_category['id']}",
            json={"name": "Python 3", "description": None},
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Python 3"
        assert response.json()["description"] is None

    @pytest.mark.asyncio
    async def test_delete(self, client, api_v1_prefix, created_category):
        url = f"{api_v1_prefix}/categories/{created_category['id']}"

        delete_response = await client.delete(url)
        get_response = await client.get(url)

        assert delete_response.status_code == 204
        assert get_response.status_code == 404
        assert get_response.json()["code"] == "CATEGORY_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_missing_is_404(self, client, api_v1_prefix):
        response = await client.put(
            f"{api_v1_prefix}/categories/{uuid4()}", json={"name": "Python"}
        )

        assert response.status_code == 404
