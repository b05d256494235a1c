"""Tests for bulk author creation and id-list retrieval."""

import uuid

import pytest

from courselib.routes.author_collections import InvalidIdentifierListError, parse_identifier_list


def author_payload(first_name: str, last_name: str) -> dict:
    return {
        "firstName": first_name,
        "lastName": last_name,
        "dateOfBirth": "1701-12-16",
        "mainCategory": "Singing",
    }


class TestParseIdentifierList:
    def test_parses_ids(self):
        first, second = uuid.uuid4(), uuid.uuid4()

        assert parse_identifier_list(f"{first}, {second}") == [first, second]

    @pytest.mark.parametrize("raw", ["", "not-a-uuid", f"{uuid.uuid4()},"])
    def test_rejects_malformed_lists(self, raw):
        with pytest.raises(InvalidIdentifierListError):
            parse_identifier_list(raw)


class TestAuthorCollections:
    """Tests for /api/authorcollections."""

    @pytest.mark.asyncio
    async def test_create_and_fetch_collection(self, client):
        response = await client.post(
            "/api/authorcollections",
            json=[author_payload("Eli", "Sweet"), author_payload("Arnold", "Stafford")],
        )

        assert response.status_code == 201
        created = response.json()
        assert [author["name"] for author in created] == ["Eli Sweet", "Arnold Stafford"]

        fetched = await client.get(response.headers["Location"])
        assert fetched.status_code == 200
        assert [author["name"] for author in fetched.json()] == ["Arnold Stafford", "Eli Sweet"]

    @pytest.mark.asyncio
    async def test_fetch_existing_authors(self, client, authors):
        ids = ",".join(str(author.id) for author in authors[:2])

        response = await client.get(f"/api/authorcollections/({ids})")

        assert [author["name"] for author in response.json()] == ["Anne Brown", "Anne Zimmer"]

    @pytest.mark.asyncio
    async def test_missing_author_in_collection(self, client, authors):
        response = await client.get(f"/api/authorcollections/({authors[0].id},{uuid.uuid4()})")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_malformed_id_list(self, client):
        response = await client.get("/api/authorcollections/(nope)")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_empty_collection_is_rejected(self, client):
        response = await client.post("/api/authorcollections", json=[])

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_failures_are_indexed_and_nothing_is_stored(self, client):
        response = await client.post(
            "/api/authorcollections",
            json=[author_payload("Eli", "Sweet"), author_payload("", "Stafford")],
        )

        assert response.status_code == 422
        assert [failure["field"] for failure in response.json()["detail"]] == ["[1].firstName"]
        assert (await client.get("/api/authors")).json() == []
