"""Integration tests for the search endpoints."""

import pytest

from tests.factories import RepositoryCellFactory, RepositoryColumnFactory, RepositoryRowFactory

pytestmark = pytest.mark.integration


def names(response):
    return {item["name"] for item in response.json()["items"]}


@pytest.fixture
async def rows(db_session, lab):
    """Rows in each repository; one Chemicals row carries a searchable lot number."""
    ethanol = RepositoryRowFactory.build(
        repository_id=lab["rep1"].id, name="Ethanol", created_by_id=lab["u1"].id
    )
    acetone = RepositoryRowFactory.build(
        repository_id=lab["rep1"].id, name="Acetone", created_by_id=lab["u1"].id
    )
    primer = RepositoryRowFactory.build(
        repository_id=lab["rep2"].id, name="Fwd primer", created_by_id=lab["u1"].id
    )
    hela = RepositoryRowFactory.build(
        repository_id=lab["rep3"].id, name="HeLa", created_by_id=lab["u3"].id
    )
    lot = RepositoryColumnFactory.build(repository_id=lab["rep1"].id, name="Lot")
    db_session.add_all([ethanol, acetone, primer, hela, lot])
    await db_session.flush()
    db_session.add(
        RepositoryCellFactory.build(
            repository_row_id=acetone.id, repository_column_id=lot.id, value="LOT-7731"
        )
    )
    await db_session.commit()
    return {"ethanol": ethanol, "acetone": acetone, "primer": primer, "hela": hela}


class TestProjectSearch:
    async def test_admin_sees_all_active_projects(self, client, auth_headers, lab):
        response = await client.get("/api/v1/search/projects", headers=auth_headers(lab["u1"]))

        assert response.status_code == 200
        assert names(response) == {
            "P1 Hidden cloning",
            "P2 Visible assays",
            "P4 Hidden but linked",
        }

    async def test_member_sees_visible_and_own_projects(self, client, auth_headers, lab):
        response = await client.get("/api/v1/search/projects", headers=auth_headers(lab["u2"]))

        assert names(response) == {"P2 Visible assays", "P4 Hidden but linked"}

    async def test_include_archived(self, client, auth_headers, lab):
        response = await client.get(
            "/api/v1/search/projects",
            params={"include_archived": "true", "query": "assays"},
            headers=auth_headers(lab["u2"]),
        )

        assert names(response) == {"P2 Visible assays", "P3 Archived assays"}

    async def test_other_team_sees_nothing(self, client, auth_headers, lab):
        response = await client.get("/api/v1/search/projects", headers=auth_headers(lab["u3"]))

        assert response.status_code == 200
        assert response.json()["items"] == []
        assert response.json()["total"] == 0

    async def test_unlimited_page(self, client, auth_headers, lab):
        response = await client.get(
            "/api/v1/search/projects", params={"page": -1}, headers=auth_headers(lab["u1"])
        )

        body = response.json()
        assert body["per_page"] is None
        assert body["total"] == 3
        assert not body["has_more"]

    async def test_sorted_by_name(self, client, auth_headers, lab):
        response = await client.get(
            "/api/v1/search/projects", params={"sort": "ztoa"}, headers=auth_headers(lab["u1"])
        )

        assert [item["name"] for item in response.json()["items"]] == [
            "P4 Hidden but linked",
            "P2 Visible assays",
            "P1 Hidden cloning",
        ]

    async def test_whole_word_option(self, client, auth_headers, lab):
        response = await client.get(
            "/api/v1/search/projects",
            params={"query": "assay", "whole_word": "true"},
            headers=auth_headers(lab["u1"]),
        )

        assert names(response) == set()

    async def test_current_team_header(self, client, auth_headers, lab):
        response = await client.get(
            "/api/v1/search/projects", headers=auth_headers(lab["u1"], lab["team_a"])
        )

        assert len(response.json()["items"]) == 3

    async def test_team_header_requires_membership(self, client, auth_headers, lab):
        response = await client.get(
            "/api/v1/search/projects", headers=auth_headers(lab["u3"], lab["team_a"])
        )

        assert response.status_code == 403
        assert "request_id" in response.json()

    async def test_invalid_page(self, client, auth_headers, lab):
        response = await client.get(
            "/api/v1/search/projects", params={"page": 0}, headers=auth_headers(lab["u1"])
        )

        assert response.status_code == 400

    async def test_missing_token(self, client, lab):
        response = await client.get("/api/v1/search/projects")

        assert response.status_code == 401


class TestRepositoryRowSearch:
    async def test_shared_team_sees_shared_and_own_rows(self, client, auth_headers, lab, rows):
        response = await client.get(
            "/api/v1/search/repository-rows", headers=auth_headers(lab["u3"])
        )

        assert response.status_code == 200
        assert names(response) == {"Ethanol", "Acetone", "HeLa"}

    async def test_counts_for_sentinel_page(self, client, auth_headers, lab, rows):
        response = await client.get(
            "/api/v1/search/repository-rows",
            params={"page": -1},
            headers=auth_headers(lab["u1"]),
        )

        assert response.json() == {
            "counts": {
                str(lab["rep1"].id): 2,
                str(lab["rep2"].id): 1,
                str(lab["rep3"].id): 1,
            }
        }

    async def test_match_on_cell_value(self, client, auth_headers, lab, rows):
        response = await client.get(
            "/api/v1/search/repository-rows",
            params={"query": "lot-7731"},
            headers=auth_headers(lab["u3"]),
        )

        assert names(response) == {"Acetone"}

    async def test_match_on_creator_name(self, client, auth_headers, lab, rows):
        response = await client.get(
            "/api/v1/search/repository-rows",
            params={"query": "bea bench"},
            headers=auth_headers(lab["u1"]),
        )

        assert names(response) == {"HeLa"}

    async def test_given_repository_is_searched_directly(
        self, client, auth_headers, lab, rows
    ):
        response = await client.get(
            "/api/v1/search/repository-rows",
            params={"repository_id": str(lab["rep2"].id), "page": -1},
            headers=auth_headers(lab["u3"]),
        )

        assert response.status_code == 200
        assert response.json() == {"counts": {str(lab["rep2"].id): 1}}

    async def test_unknown_repository(self, client, auth_headers, lab):
        response = await client.get(
            "/api/v1/search/repository-rows",
            params={"repository_id": "00000000-0000-0000-0000-000000000000"},
            headers=auth_headers(lab["u1"]),
        )

        assert response.status_code == 404

    async def test_user_without_teams(self, client, auth_headers, lab, rows):
        response = await client.get(
            "/api/v1/search/repository-rows", headers=auth_headers(lab["outsider"])
        )

        assert response.json()["items"] == []
