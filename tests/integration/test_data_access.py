"""Integration tests for the data-access repositories against SQLite."""

import pytest

from src.labnotebook.models import ColumnDataType, ProjectRole
from src.labnotebook.repositories import (
    InventoryRepository,
    InventoryRowRepository,
    MembershipRepository,
    ProjectRepository,
    UserRepository,
)
from tests.factories import (
    RepositoryCellFactory,
    RepositoryColumnFactory,
    RepositoryRowFactory,
)

pytestmark = pytest.mark.integration


async def test_list_user_memberships(db_session, lab):
    repo = MembershipRepository(db_session)

    memberships = await repo.list_user_memberships(lab["u1"].id)

    assert [(m.team_id, m.role) for m in memberships] == [(lab["team_a"].id, "admin")]
    assert await repo.user_is_member(lab["u3"].id, lab["team_b"].id)
    assert not await repo.user_is_member(lab["u3"].id, lab["team_a"].id)


async def test_list_project_roles(db_session, lab):
    roles = await ProjectRepository(db_session).list_project_roles(lab["u2"].id)

    assert roles == {lab["p4"].id: ProjectRole.NORMAL_USER}


async def test_project_name_lookup_ignores_case(db_session, lab):
    repo = ProjectRepository(db_session)

    found = await repo.get_by_name_in_team(lab["team_a"].id, "p2 VISIBLE assays")

    assert found is not None
    assert found.id == lab["p2"].id
    assert await repo.get_by_name_in_team(lab["team_b"].id, "P2 Visible assays") is None


async def test_list_projects_by_team(db_session, lab):
    projects = await ProjectRepository(db_session).list_by_team_ids({lab["team_a"].id})

    assert {p.id for p in projects} == {lab[k].id for k in ("p1", "p2", "p3", "p4")}


async def test_share_candidates_cover_owned_linked_and_global(db_session, lab):
    repo = InventoryRepository(db_session)

    team_a = await repo.list_share_candidates({lab["team_a"].id})
    team_b = await repo.list_share_candidates({lab["team_b"].id})

    assert {r.id for r in team_a} == {lab["rep1"].id, lab["rep2"].id, lab["rep3"].id}
    assert {r.id for r in team_b} == {lab["rep1"].id, lab["rep3"].id}
    assert len(team_b) == 2


async def test_repository_counts(db_session, lab):
    repo = InventoryRepository(db_session)

    assert await repo.count_all() == 3
    assert await repo.count_by_team(lab["team_a"].id) == 2


async def test_searchable_cell_values_skip_other_column_types(db_session, lab):
    text_column = RepositoryColumnFactory.build(repository_id=lab["rep1"].id, name="Supplier")
    date_column = RepositoryColumnFactory.build(
        repository_id=lab["rep1"].id, name="Expires", data_type=ColumnDataType.DATE.value
    )
    row = RepositoryRowFactory.build(repository_id=lab["rep1"].id, created_by_id=lab["u1"].id)
    db_session.add_all([text_column, date_column, row])
    await db_session.flush()
    db_session.add_all(
        [
            RepositoryCellFactory.build(
                repository_row_id=row.id, repository_column_id=text_column.id, value="Sigma"
            ),
            RepositoryCellFactory.build(
                repository_row_id=row.id, repository_column_id=date_column.id, value="2027-01-01"
            ),
        ]
    )
    await db_session.commit()

    values = await InventoryRowRepository(db_session).list_searchable_cell_values([row.id])

    assert values == [(row.id, "Sigma")]


async def test_rows_by_repository(db_session, lab):
    rows = [
        RepositoryRowFactory.build(repository_id=lab[key].id, created_by_id=lab["u1"].id)
        for key in ("rep1", "rep1", "rep2")
    ]
    db_session.add_all(rows)
    await db_session.commit()

    found = await InventoryRowRepository(db_session).list_by_repository_ids([lab["rep1"].id])

    assert {r.id for r in found} == {rows[0].id, rows[1].id}


async def test_full_names(db_session, lab):
    names = await UserRepository(db_session).get_full_names({lab["u1"].id, lab["u3"].id})

    assert names == {lab["u1"].id: "Ada Admin", lab["u3"].id: "Bea Bench"}
