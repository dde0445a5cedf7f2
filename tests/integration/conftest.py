"""Integration test fixtures for database and HTTP client operations.

Each test gets a fresh in-memory SQLite database with every table created
from the model metadata. Uses polyfactory for test data generation.
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.labnotebook.api.dependencies import get_db_session
from src.labnotebook.core.db import dispose_engine, get_session
from src.labnotebook.core.security import create_access_token
from src.labnotebook.main import create_app
from src.labnotebook.models import PermissionLevel, Team, User
from tests.factories import (
    ProjectFactory,
    RepositoryFactory,
    RepositoryShareFactory,
    TeamFactory,
    UserFactory,
    UserProjectFactory,
    UserTeamFactory,
)


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory database shared by every connection of one test."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    Tests must explicitly call `await session.commit()` to make data visible
    to requests made through `client`.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """HTTP client for an app whose sessions are bound to the test engine."""
    app = create_app()

    async def _override_db_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_db_session
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    app.dependency_overrides.clear()
    await dispose_engine()


@pytest.fixture
def auth_headers() -> Callable[..., dict[str, str]]:
    """Build request headers for a user, optionally selecting a team."""

    def _headers(user: User, team: Team | None = None) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {create_access_token(user.id)}"}
        if team is not None:
            headers["X-Team-ID"] = str(team.id)
        return headers

    return _headers


@pytest.fixture
async def lab(db_session: AsyncSession) -> dict[str, Any]:
    """Two teams with projects and repositories.

    Team A: admin U1, member U2; P1 hidden, P2 visible, P3 archived (visible),
    P4 hidden with U2 as a normal user. Repositories: Rep1 shared read with
    team B, Rep2 private. Team B: member U3, owns Rep3 shared globally.
    """
    team_a = TeamFactory.build(name="Team A")
    team_b = TeamFactory.build(name="Team B")
    u1 = UserFactory.build(full_name="Ada Admin")
    u2 = UserFactory.build(full_name="Max Member")
    u3 = UserFactory.build(full_name="Bea Bench")
    outsider = UserFactory.build(full_name="Olaf Outsider")
    db_session.add_all([team_a, team_b, u1, u2, u3, outsider])
    await db_session.flush()

    db_session.add_all(
        [
            UserTeamFactory.admin(user_id=u1.id, team_id=team_a.id),
            UserTeamFactory.member(user_id=u2.id, team_id=team_a.id),
            UserTeamFactory.member(user_id=u3.id, team_id=team_b.id),
        ]
    )

    p1 = ProjectFactory.build(team_id=team_a.id, name="P1 Hidden cloning")
    p2 = ProjectFactory.visible(team_id=team_a.id, name="P2 Visible assays")
    p3 = ProjectFactory.archived_project(
        team_id=team_a.id, name="P3 Archived assays", visibility="visible"
    )
    p4 = ProjectFactory.build(team_id=team_a.id, name="P4 Hidden but linked")
    db_session.add_all([p1, p2, p3, p4])
    await db_session.flush()
    db_session.add(UserProjectFactory.build(user_id=u2.id, project_id=p4.id))

    rep1 = RepositoryFactory.build(team_id=team_a.id, name="Chemicals", created_by_id=u1.id)
    rep2 = RepositoryFactory.build(team_id=team_a.id, name="Primers", created_by_id=u1.id)
    rep3 = RepositoryFactory.build(
        team_id=team_b.id,
        name="Cell lines",
        permission_level=PermissionLevel.SHARED_READ.value,
        created_by_id=u3.id,
    )
    db_session.add_all([rep1, rep2, rep3])
    await db_session.flush()
    db_session.add(
        RepositoryShareFactory.build(
            repository_id=rep1.id,
            team_id=team_b.id,
            permission_level=PermissionLevel.SHARED_READ.value,
        )
    )
    await db_session.commit()

    return {
        "team_a": team_a,
        "team_b": team_b,
        "u1": u1,
        "u2": u2,
        "u3": u3,
        "outsider": outsider,
        "p1": p1,
        "p2": p2,
        "p3": p3,
        "p4": p4,
        "rep1": rep1,
        "rep2": rep2,
        "rep3": rep3,
    }
