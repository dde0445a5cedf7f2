"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Settings are read on first import; point them at the test environment
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-jwt-signing-only-0123456789")

# ruff: noqa: E402 - Imports must be after env var setup
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.labnotebook.core.config import Settings, get_settings
from src.labnotebook.repositories import (
    InventoryRepository,
    InventoryRowRepository,
    MembershipRepository,
    ProjectRepository,
    TeamRepository,
    UserRepository,
)

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Test settings with a small page size so pagination is easy to exercise."""
    return get_settings().model_copy(update={"search_limit": 2})


# --- Repository mocks (shared by service unit tests) ---


@pytest.fixture
def membership_repo() -> AsyncMock:
    repo = AsyncMock(spec=MembershipRepository)
    repo.list_user_memberships.return_value = []
    repo.user_is_member.return_value = True
    repo.get_membership.return_value = None
    return repo


@pytest.fixture
def project_repo() -> AsyncMock:
    repo = AsyncMock(spec=ProjectRepository)
    repo.list_project_roles.return_value = {}
    repo.list_by_team_ids.return_value = []
    repo.get_by_name_in_team.return_value = None
    repo.add = MagicMock()
    repo.add_member_link = MagicMock()
    return repo


@pytest.fixture
def inventory_repo() -> AsyncMock:
    repo = AsyncMock(spec=InventoryRepository)
    repo.list_share_candidates.return_value = []
    repo.list_shares.return_value = []
    repo.get_by_name_in_team.return_value = None
    repo.count_all.return_value = 0
    repo.count_by_team.return_value = 0
    repo.list_columns.return_value = []
    repo.add = MagicMock()
    return repo


@pytest.fixture
def row_repo() -> AsyncMock:
    repo = AsyncMock(spec=InventoryRowRepository)
    repo.list_by_repository_ids.return_value = []
    repo.list_searchable_cell_values.return_value = []
    return repo


@pytest.fixture
def user_repo() -> AsyncMock:
    repo = AsyncMock(spec=UserRepository)
    repo.get_full_names.return_value = {}
    return repo


@pytest.fixture
def team_repo() -> AsyncMock:
    return AsyncMock(spec=TeamRepository)


@pytest.fixture
def session() -> AsyncMock:
    """Mock AsyncSession; `add` is synchronous on the real one."""
    mock = AsyncMock()
    mock.add = MagicMock()
    return mock
