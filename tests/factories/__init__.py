"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, TeamFactory, ...
"""

from tests.factories.base import BaseFactory, generate_uuid, utc_now
from tests.factories.project import ProjectFactory, UserProjectFactory
from tests.factories.repository import (
    RepositoryCellFactory,
    RepositoryColumnFactory,
    RepositoryFactory,
    RepositoryRowFactory,
    RepositoryShareFactory,
)
from tests.factories.team import TeamFactory, UserFactory, UserTeamFactory

__all__ = [
    # Base
    "BaseFactory",
    "generate_uuid",
    "utc_now",
    # Team
    "TeamFactory",
    "UserFactory",
    "UserTeamFactory",
    # Project
    "ProjectFactory",
    "UserProjectFactory",
    # Repository
    "RepositoryCellFactory",
    "RepositoryColumnFactory",
    "RepositoryFactory",
    "RepositoryRowFactory",
    "RepositoryShareFactory",
]
