"""Visibility policy for projects and repositories.

Pure predicates over state the caller has already loaded: a `Principal`
snapshot of the user's memberships and, for repositories, the share links
of the repository. Nothing here touches the database or raises.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from uuid import UUID

from src.labnotebook.models import (
    GLOBALLY_SHARED_LEVELS,
    PermissionLevel,
    Project,
    ProjectRole,
    Repository,
    RepositoryShare,
    TeamRole,
    User,
    Visibility,
)


@dataclass(frozen=True)
class Principal:
    """The requesting user together with their team and project memberships.

    Built fresh for every request; never cache it across calls or a revoked
    membership would keep granting access.
    """

    user: User
    team_roles: Mapping[UUID, TeamRole] = field(default_factory=dict)
    project_roles: Mapping[UUID, ProjectRole] = field(default_factory=dict)

    @property
    def team_ids(self) -> frozenset[UUID]:
        return frozenset(self.team_roles)

    def is_member_of(self, team_id: UUID) -> bool:
        return team_id in self.team_roles


def is_admin_of_team(principal: Principal, team_id: UUID) -> bool:
    """True iff the user's role in the team is the highest-privilege role."""
    return principal.team_roles.get(team_id) is TeamRole.ADMIN


def project_role(principal: Principal, project: Project) -> ProjectRole | None:
    """The user's explicit role in the project, if linked."""
    return principal.project_roles.get(project.id)


def project_visible(principal: Principal, project: Project) -> bool:
    """Team admins see everything; others see visible projects and their own."""
    return (
        is_admin_of_team(principal, project.team_id)
        or project.visibility_enum is Visibility.VISIBLE
        or project.id in principal.project_roles
    )


def can_manage_project(principal: Principal, project: Project) -> bool:
    """Team admins and project owners may update, archive and staff a project."""
    return (
        is_admin_of_team(principal, project.team_id)
        or project_role(principal, project) is ProjectRole.OWNER
    )


def _links_to(
    team_id: UUID, repository: Repository, shares: Iterable[RepositoryShare]
) -> list[RepositoryShare]:
    return [s for s in shares if s.repository_id == repository.id and s.team_id == team_id]


def _globally_shared(repository: Repository) -> bool:
    return repository.permission_level_enum in GLOBALLY_SHARED_LEVELS


def repository_visible(
    team_id: UUID, repository: Repository, shares: Iterable[RepositoryShare]
) -> bool:
    """Owned by the team, shared with it, or shared with everybody."""
    return (
        repository.team_id == team_id
        or bool(_links_to(team_id, repository, shares))
        or _globally_shared(repository)
    )


def repository_writable(
    team_id: UUID, repository: Repository, shares: Iterable[RepositoryShare]
) -> bool:
    """Write access granted to a *foreign* team.

    Always False for the owning team: ownership implies full access and must
    be checked by the caller before asking this.
    """
    if repository.team_id == team_id:
        return False
    if repository.permission_level_enum is PermissionLevel.SHARED_WRITE:
        return True
    return any(
        s.permission_level_enum is PermissionLevel.SHARED_WRITE
        for s in _links_to(team_id, repository, shares)
    )


def repository_shared_with(
    team_id: UUID, repository: Repository, shares: Iterable[RepositoryShare]
) -> bool:
    """Shared with a foreign team, globally or through a private link."""
    if repository.team_id == team_id:
        return False
    return _globally_shared(repository) or bool(_links_to(team_id, repository, shares))


def repository_shared_with_read(
    team_id: UUID, repository: Repository, shares: Iterable[RepositoryShare]
) -> bool:
    """Read-only sharing with a foreign team."""
    if repository.team_id == team_id:
        return False
    if repository.permission_level_enum is PermissionLevel.SHARED_READ:
        return True
    return any(
        s.permission_level_enum is PermissionLevel.SHARED_READ
        for s in _links_to(team_id, repository, shares)
    )


def repository_shared_with_anybody(
    repository: Repository, shares: Iterable[RepositoryShare]
) -> bool:
    return _globally_shared(repository) or any(s.repository_id == repository.id for s in shares)


def repository_shared_by(
    team_id: UUID, repository: Repository, shares: Iterable[RepositoryShare]
) -> bool:
    """The team owns the repository and has shared it with somebody."""
    return repository.team_id == team_id and repository_shared_with_anybody(repository, shares)
