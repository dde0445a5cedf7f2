"""Loading of the requesting principal's memberships."""

from src.labnotebook.models import User
from src.labnotebook.policies import Principal
from src.labnotebook.repositories import MembershipRepository, ProjectRepository


async def load_principal(
    user: User,
    membership_repo: MembershipRepository,
    project_repo: ProjectRepository,
) -> Principal:
    """Read the user's current team roles and project links.

    Called once per operation so that membership changes take effect on the
    very next request.
    """
    memberships = await membership_repo.list_user_memberships(user.id)
    project_roles = await project_repo.list_project_roles(user.id)
    return Principal(
        user=user,
        team_roles={m.team_id: m.role_enum for m in memberships},
        project_roles=project_roles,
    )
