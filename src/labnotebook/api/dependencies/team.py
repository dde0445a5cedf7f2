"""Current team selection from the X-Team-ID header."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status

from src.labnotebook.api.dependencies.auth import CurrentUser
from src.labnotebook.api.dependencies.repositories import MembershipRepo, TeamRepo
from src.labnotebook.core.exceptions import NotFoundError
from src.labnotebook.core.logging import bind_user_context
from src.labnotebook.models import Team


async def get_optional_team(
    current_user: CurrentUser,
    team_repo: TeamRepo,
    membership_repo: MembershipRepo,
    x_team_id: Annotated[UUID | None, Header()] = None,
) -> Team | None:
    """Resolve the team named by X-Team-ID, if any. The user must belong to it."""
    if x_team_id is None:
        return None

    team = await team_repo.get_by_id(x_team_id)
    if team is None:
        raise NotFoundError(f"Team {x_team_id} not found")

    if not await membership_repo.user_is_member(current_user.id, team.id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User does not have access to this team",
        )

    bind_user_context(current_user.id, team.id)
    return team


OptionalTeam = Annotated[Team | None, Depends(get_optional_team)]


async def get_current_team(team: OptionalTeam) -> Team:
    """Require the X-Team-ID header."""
    if team is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="X-Team-ID header is required",
        )
    return team


CurrentTeam = Annotated[Team, Depends(get_current_team)]
