"""Team, user and membership factories for test data generation."""

from polyfactory import Use

from src.labnotebook.models import Team, TeamRole, User, UserTeam
from tests.factories.base import BaseFactory, generate_uuid, utc_now


class TeamFactory(BaseFactory):
    """Factory for generating Team test data."""

    __model__ = Team

    id = Use(generate_uuid)
    name = Use(lambda: f"Team {generate_uuid().hex[-6:]}")
    created_at = Use(utc_now)


class UserFactory(BaseFactory):
    """Factory for generating User test data."""

    __model__ = User

    id = Use(generate_uuid)
    email = Use(lambda: f"user_{generate_uuid().hex[-8:]}@example.com")
    full_name = "Test User"
    is_active = True
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def inactive(cls, **kwargs):
        """Create an inactive user."""
        return cls.build(is_active=False, **kwargs)


class UserTeamFactory(BaseFactory):
    """Factory for generating UserTeam membership test data."""

    __model__ = UserTeam

    # FK fields - must be set explicitly
    user_id = None
    team_id = None
    role = TeamRole.MEMBER.value
    created_at = Use(utc_now)

    @classmethod
    def admin(cls, **kwargs):
        """Create an admin role membership."""
        return cls.build(role=TeamRole.ADMIN.value, **kwargs)

    @classmethod
    def member(cls, **kwargs):
        """Create a member role membership."""
        return cls.build(role=TeamRole.MEMBER.value, **kwargs)
