"""Repository layer - data access abstraction."""

from src.labnotebook.repositories.base import BaseRepository
from src.labnotebook.repositories.inventory import InventoryRepository, InventoryRowRepository
from src.labnotebook.repositories.membership import MembershipRepository
from src.labnotebook.repositories.project import ProjectRepository
from src.labnotebook.repositories.team import TeamRepository
from src.labnotebook.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "InventoryRepository",
    "InventoryRowRepository",
    "MembershipRepository",
    "ProjectRepository",
    "TeamRepository",
    "UserRepository",
]
