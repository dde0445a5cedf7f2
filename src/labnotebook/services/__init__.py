from src.labnotebook.services.inventory_service import InventoryService
from src.labnotebook.services.project_service import ProjectService
from src.labnotebook.services.search_service import SearchService

__all__ = ["InventoryService", "ProjectService", "SearchService"]
