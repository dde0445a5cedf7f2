from fastapi import APIRouter

from src.labnotebook.api.v1 import projects, repositories, search

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(search.router)
api_router.include_router(projects.router)
api_router.include_router(repositories.router)
