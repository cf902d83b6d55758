from fastapi import APIRouter

from src.daybook.api.v1 import comments, profiles, projects

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(projects.router)
api_router.include_router(comments.router)
api_router.include_router(profiles.router)
