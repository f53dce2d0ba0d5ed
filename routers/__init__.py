# routers/__init__.py

from fastapi import APIRouter

from .auth import router as auth_router
from .navigation import router as navigation_router
from .directory import router as directory_router
from .community_setup import router as community_setup_router
from .health import router as health_router


api_router = APIRouter()

# Auth
api_router.include_router(auth_router)

# Access control / routing
api_router.include_router(navigation_router)

# Pages
api_router.include_router(directory_router)
api_router.include_router(community_setup_router)

# Health
api_router.include_router(health_router)

__all__ = ["api_router"]
