"""API routers."""

from .hf import router as hf_router
from .lessons import router as lessons_router
from .practice import router as practice_router
from .users import router as users_router

__all__ = ["hf_router", "lessons_router", "practice_router", "users_router"]
