"""
API v1 routers.

One aggregate router per service.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, hydration

auth_router = APIRouter()
auth_router.include_router(auth.router, tags=["auth"])

hydration_router = APIRouter()
hydration_router.include_router(hydration.router, tags=["hydration"])
