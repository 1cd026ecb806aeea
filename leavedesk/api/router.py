"""
Main API router
"""
from fastapi import APIRouter

from leavedesk.api.v1 import (
    health,
    auth,
    employees,
    leaves,
    search,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])
api_router.include_router(leaves.router, prefix="/leaves", tags=["leaves"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
