"""
API v1 routes.
"""

from fastapi import APIRouter

from .endpoints.maintenance import requests

api_router = APIRouter()

api_router.include_router(
    requests.router,
    prefix="/maintenance/requests",
    tags=["Maintenance Requests"],
)
