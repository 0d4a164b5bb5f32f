"""Main API router aggregation."""

from fastapi import APIRouter

from app.api.routes import health, scoring

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(scoring.router, tags=["scoring"])
