"""Main API router aggregation."""

from fastapi import APIRouter

from movie_catalog.api.catalog import router as catalog_router
from movie_catalog.api.movies import router as movies_router
from movie_catalog.api.people import actors_router, producers_router
from movie_catalog.api.watchlist import router as watchlist_router

# Main API router
api_router = APIRouter(prefix="/api")

# Include all sub-routers
api_router.include_router(movies_router)
api_router.include_router(actors_router)
api_router.include_router(producers_router)
api_router.include_router(watchlist_router)
api_router.include_router(catalog_router)
