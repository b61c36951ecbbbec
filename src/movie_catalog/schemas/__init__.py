"""Pydantic schemas for catalog entities and API responses."""

from movie_catalog.schemas.catalog import (
    Actor,
    ActorRef,
    EntityRef,
    Movie,
    MovieRef,
    Producer,
    ProducerRef,
    ProducerReference,
)
from movie_catalog.schemas.views import (
    ActorListResponse,
    AddToWatchList,
    CatalogSummary,
    DetailField,
    DetailView,
    GenreOptionsResponse,
    MovieDetailResponse,
    MovieListResponse,
    ProducerExistsResponse,
    ProducerListResponse,
    WatchListAddResponse,
    WatchListResponse,
)

__all__ = [
    # Entities
    "Actor",
    "Movie",
    "Producer",
    "ProducerReference",
    # Entity references
    "ActorRef",
    "EntityRef",
    "MovieRef",
    "ProducerRef",
    # Views
    "ActorListResponse",
    "AddToWatchList",
    "CatalogSummary",
    "DetailField",
    "DetailView",
    "GenreOptionsResponse",
    "MovieDetailResponse",
    "MovieListResponse",
    "ProducerExistsResponse",
    "ProducerListResponse",
    "WatchListAddResponse",
    "WatchListResponse",
]
