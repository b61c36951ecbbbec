"""Catalog loading, indexing and resolution services."""

from movie_catalog.services.base import (
    CatalogError,
    DataAccessError,
    MappingError,
    NotFoundError,
)
from movie_catalog.services.genres import (
    ALL_GENRES,
    GenreIndex,
    build_genre_index,
    filter_by_genre,
    genre_options,
)
from movie_catalog.services.loader import CatalogLoader, attach_cast, get_catalog_loader
from movie_catalog.services.producers import ProducerResolver, get_producer_resolver
from movie_catalog.services.repository import EntityKind, RepositoryAccessor, get_repository
from movie_catalog.services.state import CatalogSnapshot, CatalogState, get_catalog_state
from movie_catalog.services.watchlist import WatchList

__all__ = [
    "ALL_GENRES",
    "CatalogError",
    "CatalogLoader",
    "CatalogSnapshot",
    "CatalogState",
    "DataAccessError",
    "EntityKind",
    "GenreIndex",
    "MappingError",
    "NotFoundError",
    "ProducerResolver",
    "RepositoryAccessor",
    "WatchList",
    "attach_cast",
    "build_genre_index",
    "filter_by_genre",
    "genre_options",
    "get_catalog_loader",
    "get_catalog_state",
    "get_producer_resolver",
    "get_repository",
]
