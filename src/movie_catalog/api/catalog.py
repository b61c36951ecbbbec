"""Catalog maintenance and navigation endpoints."""

from fastapi import APIRouter

from movie_catalog.api.deps import Catalog, Loader, Repository, Resolver
from movie_catalog.config import get_settings
from movie_catalog.schemas.catalog import EntityRef
from movie_catalog.schemas.views import CatalogSummary, DetailView
from movie_catalog.services.base import NotFoundError
from movie_catalog.services.details import detail_view, open_entity
from movie_catalog.services.state import CatalogState

router = APIRouter(prefix="/catalog", tags=["catalog"])


def _summary(catalog: CatalogState) -> CatalogSummary:
    snapshot = catalog.snapshot
    return CatalogSummary(
        movies=len(snapshot.movies),
        actors=len(snapshot.actors),
        producers=len(snapshot.producers),
        genres=len(snapshot.genre_index),
    )


@router.get("", response_model=CatalogSummary)
async def get_catalog_summary(catalog: Catalog) -> CatalogSummary:
    """Sizes of the catalog currently being served."""
    return _summary(catalog)


@router.post("/reload", response_model=CatalogSummary)
async def reload_catalog(catalog: Catalog, loader: Loader) -> CatalogSummary:
    """Reload movies, actors and producers from the store.

    On a storage failure the previously loaded catalog keeps being served
    and the request fails with 503.
    """
    await catalog.reload(loader)
    return _summary(catalog)


@router.post("/populate-cast", response_model=CatalogSummary)
async def populate_cast(
    catalog: Catalog,
    loader: Loader,
    repository: Repository,
) -> CatalogSummary:
    """Rebuild cast associations in the store, then reload movies."""
    await repository.populate_movie_actors()
    await catalog.reload_movies(loader)
    return _summary(catalog)


@router.post("/open", response_model=DetailView)
async def open_reference(ref: EntityRef, catalog: Catalog, resolver: Resolver) -> DetailView:
    """Resolve a movie, actor or producer reference to its detail page."""
    entity = await open_entity(ref, catalog, resolver)
    if entity is None:
        raise NotFoundError(f"No {ref.kind} matches this reference")
    return detail_view(entity, get_settings().image_root)
