"""Actor and producer API endpoints."""

from fastapi import APIRouter, Query

from movie_catalog.api.deps import Catalog, Resolver
from movie_catalog.config import get_settings
from movie_catalog.schemas.views import (
    ActorListResponse,
    DetailView,
    ProducerExistsResponse,
    ProducerListResponse,
)
from movie_catalog.services.base import NotFoundError
from movie_catalog.services.details import detail_view

actors_router = APIRouter(prefix="/actors", tags=["actors"])
producers_router = APIRouter(prefix="/producers", tags=["producers"])


@actors_router.get("", response_model=ActorListResponse)
async def list_actors(catalog: Catalog) -> ActorListResponse:
    """List loaded actors in storage order."""
    actors = catalog.actors
    return ActorListResponse(total=len(actors), results=actors)


@actors_router.get("/{actor_id}", response_model=DetailView)
async def get_actor(actor_id: int, catalog: Catalog) -> DetailView:
    """Actor detail page."""
    actor = catalog.get_actor(actor_id)
    if actor is None:
        raise NotFoundError(f"Actor {actor_id} not found")
    return detail_view(actor, get_settings().image_root)


@producers_router.get("", response_model=ProducerListResponse)
async def list_producers(catalog: Catalog) -> ProducerListResponse:
    """List loaded producers in storage order."""
    producers = catalog.producers
    return ProducerListResponse(total=len(producers), results=producers)


@producers_router.get("/exists", response_model=ProducerExistsResponse)
async def producer_exists(
    resolver: Resolver,
    name: str = Query(..., min_length=1, description="Exact producer name"),
) -> ProducerExistsResponse:
    """Check whether a producer name matches a catalogued producer.

    Storage failures report ``exists: false``.
    """
    return ProducerExistsResponse(name=name, exists=await resolver.producer_exists(name))


@producers_router.get("/by-name", response_model=DetailView)
async def get_producer_by_name(
    resolver: Resolver,
    name: str = Query(..., min_length=1, description="Exact producer name"),
) -> DetailView:
    """Producer detail page for a linked producer name."""
    producer = await resolver.get_producer_by_name(name)
    return detail_view(producer, get_settings().image_root)


@producers_router.get("/{producer_id}", response_model=DetailView)
async def get_producer(producer_id: int, catalog: Catalog) -> DetailView:
    """Producer detail page."""
    producer = catalog.get_producer(producer_id)
    if producer is None:
        raise NotFoundError(f"Producer {producer_id} not found")
    return detail_view(producer, get_settings().image_root)
