"""Detail pages for catalog entities."""

from typing import assert_never

from movie_catalog.schemas.catalog import (
    Actor,
    ActorRef,
    EntityRef,
    Movie,
    MovieRef,
    Producer,
    ProducerRef,
)
from movie_catalog.schemas.views import DetailField, DetailView
from movie_catalog.services.producers import ProducerResolver
from movie_catalog.services.state import CatalogState

Entity = Movie | Actor | Producer

MISSING = "N/A"

# Image folders per entity kind
MOVIE_IMAGES = "mImages"
ACTOR_IMAGES = "aImages"
PRODUCER_IMAGES = "pImages"


def _image_file(folder: str, name: str | None, root: str) -> str | None:
    """Build ``<root>/<folder>/<name without spaces>.jpg``."""
    if not name:
        return None
    path = f"{folder}/{name.replace(' ', '')}.jpg"
    return f"{root.rstrip('/')}/{path}" if root else path


def _field(label: str, value: object) -> DetailField:
    return DetailField(label=label, value=MISSING if value is None else str(value))


def image_path(entity: Entity, root: str = "") -> str | None:
    """Poster or photo path for an entity, None when it has no name."""
    match entity:
        case Movie():
            return _image_file(MOVIE_IMAGES, entity.title, root)
        case Actor():
            return _image_file(ACTOR_IMAGES, entity.name, root)
        case Producer():
            return _image_file(PRODUCER_IMAGES, entity.name, root)
        case _:
            assert_never(entity)


def detail_view(entity: Entity, image_root: str = "") -> DetailView:
    """Build the labelled detail page for any catalog entity."""
    match entity:
        case Movie():
            return DetailView(
                kind="movie",
                id=entity.id,
                heading=entity.title,
                image_path=image_path(entity, image_root),
                fields=[
                    _field("Release Year", entity.release_year),
                    _field("Genre", entity.genre),
                    _field("Story Line", entity.storyline),
                    _field("Country Of Origin", entity.country_of_origin),
                    _field("Filming Locations", entity.filming_locations),
                    _field("Production Companies", entity.production_companies),
                    _field("Category", entity.category),
                ],
            )
        case Actor():
            return DetailView(
                kind="actor",
                id=entity.id,
                heading=entity.name or MISSING,
                image_path=image_path(entity, image_root),
                fields=[
                    _field("Spouse", entity.spouse),
                    _field("Biography", entity.biography),
                ],
            )
        case Producer():
            return DetailView(
                kind="producer",
                id=entity.id,
                heading=entity.name or MISSING,
                image_path=image_path(entity, image_root),
                fields=[
                    _field("Year of Birth", entity.year_of_birth),
                    _field("Most Famous Movies", entity.most_famous_movies),
                    _field("Country of Origin", entity.country_of_origin),
                ],
            )
        case _:
            assert_never(entity)


async def open_entity(
    ref: EntityRef,
    state: CatalogState,
    resolver: ProducerResolver,
) -> Entity | None:
    """Find the entity a reference points at, None when it is unknown.

    Movies and actors come from the loaded catalog. Producers referenced by
    name are looked up in the store, the same way movie pages link them.
    """
    match ref:
        case MovieRef(id=movie_id):
            return state.get_movie(movie_id)
        case ActorRef(id=actor_id):
            return state.get_actor(actor_id)
        case ProducerRef(name=str() as name):
            return await resolver.resolve_producer_by_name(name)
        case ProducerRef(id=producer_id):
            return state.get_producer(producer_id) if producer_id is not None else None
        case _:
            assert_never(ref)
