"""Catalog loader: full row sets into typed entity collections."""

import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from movie_catalog.config import get_settings
from movie_catalog.schemas.catalog import Actor, Movie, Producer
from movie_catalog.services.base import DataAccessError, MappingError
from movie_catalog.services.repository import EntityKind, RepositoryAccessor, Row

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)
T = TypeVar("T")


def map_row(model: type[EntityT], row: Mapping[str, Any]) -> EntityT:
    """Validate a single storage row into an entity.

    Raises:
        MappingError: If a required field is missing or malformed.
    """
    try:
        return model.model_validate(row)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise MappingError(f"Cannot map {model.__name__} row: {fields}", row=row) from e


def map_rows(model: type[EntityT], rows: Iterable[Mapping[str, Any]]) -> list[EntityT]:
    """Map every row independently, dropping the ones that fail."""
    entities: list[EntityT] = []
    for index, row in enumerate(rows):
        try:
            entities.append(map_row(model, row))
        except MappingError as e:
            logger.warning("Skipping row %d: %s", index, e)
    return entities


class CatalogLoader:
    """Loads movies, actors and producers from the repository.

    Storage failures are retried up to ``attempts`` times before the
    ``DataAccessError`` reaches the caller. Malformed rows never abort a load.
    """

    def __init__(
        self,
        repository: RepositoryAccessor,
        attempts: int | None = None,
    ) -> None:
        self.repository = repository
        self.attempts = attempts if attempts is not None else get_settings().load_attempts

    async def _with_retry(self, operation: str, call: Callable[[], Awaitable[T]]) -> T:
        attempt = 1
        while True:
            try:
                return await call()
            except DataAccessError as e:
                if attempt >= self.attempts:
                    logger.error("%s gave up after %d attempts: %s", operation, attempt, e)
                    raise
                logger.warning(
                    "%s failed (attempt %d/%d): %s", operation, attempt, self.attempts, e
                )
                attempt += 1

    async def _load(self, kind: EntityKind, model: type[EntityT]) -> list[EntityT]:
        rows: list[Row] = await self._with_retry(
            f"load {kind}", lambda: self.repository.fetch_all(kind)
        )
        entities = map_rows(model, rows)
        logger.info("Loaded %d of %d %s rows", len(entities), len(rows), kind)
        return entities

    async def load_movies(self) -> list[Movie]:
        """Load every movie, without cast."""
        return await self._load(EntityKind.MOVIE, Movie)

    async def load_actors(self) -> list[Actor]:
        """Load every actor."""
        return await self._load(EntityKind.ACTOR, Actor)

    async def load_producers(self) -> list[Producer]:
        """Load every producer."""
        return await self._load(EntityKind.PRODUCER, Producer)

    async def load_cast(self) -> dict[int, list[Actor]]:
        """Load cast associations as movie ID to actors in billing order."""
        rows = await self._with_retry("load cast", self.repository.fetch_cast)
        cast: dict[int, list[Actor]] = {}
        for row in rows:
            try:
                movie_id = int(row["MovieID"])
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping cast row without a valid MovieID: %s", row)
                continue
            try:
                actor = map_row(Actor, row)
            except MappingError as e:
                logger.warning("Skipping cast row for movie %s: %s", movie_id, e)
                continue
            cast.setdefault(movie_id, []).append(actor)
        return cast


def attach_cast(movies: Iterable[Movie], cast: Mapping[int, list[Actor]]) -> list[Movie]:
    """Return copies of ``movies`` with their cast filled in."""
    return [movie.model_copy(update={"cast": list(cast.get(movie.id, []))}) for movie in movies]


def get_catalog_loader() -> CatalogLoader:
    """Factory function to create a catalog loader.

    Can be used as a FastAPI dependency.
    """
    return CatalogLoader(RepositoryAccessor())
