"""Producer reference resolution.

Movies name their producers in free text. Whether a name is a link to a
catalogued producer is decided by an exact, case-sensitive lookup against the
``Producers`` table.
"""

import logging

from movie_catalog.schemas.catalog import Movie, Producer, ProducerReference
from movie_catalog.services.base import DataAccessError, MappingError, NotFoundError
from movie_catalog.services.loader import map_row
from movie_catalog.services.repository import EntityKind, RepositoryAccessor, get_repository
from movie_catalog.utils.text import split_csv

logger = logging.getLogger(__name__)


class ProducerResolver:
    """Resolves producer names against the producer catalog."""

    def __init__(self, repository: RepositoryAccessor) -> None:
        self.repository = repository

    async def producer_exists(self, name: str) -> bool:
        """Check whether a producer with exactly this name is catalogued.

        Storage failures are logged and reported as ``False``, so the name
        degrades to plain text instead of breaking the detail page.
        """
        try:
            return await self.repository.count(EntityKind.PRODUCER, name) > 0
        except DataAccessError as e:
            logger.warning("Producer lookup for %r failed, treating as absent: %s", name, e)
            return False

    async def resolve_producer_by_name(self, name: str) -> Producer | None:
        """Fetch the first producer named ``name``, or None if there is none.

        Names are not unique in storage; the first row in storage order wins.

        Raises:
            DataAccessError: If the store cannot be queried.
        """
        rows = await self.repository.fetch_by_name(EntityKind.PRODUCER, name)
        for row in rows:
            try:
                return map_row(Producer, row)
            except MappingError as e:
                logger.warning("Skipping malformed producer row for %r: %s", name, e)
        return None

    async def get_producer_by_name(self, name: str) -> Producer:
        """Fetch a producer by name.

        Raises:
            NotFoundError: If no producer has this name.
            DataAccessError: If the store cannot be queried.
        """
        producer = await self.resolve_producer_by_name(name)
        if producer is None:
            raise NotFoundError(f"Producer {name!r} not found")
        return producer

    async def resolve_reference(self, name: str) -> ProducerReference:
        """Classify one producer name with a single lookup."""
        try:
            producer = await self.resolve_producer_by_name(name)
        except DataAccessError as e:
            logger.warning("Producer lookup for %r failed, showing plain text: %s", name, e)
            producer = None
        return ProducerReference(name=name, linked=producer is not None, producer=producer)

    async def resolve_producer_section(self, movie: Movie) -> list[ProducerReference]:
        """Classify every producer named on a movie, in the order written.

        Blank entries are skipped. Each remaining name is linked when a
        catalogued producer matches it and plain text otherwise.
        """
        return [await self.resolve_reference(name) for name in split_csv(movie.producers)]


def get_producer_resolver() -> ProducerResolver:
    """Factory function to create a producer resolver.

    Can be used as a FastAPI dependency.
    """
    return ProducerResolver(get_repository())
