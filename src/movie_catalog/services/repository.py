"""Repository accessor for the catalog store.

All SQL lives here. Every call opens its own session, is bounded by the
configured timeout, and turns driver failures into ``DataAccessError``.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import Any, TypeVar

from sqlalchemy import Table, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from movie_catalog.config import get_settings
from movie_catalog.database import async_session
from movie_catalog.models import Actor, Movie, MovieActor, Producer
from movie_catalog.services.base import DataAccessError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Row = dict[str, Any]


class EntityKind(StrEnum):
    """Kinds of entity held in the store."""

    MOVIE = "movie"
    ACTOR = "actor"
    PRODUCER = "producer"


_TABLES: dict[EntityKind, Table] = {
    EntityKind.MOVIE: Movie.__table__,
    EntityKind.ACTOR: Actor.__table__,
    EntityKind.PRODUCER: Producer.__table__,
}

# Column matched by named lookups
_NAME_COLUMNS: dict[EntityKind, str] = {
    EntityKind.MOVIE: "Title",
    EntityKind.ACTOR: "Name",
    EntityKind.PRODUCER: "name",
}


class RepositoryAccessor:
    """Executes point queries against the catalog store.

    Rows come back as plain dicts keyed by the store's column names.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the accessor.

        Args:
            session_factory: Session factory to use. Defaults to the
                application's configured factory.
            timeout: Seconds allowed per storage call. If not provided,
                uses settings.
        """
        self._session_factory = session_factory or async_session
        self.timeout = timeout if timeout is not None else get_settings().query_timeout

    async def _run(self, operation: str, work: Callable[[AsyncSession], Awaitable[T]]) -> T:
        """Run ``work`` inside a fresh session with a bounded timeout.

        Raises:
            DataAccessError: On timeout, connection or query failure.
        """

        async def scoped() -> T:
            async with self._session_factory() as session:
                return await work(session)

        try:
            return await asyncio.wait_for(scoped(), timeout=self.timeout)
        except TimeoutError as e:
            raise DataAccessError(
                f"{operation} timed out after {self.timeout}s", operation=operation
            ) from e
        except (SQLAlchemyError, OSError) as e:
            raise DataAccessError(f"{operation} failed: {e}", operation=operation) from e

    async def fetch_all(self, kind: EntityKind) -> list[Row]:
        """Fetch every row of an entity table in storage order."""
        table = _TABLES[kind]

        async def work(session: AsyncSession) -> list[Row]:
            result = await session.execute(select(table))
            return [dict(row) for row in result.mappings().all()]

        return await self._run(f"fetch_all({kind})", work)

    async def fetch_by_name(self, kind: EntityKind, name: str) -> list[Row]:
        """Fetch rows whose name column equals ``name`` exactly.

        The name is sent as a bound parameter, never spliced into SQL. The
        store's collation may fold case, so returned rows are re-checked
        exactly.
        """
        table = _TABLES[kind]
        column_name = _NAME_COLUMNS[kind]
        column = table.c[column_name]

        async def work(session: AsyncSession) -> list[Row]:
            result = await session.execute(select(table).where(column == name))
            rows = [dict(row) for row in result.mappings().all()]
            return [row for row in rows if row[column_name] == name]

        return await self._run(f"fetch_by_name({kind})", work)

    async def count(self, kind: EntityKind, name: str) -> int:
        """Count rows whose name column equals ``name`` exactly (case-sensitive)."""
        table = _TABLES[kind]
        column = table.c[_NAME_COLUMNS[kind]]

        async def work(session: AsyncSession) -> int:
            result = await session.execute(select(column).where(column == name))
            return sum(1 for value in result.scalars().all() if value == name)

        return await self._run(f"count({kind})", work)

    async def fetch_cast(self, movie_id: int | None = None) -> list[Row]:
        """Fetch cast rows: ``MovieID`` plus the actor's columns.

        Ordered by movie, then by billing order within the movie.
        """
        links = MovieActor.__table__
        actors = Actor.__table__
        query = (
            select(links.c.MovieID, actors)
            .join_from(links, actors, links.c.ActorID == actors.c.ActorID)
            .order_by(links.c.MovieID, links.c.id)
        )
        if movie_id is not None:
            query = query.where(links.c.MovieID == movie_id)

        async def work(session: AsyncSession) -> list[Row]:
            result = await session.execute(query)
            return [dict(row) for row in result.mappings().all()]

        return await self._run("fetch_cast", work)

    async def populate_movie_actors(self) -> None:
        """Run the ``PopulateMovieActors`` stored procedure.

        The procedure rebuilds the cast associations; nothing is returned.
        """

        async def work(session: AsyncSession) -> None:
            async with session.begin():
                await session.execute(text("CALL PopulateMovieActors()"))

        await self._run("populate_movie_actors", work)
        logger.info("PopulateMovieActors completed")


def get_repository() -> RepositoryAccessor:
    """Factory function to create a repository accessor.

    Can be used as a FastAPI dependency.
    """
    return RepositoryAccessor()
