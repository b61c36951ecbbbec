"""Catalog state owned by the application.

The served collections live in an immutable ``CatalogSnapshot``. A reload
builds the replacement completely and swaps it in with one assignment, so a
failed reload leaves the previous snapshot in place and readers never see a
half-built genre index.
"""

import asyncio
import logging
from dataclasses import dataclass, field, replace

from fastapi import Request

from movie_catalog.config import get_settings
from movie_catalog.schemas.catalog import Actor, Movie, Producer
from movie_catalog.services.base import DataAccessError
from movie_catalog.services.genres import GenreIndex, build_genre_index, genre_options
from movie_catalog.services.loader import CatalogLoader, attach_cast
from movie_catalog.services.watchlist import WatchList

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogSnapshot:
    """Collections served between two successful loads."""

    movies: tuple[Movie, ...] = ()
    actors: tuple[Actor, ...] = ()
    producers: tuple[Producer, ...] = ()
    genre_index: GenreIndex = field(default_factory=lambda: build_genre_index([]))


class CatalogState:
    """Current catalog snapshot plus the process-lifetime watch-list."""

    def __init__(
        self,
        snapshot: CatalogSnapshot | None = None,
        watch_list: WatchList | None = None,
        load_cast: bool | None = None,
    ) -> None:
        self._snapshot = snapshot if snapshot is not None else CatalogSnapshot()
        self.watch_list = watch_list if watch_list is not None else WatchList()
        self.load_cast = load_cast if load_cast is not None else get_settings().load_cast
        self._reload_lock = asyncio.Lock()

    @property
    def snapshot(self) -> CatalogSnapshot:
        return self._snapshot

    @property
    def movies(self) -> list[Movie]:
        return list(self._snapshot.movies)

    @property
    def actors(self) -> list[Actor]:
        return list(self._snapshot.actors)

    @property
    def producers(self) -> list[Producer]:
        return list(self._snapshot.producers)

    @property
    def genre_index(self) -> GenreIndex:
        return self._snapshot.genre_index

    def filter_by_genre(self, label: str) -> list[Movie]:
        """Movies for a genre filter; ``All`` returns every loaded movie."""
        return self._snapshot.genre_index.filter(label)

    def genre_options(self) -> list[str]:
        return genre_options(self._snapshot.genre_index)

    def get_movie(self, movie_id: int) -> Movie | None:
        return next((m for m in self._snapshot.movies if m.id == movie_id), None)

    def get_actor(self, actor_id: int) -> Actor | None:
        return next((a for a in self._snapshot.actors if a.id == actor_id), None)

    def get_producer(self, producer_id: int) -> Producer | None:
        return next((p for p in self._snapshot.producers if p.id == producer_id), None)

    async def reload_movies(self, loader: CatalogLoader) -> list[Movie]:
        """Reload movies (and casts when enabled) and rebuild the genre index.

        Raises:
            DataAccessError: If loading fails; the previous movies stay served.
        """
        async with self._reload_lock:
            try:
                movies = await loader.load_movies()
                if self.load_cast:
                    movies = attach_cast(movies, await loader.load_cast())
            except DataAccessError as e:
                logger.error(
                    "Movie reload failed, keeping %d loaded movies: %s",
                    len(self._snapshot.movies),
                    e,
                )
                raise
            index = build_genre_index(movies)
            self._snapshot = replace(self._snapshot, movies=tuple(movies), genre_index=index)
        logger.info("Serving %d movies across %d genres", len(movies), len(index))
        return movies

    async def reload_actors(self, loader: CatalogLoader) -> list[Actor]:
        """Reload actors; the previous list stays served on failure."""
        async with self._reload_lock:
            try:
                actors = await loader.load_actors()
            except DataAccessError as e:
                logger.error(
                    "Actor reload failed, keeping %d loaded actors: %s",
                    len(self._snapshot.actors),
                    e,
                )
                raise
            self._snapshot = replace(self._snapshot, actors=tuple(actors))
        return actors

    async def reload_producers(self, loader: CatalogLoader) -> list[Producer]:
        """Reload producers; the previous list stays served on failure."""
        async with self._reload_lock:
            try:
                producers = await loader.load_producers()
            except DataAccessError as e:
                logger.error(
                    "Producer reload failed, keeping %d loaded producers: %s",
                    len(self._snapshot.producers),
                    e,
                )
                raise
            self._snapshot = replace(self._snapshot, producers=tuple(producers))
        return producers

    async def reload(self, loader: CatalogLoader) -> CatalogSnapshot:
        """Reload movies, actors and producers in turn.

        Each collection is swapped as soon as it loads; the first failure
        stops the sequence and propagates.
        """
        await self.reload_movies(loader)
        await self.reload_actors(loader)
        await self.reload_producers(loader)
        return self._snapshot


def get_catalog_state(request: Request) -> CatalogState:
    """Return the application's catalog state.

    Can be used as a FastAPI dependency.
    """
    return request.app.state.catalog
