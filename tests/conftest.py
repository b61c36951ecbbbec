"""Pytest fixtures and configuration."""

import os
from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("LOAD_CAST", "false")

from movie_catalog import models
from movie_catalog.database import Base, create_session_factory
from movie_catalog.main import app
from movie_catalog.schemas.catalog import Actor, Movie, Producer
from movie_catalog.services.genres import build_genre_index
from movie_catalog.services.repository import RepositoryAccessor
from movie_catalog.services.state import CatalogSnapshot, CatalogState


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend for tests."""
    return "asyncio"


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_movie() -> Callable[..., Movie]:
    """Build a Movie with sensible defaults."""

    def factory(movie_id: int, title: str | None = None, **fields: Any) -> Movie:
        fields.setdefault("release_year", 2000)
        fields.setdefault("genre", "Drama")
        return Movie(id=movie_id, title=title or f"Movie {movie_id}", **fields)

    return factory


@pytest.fixture
def sample_movies(make_movie: Callable[..., Movie]) -> list[Movie]:
    """Three movies spanning a handful of genres."""
    return [
        make_movie(
            1,
            "Inception",
            release_year=2010,
            genre="Action, Sci-Fi",
            producers="Emma Thomas, Christopher Nolan",
            storyline="A thief who steals corporate secrets through dreams.",
        ),
        make_movie(
            2,
            "The Dark Knight",
            release_year=2008,
            genre="Action, Drama",
            producers="Emma Thomas, Charles Roven",
        ),
        make_movie(3, "Amelie", release_year=2001, genre="Comedy, Romance"),
    ]


@pytest.fixture
def sample_actors() -> list[Actor]:
    return [
        Actor(id=1, name="Leonardo DiCaprio", spouse=None, biography="American actor."),
        Actor(id=2, name="Christian Bale", spouse="Sibi Blazic"),
    ]


@pytest.fixture
def sample_producers() -> list[Producer]:
    return [
        Producer(id=1, name="Emma Thomas", year_of_birth="1971", country_of_origin="UK"),
        Producer(id=2, name="Christopher Nolan", year_of_birth="1970"),
    ]


@pytest.fixture
def catalog(
    sample_movies: list[Movie],
    sample_actors: list[Actor],
    sample_producers: list[Producer],
) -> CatalogState:
    """Catalog state already serving the sample collections."""
    snapshot = CatalogSnapshot(
        movies=tuple(sample_movies),
        actors=tuple(sample_actors),
        producers=tuple(sample_producers),
        genre_index=build_genre_index(sample_movies),
    )
    return CatalogState(snapshot=snapshot, load_cast=False)


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory SQLite store seeded with a small catalog."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = create_session_factory(engine)
    async with session_factory() as session:
        session.add_all(
            [
                models.Movie(
                    id=1,
                    title="Inception",
                    release_year=2010,
                    genre="Action, Sci-Fi",
                    producers="Emma Thomas, Christopher Nolan",
                ),
                models.Movie(
                    id=2,
                    title="The Dark Knight",
                    release_year=2008,
                    genre="Action, Drama",
                    producers="Emma Thomas, Charles Roven",
                ),
                models.Movie(id=3, title="Amelie", release_year=2001, genre="Comedy, Romance"),
                models.Actor(id=1, name="Leonardo DiCaprio", biography="American actor."),
                models.Actor(id=2, name="Christian Bale", spouse="Sibi Blazic"),
                models.Actor(id=3, name="Michael Caine"),
                models.Producer(id=1, name="Emma Thomas", year_of_birth="1971"),
                models.Producer(id=2, name="Christopher Nolan", year_of_birth="1970"),
            ]
        )
        await session.flush()
        session.add_all(
            [
                models.MovieActor(id=1, movie_id=1, actor_id=1),
                models.MovieActor(id=2, movie_id=1, actor_id=3),
                models.MovieActor(id=3, movie_id=2, actor_id=2),
                models.MovieActor(id=4, movie_id=2, actor_id=3),
            ]
        )
        await session.commit()

    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest.fixture
def repository(session_factory: async_sessionmaker[AsyncSession]) -> RepositoryAccessor:
    """Repository accessor backed by the seeded in-memory store."""
    return RepositoryAccessor(session_factory=session_factory, timeout=5.0)
