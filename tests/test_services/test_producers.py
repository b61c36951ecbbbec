"""Tests for producer reference resolution."""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from movie_catalog.schemas.catalog import Movie, Producer
from movie_catalog.services.base import DataAccessError, NotFoundError
from movie_catalog.services.producers import ProducerResolver
from movie_catalog.services.repository import EntityKind, RepositoryAccessor

JANE_DOE_ROW = {
    "id": 11,
    "name": "Jane Doe",
    "year_of_birth": "1962",
    "most_famous_movies": "Quiet Harbour",
    "country_of_origin": "Canada",
}


def catalog_lookup(rows_by_name: dict[str, list[dict[str, Any]]]) -> MagicMock:
    """Mock repository whose producer table holds ``rows_by_name``."""
    mock_repo = MagicMock(spec=RepositoryAccessor)

    async def fetch_by_name(kind: EntityKind, name: str) -> list[dict[str, Any]]:
        assert kind is EntityKind.PRODUCER
        return rows_by_name.get(name, [])

    async def count(kind: EntityKind, name: str) -> int:
        assert kind is EntityKind.PRODUCER
        return len(rows_by_name.get(name, []))

    mock_repo.fetch_by_name = AsyncMock(side_effect=fetch_by_name)
    mock_repo.count = AsyncMock(side_effect=count)
    return mock_repo


@pytest.fixture
def resolver() -> ProducerResolver:
    return ProducerResolver(catalog_lookup({"Jane Doe": [JANE_DOE_ROW]}))


class TestProducerExists:
    """Tests for the existence check."""

    async def test_existing_name(self, resolver: ProducerResolver) -> None:
        assert await resolver.producer_exists("Jane Doe") is True

    async def test_unknown_name(self, resolver: ProducerResolver) -> None:
        assert await resolver.producer_exists("Unknown Person") is False

    async def test_connectivity_failure_reads_as_absent(self) -> None:
        mock_repo = MagicMock(spec=RepositoryAccessor)
        mock_repo.count = AsyncMock(side_effect=DataAccessError("connection refused"))
        resolver = ProducerResolver(mock_repo)

        assert await resolver.producer_exists("Jane Doe") is False


class TestResolveProducerByName:
    """Tests for by-name resolution."""

    async def test_returns_matching_record(self, resolver: ProducerResolver) -> None:
        producer = await resolver.resolve_producer_by_name("Jane Doe")

        assert producer == Producer(**JANE_DOE_ROW)

    async def test_missing_returns_none(self, resolver: ProducerResolver) -> None:
        assert await resolver.resolve_producer_by_name("Unknown Person") is None

    async def test_first_match_wins(self) -> None:
        second = {**JANE_DOE_ROW, "id": 12, "country_of_origin": "Ireland"}
        resolver = ProducerResolver(catalog_lookup({"Jane Doe": [JANE_DOE_ROW, second]}))

        producer = await resolver.resolve_producer_by_name("Jane Doe")

        assert producer is not None
        assert producer.id == 11

    async def test_storage_failure_propagates(self) -> None:
        mock_repo = MagicMock(spec=RepositoryAccessor)
        mock_repo.fetch_by_name = AsyncMock(side_effect=DataAccessError("timed out"))
        resolver = ProducerResolver(mock_repo)

        with pytest.raises(DataAccessError):
            await resolver.resolve_producer_by_name("Jane Doe")

    async def test_get_producer_by_name_raises_not_found(
        self, resolver: ProducerResolver
    ) -> None:
        with pytest.raises(NotFoundError, match="Unknown Person"):
            await resolver.get_producer_by_name("Unknown Person")


class TestProducerSection:
    """Tests for classifying a movie's producer names."""

    async def test_linked_and_plain_text(
        self, resolver: ProducerResolver, make_movie: Callable[..., Movie]
    ) -> None:
        movie = make_movie(1, producers="Jane Doe, Unknown Person")

        section = await resolver.resolve_producer_section(movie)

        assert [(ref.name, ref.linked) for ref in section] == [
            ("Jane Doe", True),
            ("Unknown Person", False),
        ]
        assert section[0].producer == await resolver.resolve_producer_by_name("Jane Doe")
        assert section[1].producer is None

    async def test_matches_two_step_protocol(
        self, resolver: ProducerResolver, make_movie: Callable[..., Movie]
    ) -> None:
        """Single-lookup classification agrees with exists-then-fetch."""
        movie = make_movie(1, producers=" Jane Doe ,Unknown Person,, Jane Doe")

        section = await resolver.resolve_producer_section(movie)

        for ref in section:
            assert ref.linked == await resolver.producer_exists(ref.name)
            if ref.linked:
                assert ref.producer == await resolver.resolve_producer_by_name(ref.name)

    async def test_blank_entries_skipped(
        self, resolver: ProducerResolver, make_movie: Callable[..., Movie]
    ) -> None:
        movie = make_movie(1, producers=" , Jane Doe ,  ,")

        section = await resolver.resolve_producer_section(movie)

        assert [ref.name for ref in section] == ["Jane Doe"]

    async def test_no_producers(
        self, resolver: ProducerResolver, make_movie: Callable[..., Movie]
    ) -> None:
        assert await resolver.resolve_producer_section(make_movie(1, producers=None)) == []

    async def test_lookup_failure_degrades_to_plain_text(
        self, make_movie: Callable[..., Movie]
    ) -> None:
        mock_repo = MagicMock(spec=RepositoryAccessor)
        mock_repo.fetch_by_name = AsyncMock(side_effect=DataAccessError("connection refused"))
        resolver = ProducerResolver(mock_repo)

        section = await resolver.resolve_producer_section(make_movie(1, producers="Jane Doe"))

        assert len(section) == 1
        assert section[0].linked is False
        assert section[0].producer is None

    async def test_against_store(self, repository: RepositoryAccessor) -> None:
        resolver = ProducerResolver(repository)
        movie = Movie(
            id=2,
            title="The Dark Knight",
            release_year=2008,
            producers="Emma Thomas, Charles Roven",
        )

        section = await resolver.resolve_producer_section(movie)

        assert [(ref.name, ref.linked) for ref in section] == [
            ("Emma Thomas", True),
            ("Charles Roven", False),
        ]
        assert section[0].producer is not None
        assert section[0].producer.year_of_birth == "1971"
