"""Movie API endpoints."""

from fastapi import APIRouter, Query

from movie_catalog.api.deps import Catalog, Resolver
from movie_catalog.config import get_settings
from movie_catalog.schemas.views import (
    GenreOptionsResponse,
    MovieDetailResponse,
    MovieListResponse,
)
from movie_catalog.services.base import NotFoundError
from movie_catalog.services.details import detail_view
from movie_catalog.services.genres import ALL_GENRES

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=MovieListResponse)
async def list_movies(
    catalog: Catalog,
    genre: str = Query(ALL_GENRES, min_length=1, description="Genre label, or All"),
) -> MovieListResponse:
    """List loaded movies, optionally filtered by one genre label.

    An unknown label yields an empty list rather than an error.
    """
    movies = catalog.filter_by_genre(genre)
    return MovieListResponse(genre=genre, total=len(movies), results=movies)


@router.get("/genres", response_model=GenreOptionsResponse)
async def list_genres(catalog: Catalog) -> GenreOptionsResponse:
    """Genre filter options: All, then every label in lexicographic order."""
    return GenreOptionsResponse(options=catalog.genre_options())


@router.get("/{movie_id}", response_model=MovieDetailResponse)
async def get_movie(
    movie_id: int,
    catalog: Catalog,
    resolver: Resolver,
) -> MovieDetailResponse:
    """Movie detail page.

    Producer names are resolved against the producer catalog on every
    request; names without a match come back as plain text.
    """
    movie = catalog.get_movie(movie_id)
    if movie is None:
        raise NotFoundError(f"Movie {movie_id} not found")

    producers = await resolver.resolve_producer_section(movie)
    return MovieDetailResponse(
        movie=movie,
        view=detail_view(movie, get_settings().image_root),
        producers=producers,
        cast=movie.cast,
    )
