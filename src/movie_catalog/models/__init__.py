"""SQLAlchemy models describing the catalog store."""

from movie_catalog.models.actor import Actor, MovieActor
from movie_catalog.models.movie import Movie
from movie_catalog.models.producer import Producer

__all__ = [
    "Actor",
    "Movie",
    "MovieActor",
    "Producer",
]
