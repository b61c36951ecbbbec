"""Pydantic schemas for catalog API responses."""

from typing import Literal

from pydantic import BaseModel, Field

from movie_catalog.schemas.catalog import Actor, Movie, Producer, ProducerReference


class DetailField(BaseModel):
    """A labelled line on a detail page."""

    label: str
    value: str


class DetailView(BaseModel):
    """Everything a client needs to show one entity's detail page."""

    kind: Literal["movie", "actor", "producer"] = Field(description="Entity kind")
    id: int = Field(description="Entity ID")
    heading: str = Field(description="Page heading")
    image_path: str | None = Field(default=None, description="Poster or photo path")
    fields: list[DetailField] = Field(default_factory=list, description="Labelled details")


class MovieListResponse(BaseModel):
    """Movies matching a genre filter."""

    genre: str = Field(description="Applied genre filter")
    total: int = Field(description="Number of movies")
    results: list[Movie] = Field(default_factory=list)


class GenreOptionsResponse(BaseModel):
    """Genre filter options, ``All`` first then labels in lexicographic order."""

    options: list[str] = Field(default_factory=list)


class MovieDetailResponse(BaseModel):
    """Movie detail page with resolved producers and cast."""

    movie: Movie
    view: DetailView
    producers: list[ProducerReference] = Field(default_factory=list)
    cast: list[Actor] = Field(default_factory=list)


class ActorListResponse(BaseModel):
    """All loaded actors."""

    total: int
    results: list[Actor] = Field(default_factory=list)


class ProducerListResponse(BaseModel):
    """All loaded producers."""

    total: int
    results: list[Producer] = Field(default_factory=list)


class ProducerExistsResponse(BaseModel):
    """Result of a producer existence check."""

    name: str
    exists: bool


class AddToWatchList(BaseModel):
    """Request to add a movie to the watch-list."""

    movie_id: int = Field(description="ID of a loaded movie")


class WatchListAddResponse(BaseModel):
    """Outcome of an add request."""

    movie_id: int
    added: bool = Field(description="False when the movie was already on the list")
    message: str


class WatchListResponse(BaseModel):
    """Current watch-list in insertion order."""

    empty: bool
    message: str | None = Field(default=None, description="Placeholder text when empty")
    movies: list[Movie] = Field(default_factory=list)


class CatalogSummary(BaseModel):
    """Sizes of the currently served catalog."""

    movies: int
    actors: int
    producers: int
    genres: int
