"""Pydantic models for catalog entities.

Entities validate straight from storage rows: each field reads the store's
column name through ``validation_alias`` and serializes under its own name.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Actor(BaseModel):
    """An actor as loaded from the ``Actors`` table."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int = Field(validation_alias="ActorID", description="Actor ID")
    name: str | None = Field(default=None, validation_alias="Name", description="Actor's name")
    spouse: str | None = Field(default=None, validation_alias="Spouse", description="Spouse")
    biography: str | None = Field(
        default=None, validation_alias="Biography", description="Short biography"
    )


class Producer(BaseModel):
    """A producer as loaded from the ``Producers`` table."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(description="Producer ID")
    name: str | None = Field(default=None, description="Producer's name")
    year_of_birth: str | None = Field(default=None, description="Year of birth, as stored")
    most_famous_movies: str | None = Field(default=None, description="Most famous movies")
    country_of_origin: str | None = Field(default=None, description="Country of origin")

    @field_validator("year_of_birth", mode="before")
    @classmethod
    def stringify_year_of_birth(cls, v: Any) -> str | None:
        """Keep the year as text; numeric storage values are stringified."""
        if v is None:
            return None
        return str(v)


class Movie(BaseModel):
    """A movie as loaded from the ``Movies`` table."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int = Field(validation_alias="MovieID", description="Movie ID")
    title: str = Field(min_length=1, validation_alias="Title", description="Movie title")
    release_year: int = Field(validation_alias="ReleaseYear", description="Release year")
    genre: str = Field(
        default="", validation_alias="Genre", description="Comma-separated genre labels"
    )
    storyline: str | None = Field(default=None, validation_alias="Storyline")
    country_of_origin: str | None = Field(default=None, validation_alias="CountryOfOrigin")
    filming_locations: str | None = Field(default=None, validation_alias="FilmingLocations")
    production_companies: str | None = Field(
        default=None, validation_alias="ProductionCompanies"
    )
    category: str | None = Field(default=None, validation_alias="Category")
    producers: str | None = Field(
        default=None, validation_alias="Producers", description="Comma-separated producer names"
    )
    cast: list[Actor] = Field(default_factory=list, description="Cast in billing order")

    @field_validator("genre", mode="before")
    @classmethod
    def empty_genre_for_null(cls, v: Any) -> Any:
        """A NULL genre column is treated as no genres."""
        return "" if v is None else v


class ProducerReference(BaseModel):
    """One producer name from a movie, classified as linked or plain text."""

    name: str = Field(description="Producer name as written on the movie")
    linked: bool = Field(default=False, description="Whether a catalogued producer matches")
    producer: Producer | None = Field(default=None, description="Matched producer record")


class MovieRef(BaseModel):
    """Reference to a movie by ID."""

    kind: Literal["movie"] = "movie"
    id: int


class ActorRef(BaseModel):
    """Reference to an actor by ID."""

    kind: Literal["actor"] = "actor"
    id: int


class ProducerRef(BaseModel):
    """Reference to a producer by ID or by exact name."""

    kind: Literal["producer"] = "producer"
    id: int | None = None
    name: str | None = None

    @model_validator(mode="after")
    def require_id_or_name(self) -> "ProducerRef":
        """Require exactly one way of identifying the producer."""
        if (self.id is None) == (self.name is None):
            raise ValueError("Provide either id or name for a producer reference")
        return self


EntityRef = Annotated[MovieRef | ActorRef | ProducerRef, Field(discriminator="kind")]
