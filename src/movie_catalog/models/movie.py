"""Movie table model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from movie_catalog.database import Base

if TYPE_CHECKING:
    from movie_catalog.models.actor import MovieActor


class Movie(Base):
    """A catalogued movie.

    Column names follow the existing store, so rows read through
    ``Movie.__table__`` are keyed ``MovieID``, ``Title`` and so on.
    """

    __tablename__ = "Movies"

    id: Mapped[int] = mapped_column("MovieID", primary_key=True)
    title: Mapped[str] = mapped_column("Title", String(255))
    # External data is not guaranteed well-formed
    release_year: Mapped[int | None] = mapped_column("ReleaseYear", nullable=True)
    genre: Mapped[str | None] = mapped_column("Genre", String(255), nullable=True)
    storyline: Mapped[str | None] = mapped_column("Storyline", Text, nullable=True)
    country_of_origin: Mapped[str | None] = mapped_column(
        "CountryOfOrigin", String(255), nullable=True
    )
    filming_locations: Mapped[str | None] = mapped_column("FilmingLocations", Text, nullable=True)
    production_companies: Mapped[str | None] = mapped_column(
        "ProductionCompanies", Text, nullable=True
    )
    category: Mapped[str | None] = mapped_column("Category", String(100), nullable=True)
    producers: Mapped[str | None] = mapped_column("Producers", Text, nullable=True)  # Free text

    # Relationships
    movie_actors: Mapped[list[MovieActor]] = relationship(
        back_populates="movie", cascade="all, delete-orphan"
    )
