"""Actor and cast association table models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from movie_catalog.database import Base

if TYPE_CHECKING:
    from movie_catalog.models.movie import Movie


class Actor(Base):
    """A catalogued actor."""

    __tablename__ = "Actors"

    id: Mapped[int] = mapped_column("ActorID", primary_key=True)
    name: Mapped[str | None] = mapped_column("Name", String(255), nullable=True, index=True)
    spouse: Mapped[str | None] = mapped_column("Spouse", String(255), nullable=True)
    biography: Mapped[str | None] = mapped_column("Biography", Text, nullable=True)

    # Relationships
    movie_actors: Mapped[list[MovieActor]] = relationship(
        back_populates="actor", cascade="all, delete-orphan"
    )


class MovieActor(Base):
    """Association between a movie and a cast member.

    Filled by the ``PopulateMovieActors`` stored procedure.
    """

    __tablename__ = "MovieActors"

    id: Mapped[int] = mapped_column(primary_key=True)  # Billing order within a movie
    movie_id: Mapped[int] = mapped_column(
        "MovieID", ForeignKey("Movies.MovieID", ondelete="CASCADE"), index=True
    )
    actor_id: Mapped[int] = mapped_column(
        "ActorID", ForeignKey("Actors.ActorID", ondelete="CASCADE"), index=True
    )

    # Relationships
    movie: Mapped[Movie] = relationship(back_populates="movie_actors")
    actor: Mapped[Actor] = relationship(back_populates="movie_actors")
