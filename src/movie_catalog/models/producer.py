"""Producer table model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from movie_catalog.database import Base


class Producer(Base):
    """A catalogued producer.

    Movies reference producers by free-text name, never by key.
    """

    __tablename__ = "Producers"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    year_of_birth: Mapped[str | None] = mapped_column(String(50), nullable=True)
    most_famous_movies: Mapped[str | None] = mapped_column(Text, nullable=True)
    country_of_origin: Mapped[str | None] = mapped_column(String(255), nullable=True)
