"""Genre index: genre label to the movies carrying it."""

from collections.abc import Iterable, Sequence

from movie_catalog.schemas.catalog import Movie
from movie_catalog.utils.text import split_csv

ALL_GENRES = "All"


class GenreIndex:
    """Read-only mapping of genre label to movies, in first-seen order.

    Built once per load by ``build_genre_index`` and never mutated after.
    """

    def __init__(self, movies: Sequence[Movie], by_genre: dict[str, list[Movie]]) -> None:
        self._movies = tuple(movies)
        self._by_genre = {label: tuple(items) for label, items in by_genre.items()}

    @property
    def labels(self) -> list[str]:
        """Distinct labels in order of first appearance."""
        return list(self._by_genre)

    def movies_for(self, label: str) -> list[Movie]:
        """Movies indexed under ``label``, empty when unknown."""
        return list(self._by_genre.get(label, ()))

    def filter(self, label: str) -> list[Movie]:
        """Movies to show for a genre filter.

        ``All`` means no filtering and returns the whole collection, including
        movies whose genre text produced no labels.
        """
        if label == ALL_GENRES:
            return list(self._movies)
        return self.movies_for(label)

    def as_dict(self) -> dict[str, list[Movie]]:
        return {label: list(items) for label, items in self._by_genre.items()}

    def __contains__(self, label: object) -> bool:
        return label in self._by_genre

    def __len__(self) -> int:
        return len(self._by_genre)


def build_genre_index(movies: Iterable[Movie]) -> GenreIndex:
    """Index movies by each label of their comma-separated genre field.

    A movie is listed at most once per label, compared by ID.
    """
    ordered = list(movies)
    by_genre: dict[str, list[Movie]] = {}
    seen: dict[str, set[int]] = {}
    for movie in ordered:
        for label in split_csv(movie.genre):
            ids = seen.setdefault(label, set())
            if movie.id in ids:
                continue
            ids.add(movie.id)
            by_genre.setdefault(label, []).append(movie)
    return GenreIndex(ordered, by_genre)


def genre_options(index: GenreIndex) -> list[str]:
    """Filter options: ``All`` first, then labels in lexicographic order.

    A stored label spelled ``All`` is shadowed by the unfiltered option.
    """
    return [ALL_GENRES, *sorted(label for label in index.labels if label != ALL_GENRES)]


def filter_by_genre(index: GenreIndex, label: str) -> list[Movie]:
    """Movies for ``label``; see ``GenreIndex.filter``."""
    return index.filter(label)
