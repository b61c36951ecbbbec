"""Want-to-watch list."""

from movie_catalog.schemas.catalog import Movie

EMPTY_MESSAGE = "No movies in your 'Want to Watch' list."


class WatchList:
    """Movies the user wants to watch, in the order they were added.

    Deduplicated by movie ID. Lives for the process and is never persisted;
    there is no removal.
    """

    def __init__(self) -> None:
        self._movies: list[Movie] = []
        self._ids: set[int] = set()

    def add(self, movie: Movie) -> bool:
        """Add a movie. Returns False if its ID is already on the list."""
        if movie.id in self._ids:
            return False
        self._ids.add(movie.id)
        self._movies.append(movie)
        return True

    def list_movies(self) -> list[Movie]:
        return list(self._movies)

    def is_empty(self) -> bool:
        return not self._movies

    def __contains__(self, movie_id: object) -> bool:
        return movie_id in self._ids

    def __len__(self) -> int:
        return len(self._movies)
