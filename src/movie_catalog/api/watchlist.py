"""Want-to-watch list API endpoints."""

from fastapi import APIRouter, status

from movie_catalog.api.deps import Catalog
from movie_catalog.schemas.views import AddToWatchList, WatchListAddResponse, WatchListResponse
from movie_catalog.services.base import NotFoundError
from movie_catalog.services.watchlist import EMPTY_MESSAGE

router = APIRouter(prefix="/watchlist", tags=["watchlist"])


@router.get("", response_model=WatchListResponse)
async def get_watch_list(catalog: Catalog) -> WatchListResponse:
    """Current watch-list in the order movies were added."""
    watch_list = catalog.watch_list
    if watch_list.is_empty():
        return WatchListResponse(empty=True, message=EMPTY_MESSAGE)
    return WatchListResponse(empty=False, movies=watch_list.list_movies())


@router.post("", response_model=WatchListAddResponse, status_code=status.HTTP_200_OK)
async def add_to_watch_list(request: AddToWatchList, catalog: Catalog) -> WatchListAddResponse:
    """Add a loaded movie to the watch-list.

    Adding a movie that is already listed is a no-op reported as
    ``added: false``.
    """
    movie = catalog.get_movie(request.movie_id)
    if movie is None:
        raise NotFoundError(f"Movie {request.movie_id} not found")

    added = catalog.watch_list.add(movie)
    return WatchListAddResponse(
        movie_id=movie.id,
        added=added,
        message="Successfully added" if added else "Already in your list",
    )
