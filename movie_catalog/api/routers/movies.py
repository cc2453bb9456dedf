from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from movie_catalog.api.deps import get_db, get_event_bus
from movie_catalog.events import EventBus
from movie_catalog.schemas.error import ErrorResponse
from movie_catalog.schemas.movie import Movie, MovieCreate
from movie_catalog.services import movie as movie_service

router = APIRouter(prefix="/movies", tags=["movies"])

_errors = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@router.post(
    "",
    response_model=Movie,
    status_code=status.HTTP_201_CREATED,
    responses={**_errors, status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
)
def create_new_movie(
    movie_data: MovieCreate,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
):
    """
    Create a movie. A MovieCreated event is published once it is stored.
    """
    movie = movie_service.create_movie(
        db,
        bus,
        display_name=movie_data.display_name,
        director=movie_data.director,
        release_year=movie_data.release_year,
    )
    return Movie.model_validate(movie)


@router.get("", response_model=list[Movie], responses=_errors)
def get_all_movies(db: Session = Depends(get_db)):
    movies = movie_service.list_movies(db)
    return [Movie.model_validate(movie) for movie in movies]


@router.get(
    "/{movie_id}",
    response_model=Movie,
    responses={**_errors, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
def get_movie_by_id(movie_id: str, db: Session = Depends(get_db)):
    movie = movie_service.get_movie(db, movie_id)
    return Movie.model_validate(movie)


@router.delete(
    "/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**_errors, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
def delete_movie_by_id(movie_id: str, db: Session = Depends(get_db)):
    movie_service.delete_movie(db, movie_id)
