from sqlalchemy.orm import Session

import movie_catalog.repositories.movie as movie_repo
from movie_catalog.db.models.movie import Movie as MovieModel
from movie_catalog.domain.valueobject import (
    new_movie_id,
    parse_display_name,
    parse_movie_id,
    parse_release_year,
)
from movie_catalog.errors import ClassifiedError
from movie_catalog.events import EventBus, MovieCreated


def create_movie(
    db: Session,
    bus: EventBus,
    display_name: str | None,
    director: str | None,
    release_year: int | None,
) -> MovieModel:
    """
    Create a movie and publish a MovieCreated event.

    - Validates every field through the value objects
    - Enforces uniqueness of (display_name, director, release_year)

    Raises:
        ClassifiedError: required / out of range for invalid fields,
            already exists for duplicates, infrastructure on storage failures
    """
    name = parse_display_name(display_name)
    director_name = parse_display_name(director, field="director")
    year = parse_release_year(release_year)

    if movie_repo.get_movie_by_natural_key(db, name, director_name, year):
        raise ClassifiedError.already_exists("movie")

    event = MovieCreated.new(new_movie_id(), name, director_name, year)
    movie = movie_repo.create_movie(
        db,
        movie_id=event.id,
        display_name=event.display_name,
        director=event.director,
        release_year=event.release_year,
        create_time=event.create_time,
    )
    bus.publish(event)
    return movie


def get_movie(db: Session, movie_id: str | None) -> MovieModel:
    """
    Raises:
        ClassifiedError: invalid format for malformed ids, not found if absent
    """
    movie = movie_repo.get_movie_by_id(db, parse_movie_id(movie_id))
    if not movie:
        raise ClassifiedError.not_found("movie")
    return movie


def list_movies(db: Session) -> list[MovieModel]:
    return movie_repo.get_all_movies(db)


def delete_movie(db: Session, movie_id: str | None) -> None:
    movie = get_movie(db, movie_id)
    movie_repo.delete_movie(db, movie)
