"""Data access for movies.

Storage failures never leave this module as driver exceptions: they are
logged and re-raised as infrastructure errors.
"""

import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from movie_catalog.db.models.movie import Movie as MovieModel
from movie_catalog.errors import ClassifiedError

logger = logging.getLogger(__name__)

STORAGE_UNAVAILABLE = "movie storage unavailable"


def _storage_error(db: Session, action: str, exc: SQLAlchemyError) -> ClassifiedError:
    db.rollback()
    logger.error("Failed to %s: %s", action, exc)
    return ClassifiedError.infrastructure(STORAGE_UNAVAILABLE)


def get_movie_by_id(db: Session, movie_id: str) -> MovieModel | None:
    """Get a movie by ID."""
    try:
        return db.query(MovieModel).filter(MovieModel.id == movie_id).first()
    except SQLAlchemyError as e:
        raise _storage_error(db, "load movie", e) from e


def get_all_movies(db: Session) -> list[MovieModel]:
    """Get all movies, oldest first."""
    try:
        return db.query(MovieModel).order_by(MovieModel.create_time, MovieModel.id).all()
    except SQLAlchemyError as e:
        raise _storage_error(db, "list movies", e) from e


def get_movie_by_natural_key(
    db: Session, display_name: str, director: str, release_year: int
) -> MovieModel | None:
    """Get a movie by its (display_name, director, release_year) combination."""
    try:
        return (
            db.query(MovieModel)
            .filter(
                MovieModel.display_name == display_name,
                MovieModel.director == director,
                MovieModel.release_year == release_year,
            )
            .first()
        )
    except SQLAlchemyError as e:
        raise _storage_error(db, "load movie", e) from e


def create_movie(
    db: Session,
    movie_id: str,
    display_name: str,
    director: str,
    release_year: int,
    create_time: datetime,
) -> MovieModel:
    """Insert a movie. Pure data access - no business logic."""
    db_movie = MovieModel(
        id=movie_id,
        display_name=display_name,
        director=director,
        release_year=release_year,
        create_time=create_time,
    )
    try:
        db.add(db_movie)
        db.commit()
    except IntegrityError as e:
        # Lost a race against a concurrent insert of the same movie
        db.rollback()
        raise ClassifiedError.already_exists("movie") from e
    except SQLAlchemyError as e:
        raise _storage_error(db, "create movie", e) from e
    try:
        db.refresh(db_movie)
    except SQLAlchemyError as e:
        raise _storage_error(db, "reload movie", e) from e
    return db_movie


def delete_movie(db: Session, movie: MovieModel) -> None:
    try:
        db.delete(movie)
        db.commit()
    except SQLAlchemyError as e:
        raise _storage_error(db, "delete movie", e) from e
