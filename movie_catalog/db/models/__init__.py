from movie_catalog.db.models.movie import Movie

__all__ = ["Movie"]
