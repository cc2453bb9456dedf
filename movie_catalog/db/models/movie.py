from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint

from movie_catalog.db.base import Base


class Movie(Base):
    __tablename__ = "movies"
    __table_args__ = (
        UniqueConstraint(
            "display_name", "director", "release_year", name="uq_movies_name_director_year"
        ),
    )

    id = Column(String(36), primary_key=True, index=True)
    display_name = Column(String(255), nullable=False)
    director = Column(String(255), nullable=False)
    release_year = Column(Integer, nullable=False)
    create_time = Column(DateTime(timezone=True), nullable=False)
