from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from movie_catalog.domain.valueobject import DisplayName, MovieID, ReleaseYear


@runtime_checkable
class DomainEvent(Protocol):
    """Anything the event bus can publish."""

    def kind(self) -> str: ...

    def aggregate_id(self) -> str: ...


class MovieCreated(BaseModel):
    """A movie was created.

    Serialized with ``model_dump(by_alias=True)`` the payload uses the
    ``movie_id`` key for the aggregate id.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., alias="movie_id")
    display_name: str
    director: str
    release_year: int
    create_time: datetime

    @classmethod
    def new(
        cls,
        movie_id: MovieID,
        display_name: DisplayName,
        director: DisplayName,
        release_year: ReleaseYear,
    ) -> MovieCreated:
        return cls(
            id=str(movie_id),
            display_name=str(display_name),
            director=str(director),
            release_year=int(release_year),
            create_time=datetime.now(timezone.utc),
        )

    def kind(self) -> str:
        return "movie-created"

    def aggregate_id(self) -> str:
        return self.id
