from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Movie(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    display_name: str
    director: str
    release_year: int
    create_time: datetime


class MovieCreate(BaseModel):
    # Left optional so missing values are reported as classified "required" errors
    display_name: str | None = None
    director: str | None = None
    release_year: int | None = None
