from __future__ import annotations

import uuid
from typing import NewType

from movie_catalog.errors import ClassifiedError

MovieID = NewType("MovieID", str)
DisplayName = NewType("DisplayName", str)
ReleaseYear = NewType("ReleaseYear", int)

DISPLAY_NAME_MIN_LENGTH = 1
DISPLAY_NAME_MAX_LENGTH = 256  # exclusive

# The first motion picture dates from 1888.
RELEASE_YEAR_MIN = 1888
RELEASE_YEAR_MAX = 2100  # exclusive


def parse_movie_id(value: str | None) -> MovieID:
    """Return the canonical (lower-case, hyphenated) form of a movie UUID.

    Raises:
        ClassifiedError: required when missing, invalid format when not a UUID
    """
    if value is None or not value.strip():
        raise ClassifiedError.required("movie_id")
    raw = value.strip()
    try:
        parsed = uuid.UUID(raw)
    except ValueError:
        raise ClassifiedError.invalid_format("movie_id", "uuid") from None
    # Braced, urn:uuid: and unhyphenated spellings are not canonical
    if str(parsed) != raw.lower():
        raise ClassifiedError.invalid_format("movie_id", "uuid")
    return MovieID(str(parsed))


def new_movie_id() -> MovieID:
    return MovieID(str(uuid.uuid4()))


def parse_display_name(value: str | None, field: str = "display_name") -> DisplayName:
    """Strip surrounding whitespace and enforce the length bounds.

    ``field`` names the entity in the error, so the same rule serves titles
    and director names.
    """
    if value is None:
        raise ClassifiedError.required(field)
    name = value.strip()
    if not name:
        raise ClassifiedError.required(field)
    # Empty names are reported as required above, so only the upper bound can fail here
    if len(name) >= DISPLAY_NAME_MAX_LENGTH:
        raise ClassifiedError.out_of_range(
            field, DISPLAY_NAME_MIN_LENGTH, DISPLAY_NAME_MAX_LENGTH
        )
    return DisplayName(name)


def parse_release_year(value: int | None) -> ReleaseYear:
    if value is None:
        raise ClassifiedError.required("release_year")
    if not RELEASE_YEAR_MIN <= value < RELEASE_YEAR_MAX:
        raise ClassifiedError.out_of_range("release_year", RELEASE_YEAR_MIN, RELEASE_YEAR_MAX)
    return ReleaseYear(value)
