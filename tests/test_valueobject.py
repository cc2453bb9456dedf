import uuid

import pytest

from movie_catalog.domain.valueobject import (
    new_movie_id,
    parse_display_name,
    parse_movie_id,
    parse_release_year,
)
from movie_catalog.errors import ClassifiedError


def test_parse_movie_id_returns_canonical_form():
    raw = "A3BB189E-8BF9-3888-9912-ACE4E6543002"
    assert parse_movie_id(raw) == raw.lower()
    assert parse_movie_id(f"  {raw.lower()}  ") == raw.lower()


@pytest.mark.parametrize("value", [None, "", "   "])
def test_parse_movie_id_missing(value):
    with pytest.raises(ClassifiedError) as exc_info:
        parse_movie_id(value)
    assert exc_info.value == ClassifiedError.required("movie_id")
    assert str(exc_info.value) == "movie_id is required"


@pytest.mark.parametrize(
    "value",
    [
        "not-a-uuid",
        "1234",
        "a3bb189e-8bf9-3888-9912",
        "{a3bb189e-8bf9-3888-9912-ace4e6543002}",
        "urn:uuid:a3bb189e-8bf9-3888-9912-ace4e6543002",
        "a3bb189e8bf938889912ace4e6543002",
    ],
)
def test_parse_movie_id_invalid_format(value):
    with pytest.raises(ClassifiedError) as exc_info:
        parse_movie_id(value)
    assert exc_info.value.is_invalid_format()
    assert str(exc_info.value) == "movie_id contains an invalid format, expected [uuid]"


def test_new_movie_id_is_parseable():
    movie_id = new_movie_id()
    assert uuid.UUID(movie_id).version == 4
    assert parse_movie_id(movie_id) == movie_id


def test_parse_display_name_strips_whitespace():
    assert parse_display_name("  Alien  ") == "Alien"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_parse_display_name_missing_uses_field_name(value):
    with pytest.raises(ClassifiedError) as exc_info:
        parse_display_name(value, field="director")
    assert exc_info.value == ClassifiedError.required("director")


def test_parse_display_name_too_long():
    with pytest.raises(ClassifiedError) as exc_info:
        parse_display_name("x" * 256)
    assert exc_info.value.is_out_of_range()
    assert str(exc_info.value) == "display_name is out of range [1,256)"


def test_parse_display_name_upper_bound_is_exclusive():
    assert parse_display_name("x" * 255) == "x" * 255


@pytest.mark.parametrize("year", [1888, 1979, 2099])
def test_parse_release_year_accepts_bounds(year):
    assert parse_release_year(year) == year


@pytest.mark.parametrize("year", [1887, 2100, -1])
def test_parse_release_year_out_of_range(year):
    with pytest.raises(ClassifiedError) as exc_info:
        parse_release_year(year)
    assert exc_info.value == ClassifiedError.out_of_range("release_year", 1888, 2100)


def test_parse_release_year_missing():
    with pytest.raises(ClassifiedError) as exc_info:
        parse_release_year(None)
    assert exc_info.value.is_required()
    assert exc_info.value.entity == "release_year"


def test_parse_display_name_single_character_is_accepted():
    assert parse_display_name(" M ") == "M"
