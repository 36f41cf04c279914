"""
Unit tests for the Movie record.
"""

import pytest
from pydantic import ValidationError

from service_movies.app.models import Movie


def test_validates_from_wire_names():
    movie = Movie.model_validate({"Title": "A", "Year": 1999, "Genre": "Drama", "ImageUrl": "u"})

    assert movie == Movie(title="A", year=1999, genre="Drama", image_url="u")


def test_dumps_wire_names():
    movie = Movie(title="A", year=1999, genre="Drama", image_url="u")

    assert movie.model_dump(by_alias=True) == {"Title": "A", "Year": 1999, "Genre": "Drama", "ImageUrl": "u"}


def test_is_immutable():
    movie = Movie(title="A", year=1999, genre="Drama", image_url="u")

    with pytest.raises(ValidationError):
        movie.title = "B"


def test_equality_is_by_value():
    first = Movie(title="A", year=1999, genre="Drama", image_url="u")
    second = Movie(title="A", year=1999, genre="Drama", image_url="u")

    assert first == second
    assert hash(first) == hash(second)
    assert first != Movie(title="A", year=2000, genre="Drama", image_url="u")


def test_numeric_string_year_is_converted():
    movie = Movie.model_validate({"Title": "A", "Year": "1999", "Genre": "Drama", "ImageUrl": "u"})

    assert movie.year == 1999


@pytest.mark.parametrize("missing", ["Title", "Year", "Genre", "ImageUrl"])
def test_missing_field_is_rejected(missing):
    payload = {"Title": "A", "Year": 1999, "Genre": "Drama", "ImageUrl": "u"}
    del payload[missing]

    with pytest.raises(ValidationError):
        Movie.model_validate(payload)


def test_fractional_year_is_rejected():
    with pytest.raises(ValidationError):
        Movie.model_validate({"Title": "A", "Year": 1999.5, "Genre": "Drama", "ImageUrl": "u"})
