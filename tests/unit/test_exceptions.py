"""Tests for the application exception hierarchy."""

import pytest

from course_library.exceptions import (
    AppException,
    ConfigurationError,
    DatabaseError,
    NotFoundError,
    UnknownFieldError,
    UnknownSortFieldError,
    ValidationError,
)


class TestHTTPStatus:
    """Each exception carries the status code it is answered with."""

    @pytest.mark.parametrize(
        "exc, expected",
        [
            (AppException("failure"), 500),
            (ValidationError("bad input"), 400),
            (UnknownSortFieldError("bogus"), 400),
            (UnknownFieldError("notAField", "AuthorDto"), 400),
            (ConfigurationError("no mapping"), 400),
            (NotFoundError("missing"), 404),
            (DatabaseError("down"), 500),
        ],
    )
    def test_http_status(self, exc, expected):
        assert exc.http_status == expected

    def test_all_are_app_exceptions(self):
        for exc_type in (
            ValidationError,
            ConfigurationError,
            NotFoundError,
            DatabaseError,
        ):
            assert issubclass(exc_type, AppException)


class TestMessages:
    def test_message_is_kept(self):
        ex = NotFoundError("Author not found")

        assert ex.message == "Author not found"
        assert str(ex) == "Author not found"

    def test_unknown_sort_field(self):
        ex = UnknownSortFieldError("bogus")

        assert isinstance(ex, ValidationError)
        assert ex.field_name == "bogus"
        assert ex.message == "Key mapping for bogus is missing"

    def test_unknown_field(self):
        ex = UnknownFieldError("notAField", "AuthorDto")

        assert isinstance(ex, ValidationError)
        assert ex.field_name == "notAField"
        assert ex.resource == "AuthorDto"
        assert ex.message == "Property notAField wasn't found on AuthorDto"
