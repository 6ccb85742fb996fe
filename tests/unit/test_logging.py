"""Tests for the log formatters and the log context helpers."""

import json
import logging
import sys

import pytest

from course_library.logging import (
    HumanReadableFormatter,
    StructuredJSONFormatter,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from course_library.middlewares.correlation_id import correlation_id


def make_record(level=logging.INFO, msg="Listing authors", exc_info=None):
    return logging.LogRecord(
        name="course_library",
        level=level,
        pathname=__file__,
        lineno=42,
        msg=msg,
        args=None,
        exc_info=exc_info,
    )


@pytest.fixture(autouse=True)
def reset_context():
    clear_log_context()
    token = correlation_id.set("")
    yield
    correlation_id.reset(token)
    clear_log_context()


class TestLogContext:
    def test_set_merges_fields(self):
        set_log_context(endpoint="/api/authors")
        set_log_context(method="GET")

        assert get_log_context() == {"endpoint": "/api/authors", "method": "GET"}

    def test_clear(self):
        set_log_context(endpoint="/api/authors")
        clear_log_context()

        assert get_log_context() == {}


class TestStructuredJSONFormatter:
    def test_standard_fields(self):
        entry = json.loads(StructuredJSONFormatter().format(make_record()))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "course_library"
        assert entry["message"] == "Listing authors"
        assert entry["line"] == 42
        assert "environment" in entry
        assert "request_id" not in entry

    def test_request_fields(self):
        correlation_id.set("abcd1234")
        set_log_context(endpoint="/api/authors", status_code=200)

        entry = json.loads(StructuredJSONFormatter().format(make_record()))

        assert entry["request_id"] == "abcd1234"
        assert entry["endpoint"] == "/api/authors"
        assert entry["status_code"] == 200

    def test_extra_fields(self):
        record = make_record()
        record.author_id = "76053df4"

        entry = json.loads(StructuredJSONFormatter().format(record))

        assert entry["author_id"] == "76053df4"
        assert "msg" not in entry
        assert "args" not in entry

    def test_exception(self):
        try:
            raise ValueError("broken")
        except ValueError:
            record = make_record(level=logging.ERROR, exc_info=sys.exc_info())

        entry = json.loads(StructuredJSONFormatter().format(record))

        assert "ValueError: broken" in entry["exception"]


class TestHumanReadableFormatter:
    def test_info_is_short(self):
        output = HumanReadableFormatter().format(make_record())

        assert output.endswith("[-] INFO: Listing authors")

    def test_error_shows_location(self):
        correlation_id.set("abcd1234")

        output = HumanReadableFormatter().format(
            make_record(level=logging.ERROR, msg="Database error")
        )

        assert "[abcd1234] ERROR:" in output
        assert ":42 - Database error" in output
