"""Tests for the maintenance CLI."""

from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from cli import typer_app

runner = CliRunner()


def test_sort_fields_lists_author_mapping():
    result = runner.invoke(typer_app, ["sort-fields"])

    assert result.exit_code == 0
    assert "AuthorDto" in result.output
    assert "mainCategory" in result.output
    assert "date_of_birth" in result.output


def test_shape_fields_lists_resources():
    result = runner.invoke(typer_app, ["shape-fields"])

    assert result.exit_code == 0
    assert "AuthorDto" in result.output
    assert "CourseDto" in result.output


def test_reset_db_requires_confirmation():
    with patch("course_library.storage.db.reset_db", new=AsyncMock()) as reset:
        result = runner.invoke(typer_app, ["reset-db"], input="n\n")

    assert result.exit_code == 1
    reset.assert_not_called()


def test_reset_db_with_yes():
    with patch("course_library.storage.db.reset_db", new=AsyncMock()) as reset:
        result = runner.invoke(typer_app, ["reset-db", "--yes"])

    assert result.exit_code == 0
    reset.assert_awaited_once()
