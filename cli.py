"""
CLI tool for course library maintenance.

Provides commands for resetting the database to the sample data and for
inspecting which fields clients can sort and shape by.
"""

import asyncio

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from course_library.schemas.author import AuthorDto
from course_library.schemas.course import CourseDto
from course_library.storage.property_mapping import (
    build_property_mapping_service,
)
from course_library.utils.shaping import get_field_registry

# Initialize Typer app with help text
typer_app = typer.Typer(
    name="library-cli",
    help="Course Library CLI - Manage the database and inspect resources",
    add_completion=False,
)
console = Console()

SHAPEABLE_RESOURCES = (AuthorDto, CourseDto)


@typer_app.command(name="reset-db")
def reset_db(
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Skip the confirmation prompt"
    ),
):
    """
    Drop every table, recreate it and load the sample authors.

    Example:
        python cli.py reset-db --yes
    """
    from course_library.storage.db import reset_db as reset_database

    if not yes and not typer.confirm(
        "This deletes all authors and courses. Continue?"
    ):
        raise typer.Exit(code=1)

    asyncio.run(reset_database())
    console.print(
        Panel.fit(
            "[green]✓ Database reset with sample data[/green]",
            border_style="green",
            title="Success",
        )
    )


@typer_app.command(name="sort-fields")
def sort_fields():
    """
    Display a table of the fields clients can order by.

    Shows each public field, the columns it sorts by and whether the
    direction is reversed.

    Example:
        python cli.py sort-fields
    """
    console.print()
    for mapping in build_property_mapping_service():
        table = Table(
            "Field",
            "Columns",
            "Reversed",
            title=f"{mapping.source.__name__} → {mapping.destination.__name__}",
            show_lines=True,
        )
        for name, value in mapping.entries.items():
            table.add_row(
                f"[green]{name}[/green]",
                ", ".join(value.destination_properties),
                "[yellow]yes[/yellow]" if value.revert else "no",
            )
        console.print(table)
    console.print()


@typer_app.command(name="shape-fields")
def shape_fields():
    """
    Display a table of the fields clients can select with `fields`.

    Example:
        python cli.py shape-fields
    """
    console.print()
    table = Table("Resource", "Fields", title="Shapeable fields", show_lines=True)
    for resource in SHAPEABLE_RESOURCES:
        registry = get_field_registry(resource)
        table.add_row(
            f"[cyan]{registry.resource_name}[/cyan]",
            ", ".join(registry.field_names),
        )
    console.print(table)
    console.print()


if __name__ == "__main__":
    typer_app()
