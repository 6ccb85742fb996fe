"""
Compile client orderBy strings into typed sort clauses.

An orderBy string is a comma-separated list of public field names, each
optionally followed by " desc". Every field is looked up in a property
mapping and expanded into one (column, direction) clause per destination
column. Clauses are applied to queries as SQLAlchemy column expressions,
the client string never reaches SQL.

Example:
    >>> clauses = compile_sort("name desc", author_mapping)
    >>> clauses
    [SortClause(field='first_name', direction=<SortDirection.DESC: 'desc'>),
     SortClause(field='last_name', direction=<SortDirection.DESC: 'desc'>)]
    >>> query = apply_sort(select(Author), clauses, Author)
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, NamedTuple, Sequence

from sqlalchemy import Select

from course_library.constants import SORT_DESCENDING_SUFFIX
from course_library.exceptions import ConfigurationError, UnknownSortFieldError

if TYPE_CHECKING:
    from course_library.storage.property_mapping import PropertyMapping


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def reverse(self) -> "SortDirection":
        return SortDirection.ASC if self is SortDirection.DESC else SortDirection.DESC


class SortClause(NamedTuple):
    """One storage column and the direction to sort it in."""

    field: str
    direction: SortDirection


def parse_order_by(order_by: str) -> list[tuple[str, bool]]:
    """
    Split an orderBy string into field names and descending flags.

    Only a trailing " desc" (case-sensitive) marks a clause as descending;
    anything after the first space is otherwise ignored. An empty clause
    (e.g. from a trailing comma) is kept as an empty field name, which no
    mapping resolves.

    Args:
        order_by: Raw orderBy string from the client.

    Returns:
        List of (field_name, descending) tuples in clause order. Empty for
        a blank string.
    """
    if not order_by.strip():
        return []

    parsed = []
    for raw_clause in order_by.split(","):
        clause = raw_clause.strip()
        descending = clause.endswith(SORT_DESCENDING_SUFFIX)
        first_space = clause.find(" ")
        field_name = clause if first_space == -1 else clause[:first_space]
        parsed.append((field_name, descending))

    return parsed


def compile_sort(
    order_by: str | None, mapping: "PropertyMapping"
) -> list[SortClause]:
    """
    Resolve an orderBy string against a property mapping.

    Args:
        order_by: Raw orderBy string, e.g. "name desc, mainCategory".
        mapping: Property mapping of the resource being sorted.

    Returns:
        Sort clauses in application order. Empty for a blank string.

    Raises:
        UnknownSortFieldError: If a field has no mapping. Raised before
            anything is applied to a query.
    """
    if not order_by or not order_by.strip():
        return []

    clauses: list[SortClause] = []
    for field_name, descending in parse_order_by(order_by):
        mapping_value = mapping.lookup(field_name)
        if mapping_value is None:
            raise UnknownSortFieldError(field_name)

        direction = SortDirection.DESC if descending else SortDirection.ASC
        if mapping_value.revert:
            direction = direction.reverse()

        for destination in mapping_value.destination_properties:
            clauses.append(SortClause(destination, direction))

    return clauses


def apply_sort(
    query: Select[Any], clauses: Sequence[SortClause], model: type
) -> Select[Any]:
    """
    Add ORDER BY expressions for compiled sort clauses to a query.

    Ties are broken only by later clauses; no primary key is appended.

    Args:
        query: Query to sort.
        clauses: Output of compile_sort().
        model: Model class the clause fields are columns of.

    Returns:
        The sorted query, or the same query if there are no clauses.

    Raises:
        ConfigurationError: If a clause names a column the model lacks.
    """
    for clause in clauses:
        column = getattr(model, clause.field, None)
        if column is None:
            raise ConfigurationError(
                f"{model.__name__} has no column {clause.field} to sort by"
            )
        if clause.direction is SortDirection.DESC:
            query = query.order_by(column.desc())
        else:
            query = query.order_by(column.asc())
    return query
