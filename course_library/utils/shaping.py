"""
Data shaping: return only the fields a client asked for.

Each shapeable pydantic schema gets a FieldAccessorRegistry, built once and
cached, which maps the schema's public field names (aliases, declaration
order) to attribute getters. Shaping a collection resolves the requested
field names once and then extracts values item by item.

Example:
    ```python
    registry = get_field_registry(AuthorDto)
    registry.has_properties("id, name")  # True
    registry.project(authors, "name,mainCategory")
    # [{"name": "Berry Griffin", "mainCategory": "Ships"}, ...]
    ```
"""

import copy
from functools import lru_cache
from operator import attrgetter
from typing import Any, Callable, Iterable

from pydantic import BaseModel

from course_library.exceptions import UnknownFieldError

Accessor = Callable[[Any], Any]
ResolvedField = tuple[str, Accessor]


def split_fields(fields: str | None) -> list[str]:
    """
    Split a comma-separated field list.

    A blank list yields no names. Otherwise every element is kept, so an
    empty element (e.g. "id,") comes back as "" and never resolves.
    """
    if not fields or not fields.strip():
        return []
    return [name.strip() for name in fields.split(",")]


class FieldAccessorRegistry:
    """
    Public fields of one schema and how to read each of them.

    Field names are matched case-insensitively; shaped output uses the
    declared casing.
    """

    def __init__(self, model: type[BaseModel]):
        self.model = model
        self._accessors: dict[str, Accessor] = {}
        self._index: dict[str, str] = {}

        for attr_name, field_info in model.model_fields.items():
            public_name = field_info.alias or attr_name
            self._accessors[public_name] = attrgetter(attr_name)
            self._index[public_name.casefold()] = public_name

    @property
    def resource_name(self) -> str:
        return self.model.__name__

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(self._accessors)

    def resolve(self, field_name: str) -> str | None:
        """Public name for a field in any casing, None if unknown."""
        return self._index.get(field_name.strip().casefold())

    def has_properties(self, fields: str | None) -> bool:
        """
        Check that every field in a comma-separated list exists.

        Args:
            fields: Client field list, blank means all fields.

        Returns:
            True if the list is blank or every name resolves.
        """
        return all(
            self.resolve(name) is not None for name in split_fields(fields)
        )

    def resolve_fields(self, fields: str | None) -> list[ResolvedField]:
        """
        Resolve a field list into (public name, accessor) pairs.

        Args:
            fields: Client field list. Blank selects every public field in
                declaration order. Repeated names are kept once.

        Returns:
            Resolved fields in request order.

        Raises:
            UnknownFieldError: If any name does not exist on the schema.
        """
        names = split_fields(fields)
        if not names:
            return list(self._accessors.items())

        resolved: dict[str, Accessor] = {}
        for name in names:
            public_name = self.resolve(name)
            if public_name is None:
                raise UnknownFieldError(name, self.resource_name)
            resolved.setdefault(public_name, self._accessors[public_name])
        return list(resolved.items())

    @staticmethod
    def shape(item: Any, resolved: Iterable[ResolvedField]) -> dict[str, Any]:
        """
        Build a shaped dict for one item from already resolved fields.

        Values are deep-copied so the result never aliases the source item.
        """
        return {
            name: copy.deepcopy(accessor(item)) for name, accessor in resolved
        }

    def project(
        self, items: Iterable[Any], fields: str | None
    ) -> list[dict[str, Any]]:
        """
        Shape every item of a collection.

        The field list is validated before the first item is touched.

        Args:
            items: Instances of this registry's schema.
            fields: Client field list, blank means all fields.

        Returns:
            One dict per item, keys in resolution order.

        Raises:
            UnknownFieldError: If any name does not exist on the schema.
        """
        resolved = self.resolve_fields(fields)
        return [self.shape(item, resolved) for item in items]

    def project_one(self, item: Any, fields: str | None) -> dict[str, Any]:
        """Shape a single item, see project()."""
        return self.shape(item, self.resolve_fields(fields))


@lru_cache
def get_field_registry(model: type[BaseModel]) -> FieldAccessorRegistry:
    """
    Get the cached field registry for a schema.

    Args:
        model: Pydantic schema class.

    Returns:
        FieldAccessorRegistry built on first use.
    """
    return FieldAccessorRegistry(model)


def has_properties(model: type[BaseModel], fields: str | None) -> bool:
    """Check that every field in a comma-separated list exists on a schema."""
    return get_field_registry(model).has_properties(fields)
