"""
Property mapping between public resources and stored entities.

A property mapping lists the public field names a client may sort a
resource by and the storage columns each of them expands to. The table is
built once, never mutated afterwards, and handed to the repositories that
need it.

Example:
    ```python
    from course_library.storage.property_mapping import (
        build_property_mapping_service,
    )

    service = build_property_mapping_service()
    mapping = service.get_mapping(AuthorDto, Author)
    mapping.lookup("Name")
    # PropertyMappingValue(destination_properties=('first_name', 'last_name'), revert=False)
    ```
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from course_library.exceptions import ConfigurationError
from course_library.storage.sorting import parse_order_by


@dataclass(frozen=True)
class PropertyMappingValue:
    """
    Storage columns a public field sorts by.

    Attributes:
        destination_properties: Column names, in the order they are applied.
        revert: Invert the requested direction for these columns.
    """

    destination_properties: tuple[str, ...]
    revert: bool = False


@dataclass(frozen=True)
class PropertyMapping:
    """
    Sortable fields of one source type mapped onto one destination type.

    Public names are matched case-insensitively.

    Attributes:
        source: Public resource type (what clients see).
        destination: Stored entity type (what queries run against).
        entries: Public field name to mapping value.
    """

    source: type
    destination: type
    entries: Mapping[str, PropertyMappingValue]
    _index: Mapping[str, PropertyMappingValue] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))
        object.__setattr__(
            self,
            "_index",
            MappingProxyType(
                {name.casefold(): value for name, value in self.entries.items()}
            ),
        )

    def lookup(self, field_name: str) -> PropertyMappingValue | None:
        """
        Find the mapping for a public field name.

        Args:
            field_name: Public field name, any casing.

        Returns:
            The mapping value, or None if the field cannot be sorted by.
        """
        return self._index.get(field_name.casefold())

    def __contains__(self, field_name: object) -> bool:
        return isinstance(field_name, str) and self.lookup(field_name) is not None


class PropertyMappingService:
    """
    Registry of property mappings keyed by (source, destination) type pair.

    The registry is filled once in the constructor and read-only afterwards.
    """

    def __init__(self, mappings: Iterable[PropertyMapping]):
        self._mappings: dict[tuple[type, type], PropertyMapping] = {}
        for mapping in mappings:
            key = (mapping.source, mapping.destination)
            if key in self._mappings:
                raise ConfigurationError(
                    f"Duplicate property mapping for "
                    f"<{mapping.source.__name__}, {mapping.destination.__name__}>"
                )
            self._mappings[key] = mapping

    def get_mapping(self, source: type, destination: type) -> PropertyMapping:
        """
        Get the mapping registered for a type pair.

        Args:
            source: Public resource type.
            destination: Stored entity type.

        Returns:
            The registered PropertyMapping.

        Raises:
            ConfigurationError: If no mapping is registered for the pair.
        """
        try:
            return self._mappings[(source, destination)]
        except KeyError:
            raise ConfigurationError(
                f"Cannot find exact property mapping instance for "
                f"<{source.__name__}, {destination.__name__}>"
            ) from None

    def valid_mapping_exists(
        self, order_by: str | None, source: type, destination: type
    ) -> bool:
        """
        Check that every field named in an orderBy string can be sorted by.

        Parses the string the same way the sort compiler does but does not
        build any ordering.

        Args:
            order_by: Raw orderBy string, e.g. "name desc, age".
            source: Public resource type.
            destination: Stored entity type.

        Returns:
            True if the string is blank or every field has a mapping.

        Raises:
            ConfigurationError: If no mapping is registered for the pair.
        """
        if not order_by or not order_by.strip():
            return True

        mapping = self.get_mapping(source, destination)
        return all(
            field_name in mapping
            for field_name, _ in parse_order_by(order_by)
        )

    def __iter__(self) -> Iterator[PropertyMapping]:
        return iter(self._mappings.values())


def build_property_mapping_service() -> PropertyMappingService:
    """
    Build the property mappings used by the service.

    Returns:
        PropertyMappingService with every resource mapping registered.
    """
    from course_library.models.author import Author
    from course_library.schemas.author import AuthorDto

    author_mapping = PropertyMapping(
        source=AuthorDto,
        destination=Author,
        entries={
            "id": PropertyMappingValue(("id",)),
            "mainCategory": PropertyMappingValue(("main_category",)),
            # Older authors have earlier birth dates
            "age": PropertyMappingValue(("date_of_birth",), revert=True),
            "name": PropertyMappingValue(("first_name", "last_name")),
        },
    )

    return PropertyMappingService([author_mapping])
