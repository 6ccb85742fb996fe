"""
Structural types for the data access layer.

Commands that only need to look up or remove entities depend on the
`Repository` protocol rather than a concrete repository, so tests can
hand them any object with the same coroutine methods.

Example:
    ```python
    async def remove(repo: Repository[Author], author_id: UUID) -> None:
        author = await repo.get_by_id(author_id)
        if author is not None:
            await repo.delete(author)
    ```
"""

from typing import Any, Protocol, TypeVar, runtime_checkable
from uuid import UUID

T = TypeVar("T")


@runtime_checkable
class Repository(Protocol[T]):
    """Data access for entities of type T keyed by UUID."""

    async def get_by_id(self, id: UUID) -> T | None: ...

    async def exists(self, **filters: Any) -> bool: ...

    async def create(self, entity: T) -> T: ...

    async def update(self, entity: T) -> T: ...

    async def delete(self, entity: T) -> None: ...
