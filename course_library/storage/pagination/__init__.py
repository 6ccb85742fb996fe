"""
Offset pagination for database queries.

Example:
    ```python
    from course_library.storage.pagination import PagedList
    from sqlmodel import select

    query = select(Author).where(Author.main_category == "Rum")
    page = await PagedList.create(session, query, page_number=2, page_size=10)

    print(f"Page {page.current_page} of {page.total_pages}")
    print(f"Total items: {page.total_count}")
    ```
"""

from course_library.storage.pagination.paged_list import (
    PagedList,
    clamp_page_size,
)

__all__ = ["PagedList", "clamp_page_size"]
