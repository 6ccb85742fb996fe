"""
Sample authors and courses loaded by `cli.py reset-db`.
"""

from datetime import date
from uuid import UUID, uuid4

from sqlmodel.ext.asyncio.session import AsyncSession

from course_library.models.author import Author
from course_library.models.course import Course

SAMPLE_AUTHORS: list[dict] = [
    {
        "id": UUID("d28888e9-2ba9-473a-a40f-e38cb54f9b35"),
        "first_name": "Berry",
        "last_name": "Griffin Beak Eldritch",
        "date_of_birth": date(1980, 7, 23),
        "main_category": "Ships",
        "courses": [
            (
                "Commandeering a Ship Without Getting Caught",
                "Commandeering a ship in rough waters isn't easy. "
                "Learn how to do it without getting caught.",
            ),
            (
                "Overthrowing Mutiny",
                "In this course, the author provides tips to avoid, "
                "or, if needed, overthrow pirate mutiny.",
            ),
        ],
    },
    {
        "id": UUID("da2fd609-d754-4feb-8acd-c4f9ff13ba96"),
        "first_name": "Nancy",
        "last_name": "Swashbuckler Rye",
        "date_of_birth": date(1978, 5, 21),
        "main_category": "Rum",
        "courses": [
            (
                "Avoiding Brawls While Drinking as Much Rum as You Desire",
                "Every good pirate loves rum, but it also has a tendency "
                "to get you into trouble.",
            ),
        ],
    },
    {
        "id": UUID("2902b665-1190-4c70-9915-b9c2d7680450"),
        "first_name": "Eli",
        "last_name": "Ivory Bones Sweet",
        "date_of_birth": date(1957, 12, 16),
        "main_category": "Singing",
        "courses": [
            (
                "Singalong Pirate Hits",
                "In this course you'll learn how to sing all-time "
                "favourite pirate songs without sounding like you "
                "actually know the words.",
            ),
        ],
    },
    {
        "id": UUID("102b566b-ba1f-404c-b2df-e2cde39ade09"),
        "first_name": "Arnold",
        "last_name": "The Unseen Stafford",
        "date_of_birth": date(1957, 3, 6),
        "main_category": "Singing",
        "courses": [],
    },
    {
        "id": UUID("5b3621c0-7b12-4e80-9c8b-3398cba7ee05"),
        "first_name": "Seabury",
        "last_name": "Toxic Reyson",
        "date_of_birth": date(1956, 11, 23),
        "main_category": "Maps",
        "courses": [
            (
                "Reading Treasure Maps by Moonlight",
                "Dark nights and faded ink are no excuse for digging "
                "in the wrong place.",
            ),
        ],
    },
    {
        "id": UUID("2aadd2df-7caf-45ab-9355-7f6332985a87"),
        "first_name": "Rutherford",
        "last_name": "Fearless Cloven",
        "date_of_birth": date(1981, 9, 10),
        "main_category": "General debauchery",
        "courses": [],
    },
    {
        "id": UUID("2ee49fe3-edf2-4f91-8409-3eb25ce6ca51"),
        "first_name": "Atherton",
        "last_name": "Bloody Nose Crow",
        "date_of_birth": date(1971, 10, 11),
        "main_category": "Rum",
        "courses": [
            (
                "Distilling Rum on a Budget",
                "A cask, a fire and a little patience.",
            ),
        ],
    },
]


async def seed_authors(session: AsyncSession) -> int:
    """
    Add the sample authors and their courses to a session.

    The caller commits.

    Args:
        session: Session to stage the sample data in.

    Returns:
        Number of authors added.
    """
    for data in SAMPLE_AUTHORS:
        author = Author(
            id=data["id"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            date_of_birth=data["date_of_birth"],
            main_category=data["main_category"],
            courses=[
                Course(id=uuid4(), title=title, description=description)
                for title, description in data["courses"]
            ],
        )
        session.add(author)

    await session.flush()
    return len(SAMPLE_AUTHORS)
