"""Recreate the schema and load sample authors and courses.

Usage:
    python -m courselib.scripts.seed_database

Running it again drops all existing data first.
"""

import asyncio
import logging
from datetime import date

from courselib.database import async_session_maker, reset_schema
from courselib.models import Author, Course

logger = logging.getLogger(__name__)

SAMPLE_AUTHORS: list[dict] = [
    {
        "first_name": "Berry",
        "last_name": "Griffin Beak Eldritch",
        "date_of_birth": date(1650, 7, 23),
        "main_category": "Ships",
        "courses": [
            ("Commandeering a Ship Without Getting Caught",
             "Commandeering a ship in rough waters isn't easy. Commandeering it without getting caught is even harder."),
            ("Overthrowing Mutiny",
             "In this course, the author provides tips to avoid, or, if needed, overthrow pirate mutiny."),
        ],
    },
    {
        "first_name": "Nancy",
        "last_name": "Swashbuckler Rye",
        "date_of_birth": date(1668, 5, 21),
        "main_category": "Rum",
        "courses": [
            ("Avoiding Brawls While Drinking as Much Rum as You Desire",
             "Every good pirate loves rum, but it also has a tendency to get you into trouble."),
        ],
    },
    {
        "first_name": "Eli",
        "last_name": "Ivory Bones Sweet",
        "date_of_birth": date(1701, 12, 16),
        "main_category": "Singing",
        "courses": [
            ("Singalong Pirate Hits",
             "In this course you'll learn how to sing all-time favourite pirate songs."),
        ],
    },
    {"first_name": "Arnold", "last_name": "The Unseen Stafford",
     "date_of_birth": date(1702, 3, 6), "main_category": "Singing", "courses": []},
    {"first_name": "Seabury", "last_name": "Toxic Reyson",
     "date_of_birth": date(1690, 11, 23), "main_category": "Maps", "courses": []},
    {"first_name": "Rutherford", "last_name": "Fearless Cloven",
     "date_of_birth": date(1723, 4, 5), "main_category": "General debauchery", "courses": []},
    {"first_name": "Atherton", "last_name": "Crow Ridley",
     "date_of_birth": date(1721, 10, 11), "main_category": "Rum", "courses": []},
    {"first_name": "Huxford", "last_name": "The Hawk Morris",
     "date_of_birth": date(1703, 9, 11), "date_of_death": date(1750, 9, 11),
     "main_category": "Maps", "courses": []},
]


def build_sample_authors() -> list[Author]:
    authors = []
    for data in SAMPLE_AUTHORS:
        fields = {key: value for key, value in data.items() if key != "courses"}
        author = Author(**fields)
        author.courses = [Course(title=title, description=description) for title, description in data["courses"]]
        authors.append(author)
    return authors


async def seed_database() -> int:
    """Reset the schema and insert the sample data.

    Returns:
        Number of authors inserted.
    """
    await reset_schema()
    authors = build_sample_authors()
    async with async_session_maker() as session:
        session.add_all(authors)
        await session.commit()
    return len(authors)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    count = asyncio.run(seed_database())
    logger.info("Seeded %d authors", count)
