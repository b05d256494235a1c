"""Unit tests for the seed_database script."""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from courselib.models import Author, Course
from courselib.scripts import seed_database


class TestBuildSampleAuthors:
    """Tests for the sample data."""

    def test_builds_one_author_per_entry(self):
        authors = seed_database.build_sample_authors()

        assert len(authors) == len(seed_database.SAMPLE_AUTHORS)
        assert all(isinstance(author, Author) for author in authors)

    def test_courses_are_attached(self):
        authors = seed_database.build_sample_authors()

        assert len(authors[0].courses) == 2
        assert all(isinstance(course, Course) for course in authors[0].courses)

    def test_titles_differ_from_descriptions(self):
        for author in seed_database.build_sample_authors():
            for course in author.courses:
                assert course.title != course.description


class TestSeedDatabase:
    """Tests for seed_database()."""

    @pytest.mark.asyncio
    async def test_inserts_sample_data(self, test_engine, db_session):
        session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

        with (
            patch.object(seed_database, "reset_schema", AsyncMock()) as reset_schema,
            patch.object(seed_database, "async_session_maker", session_maker),
        ):
            count = await seed_database.seed_database()

        reset_schema.assert_awaited_once()
        assert count == len(seed_database.SAMPLE_AUTHORS)
        assert (await db_session.execute(select(func.count(Author.id)))).scalar() == count
        courses = (await db_session.execute(select(func.count(Course.id)))).scalar()
        assert courses == sum(len(entry["courses"]) for entry in seed_database.SAMPLE_AUTHORS)
