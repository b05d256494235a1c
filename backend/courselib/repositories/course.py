"""Course repository. Every operation is scoped to one author."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from courselib.models import Course


class CourseNotFoundError(ValueError):
    """Raised when a course is not found for the given author."""


class CourseRepository:
    """Repository for Course persistence."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_for_author(self, author_id: uuid.UUID) -> list[Course]:
        result = await self.db.execute(
            select(Course).where(Course.author_id == author_id).order_by(Course.title)
        )
        return list(result.scalars().all())

    async def get(self, author_id: uuid.UUID, course_id: uuid.UUID) -> Course | None:
        result = await self.db.execute(
            select(Course).where(Course.author_id == author_id, Course.id == course_id)
        )
        return result.scalar_one_or_none()

    async def add(self, author_id: uuid.UUID, course: Course) -> Course:
        """Attach ``course`` to the author and persist it."""
        course.id = uuid.uuid4()
        course.author_id = author_id
        self.db.add(course)
        await self.db.flush()
        return course

    async def update(self, course: Course, title: str, description: str | None) -> Course:
        course.title = title
        course.description = description
        await self.db.flush()
        return course

    async def delete(self, author_id: uuid.UUID, course_id: uuid.UUID) -> None:
        """Delete one course.

        Raises:
            CourseNotFoundError: If the author has no such course.
        """
        course = await self.get(author_id, course_id)
        if course is None:
            raise CourseNotFoundError(f"Course {course_id} not found for author {author_id}")
        await self.db.delete(course)
        await self.db.flush()
