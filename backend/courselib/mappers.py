"""Conversions between ORM records and external models.

All functions are pure; the API layer never reads ORM attributes directly.
"""

from __future__ import annotations

from collections.abc import Iterable

from courselib.models import Author, Course
from courselib.schemas import (
    AuthorDto,
    AuthorForCreationDto,
    AuthorFullDto,
    CourseDto,
    CourseForCreationDto,
)
from courselib.utils.dates import get_current_age


def to_author_dto(author: Author) -> AuthorDto:
    return AuthorDto(
        id=author.id,
        name=f"{author.first_name} {author.last_name}",
        age=get_current_age(author.date_of_birth, author.date_of_death),
        main_category=author.main_category,
    )


def to_author_full_dto(author: Author) -> AuthorFullDto:
    return AuthorFullDto(
        id=author.id,
        first_name=author.first_name,
        last_name=author.last_name,
        date_of_birth=author.date_of_birth,
        main_category=author.main_category,
    )


def to_author_dtos(authors: Iterable[Author]) -> list[AuthorDto]:
    return [to_author_dto(author) for author in authors]


def to_author_full_dtos(authors: Iterable[Author]) -> list[AuthorFullDto]:
    return [to_author_full_dto(author) for author in authors]


def to_course_entity(course: CourseForCreationDto) -> Course:
    return Course(title=course.title, description=course.description)


def to_author_entity(author: AuthorForCreationDto) -> Author:
    """Build an unsaved Author (with its courses) from a creation payload."""
    return Author(
        first_name=author.first_name,
        last_name=author.last_name,
        date_of_birth=author.date_of_birth,
        main_category=author.main_category,
        courses=[to_course_entity(course) for course in author.courses],
    )


def to_course_dto(course: Course) -> CourseDto:
    return CourseDto(
        id=course.id,
        title=course.title,
        description=course.description,
        author_id=course.author_id,
    )
