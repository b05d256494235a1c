"""Tests for record to external model conversion and age calculation."""

import uuid
from datetime import date

from courselib.mappers import (
    to_author_dto,
    to_author_entity,
    to_author_full_dto,
    to_course_dto,
)
from courselib.models import Author, Course
from courselib.schemas import AuthorForCreationDto, CourseForCreationDto
from courselib.utils.dates import get_current_age


class TestGetCurrentAge:
    def test_before_birthday(self):
        assert get_current_age(date(1980, 6, 15), today=date(2020, 6, 14)) == 39

    def test_on_birthday(self):
        assert get_current_age(date(1980, 6, 15), today=date(2020, 6, 15)) == 40

    def test_measured_at_death(self):
        assert get_current_age(date(1703, 9, 11), date(1750, 9, 10), today=date(2020, 1, 1)) == 46

    def test_defaults_to_today(self):
        assert get_current_age(date.today()) == 0


class TestAuthorMappers:
    def make_author(self) -> Author:
        return Author(
            id=uuid.uuid4(),
            first_name="Huxford",
            last_name="Morris",
            date_of_birth=date(1703, 9, 11),
            date_of_death=date(1750, 9, 11),
            main_category="Maps",
        )

    def test_friendly_representation(self):
        author = self.make_author()

        dto = to_author_dto(author)

        assert dto.id == author.id
        assert dto.name == "Huxford Morris"
        assert dto.age == 47
        assert dto.main_category == "Maps"

    def test_full_representation(self):
        author = self.make_author()

        dto = to_author_full_dto(author)

        assert dto.first_name == "Huxford"
        assert dto.last_name == "Morris"
        assert dto.date_of_birth == date(1703, 9, 11)

    def test_entity_from_creation_payload(self):
        payload = AuthorForCreationDto(
            first_name="Nancy",
            last_name="Rye",
            date_of_birth=date(1668, 5, 21),
            main_category="Rum",
            courses=[CourseForCreationDto(title="Rum", description="Drinking it")],
        )

        author = to_author_entity(payload)

        assert author.first_name == "Nancy"
        assert author.date_of_death is None
        assert [course.title for course in author.courses] == ["Rum"]


class TestCourseMappers:
    def test_course_dto(self):
        course = Course(id=uuid.uuid4(), title="Maps", description=None, author_id=uuid.uuid4())

        dto = to_course_dto(course)

        assert dto.id == course.id
        assert dto.author_id == course.author_id
        assert dto.description is None
