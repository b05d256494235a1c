"""Tests for explicit payload validation."""

from datetime import date, timedelta

import pytest

from courselib.schemas import AuthorForCreationDto, CourseForCreationDto, CourseForUpdateDto
from courselib.validation import (
    PayloadValidationError,
    ValidationFailure,
    failures_from_errors,
    raise_for_failures,
    validate_author_for_creation,
    validate_course_for_creation,
    validate_course_for_update,
)


def fields_of(failures: list[ValidationFailure]) -> list[str]:
    return [failure.field for failure in failures]


def make_author(**overrides) -> AuthorForCreationDto:
    data = {
        "first_name": "Nancy",
        "last_name": "Rye",
        "date_of_birth": date(1968, 5, 21),
        "main_category": "Rum",
    }
    data.update(overrides)
    return AuthorForCreationDto(**data)


class TestCourseValidation:
    def test_valid_course(self):
        assert validate_course_for_creation(CourseForCreationDto(title="Maps", description="Reading them")) == []

    def test_description_is_optional_on_create(self):
        assert validate_course_for_creation(CourseForCreationDto(title="Maps")) == []

    def test_title_is_required(self):
        assert fields_of(validate_course_for_creation(CourseForCreationDto(title="  "))) == ["title"]

    def test_length_limits(self):
        course = CourseForCreationDto(title="t" * 101, description="d" * 1501)

        assert fields_of(validate_course_for_creation(course)) == ["title", "description"]

    def test_title_must_differ_from_description(self):
        failures = validate_course_for_creation(CourseForCreationDto(title="Rum", description="Rum"))

        assert fields_of(failures) == ["course"]
        assert "different from the title" in failures[0].message

    def test_prefix_is_applied(self):
        failures = validate_course_for_creation(CourseForCreationDto(title=""), prefix="courses[2].")

        assert fields_of(failures) == ["courses[2].title"]

    def test_update_requires_description(self):
        assert fields_of(validate_course_for_update(CourseForUpdateDto(title="Maps"))) == ["description"]

    def test_valid_update(self):
        assert validate_course_for_update(CourseForUpdateDto(title="Maps", description="Reading them")) == []


class TestAuthorValidation:
    def test_valid_author(self):
        assert validate_author_for_creation(make_author()) == []

    def test_required_fields(self):
        author = make_author(first_name="", last_name=" ", main_category="")

        assert fields_of(validate_author_for_creation(author)) == ["firstName", "lastName", "mainCategory"]

    def test_name_length(self):
        assert fields_of(validate_author_for_creation(make_author(last_name="x" * 51))) == ["lastName"]

    def test_birth_date_in_the_future(self):
        author = make_author(date_of_birth=date.today() + timedelta(days=1))

        assert fields_of(validate_author_for_creation(author)) == ["dateOfBirth"]

    def test_birth_date_today_is_allowed(self):
        assert validate_author_for_creation(make_author(date_of_birth=date.today())) == []

    def test_nested_course_failures_are_prefixed(self):
        author = make_author(courses=[CourseForCreationDto(title="Ok"), CourseForCreationDto(title="")])

        assert fields_of(validate_author_for_creation(author)) == ["courses[1].title"]


class TestRaiseForFailures:
    def test_no_failures(self):
        raise_for_failures([])

    def test_collects_all_failures(self):
        failures = [ValidationFailure("a", "bad"), ValidationFailure("b", "worse")]

        with pytest.raises(PayloadValidationError) as exc_info:
            raise_for_failures(failures)

        assert exc_info.value.failures == failures
        assert str(exc_info.value) == "a: bad; b: worse"


class TestFailuresFromErrors:
    def test_strips_request_location(self):
        errors = [{"loc": ("body", "dateOfBirth"), "msg": "Field required"}]

        assert failures_from_errors(errors) == [ValidationFailure("dateOfBirth", "Field required")]

    def test_renders_list_indexes(self):
        errors = [
            {"loc": ("body", "courses", 0, "title"), "msg": "Input should be a valid string"},
            {"loc": ("body", 1, "firstName"), "msg": "Input should be a valid string"},
        ]

        assert fields_of(failures_from_errors(errors)) == ["courses[0].title", "[1].firstName"]

    def test_query_parameters(self):
        errors = [{"loc": ("query", "pageNumber"), "msg": "Input should be greater than or equal to 1"}]

        assert fields_of(failures_from_errors(errors)) == ["pageNumber"]

    def test_whole_body(self):
        assert fields_of(failures_from_errors([{"loc": ("body",), "msg": "Field required"}])) == ["body"]
