"""Explicit payload validation.

Each validator returns a list of failures instead of raising, so a
response can report every problem at once. Routes raise
PayloadValidationError when the list is non-empty.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date
from typing import Any

from courselib.schemas import AuthorForCreationDto, CourseForCreationDto, CourseForUpdateDto

NAME_MAX_LENGTH = 50
MAIN_CATEGORY_MAX_LENGTH = 50
TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1500


@dataclass(frozen=True)
class ValidationFailure:
    field: str
    message: str


class PayloadValidationError(ValueError):
    """Raised when a request payload fails explicit validation."""

    def __init__(self, failures: list[ValidationFailure]):
        self.failures = failures
        super().__init__("; ".join(f"{f.field}: {f.message}" for f in failures))


def _required(value: str | None, field: str, failures: list[ValidationFailure]) -> None:
    if value is None or not value.strip():
        failures.append(ValidationFailure(field, "This field is required."))


def _max_length(value: str | None, limit: int, field: str, failures: list[ValidationFailure]) -> None:
    if value is not None and len(value) > limit:
        failures.append(ValidationFailure(field, f"Must be at most {limit} characters long."))


def _validate_course_fields(
    title: str,
    description: str | None,
    prefix: str,
    failures: list[ValidationFailure],
) -> None:
    _required(title, f"{prefix}title", failures)
    _max_length(title, TITLE_MAX_LENGTH, f"{prefix}title", failures)
    _max_length(description, DESCRIPTION_MAX_LENGTH, f"{prefix}description", failures)
    if title and description is not None and title == description:
        failures.append(
            ValidationFailure(
                prefix.rstrip(".") or "course",
                "The provided description should be different from the title.",
            )
        )


def validate_course_for_creation(course: CourseForCreationDto, prefix: str = "") -> list[ValidationFailure]:
    failures: list[ValidationFailure] = []
    _validate_course_fields(course.title, course.description, prefix, failures)
    return failures


def validate_course_for_update(course: CourseForUpdateDto) -> list[ValidationFailure]:
    failures: list[ValidationFailure] = []
    _validate_course_fields(course.title, course.description, "", failures)
    _required(course.description, "description", failures)
    return failures


def validate_author_for_creation(author: AuthorForCreationDto) -> list[ValidationFailure]:
    failures: list[ValidationFailure] = []
    _required(author.first_name, "firstName", failures)
    _max_length(author.first_name, NAME_MAX_LENGTH, "firstName", failures)
    _required(author.last_name, "lastName", failures)
    _max_length(author.last_name, NAME_MAX_LENGTH, "lastName", failures)
    _required(author.main_category, "mainCategory", failures)
    _max_length(author.main_category, MAIN_CATEGORY_MAX_LENGTH, "mainCategory", failures)
    if author.date_of_birth > date.today():
        failures.append(ValidationFailure("dateOfBirth", "The date of birth cannot be in the future."))
    for index, course in enumerate(author.courses):
        failures.extend(validate_course_for_creation(course, prefix=f"courses[{index}]."))
    return failures


def raise_for_failures(failures: list[ValidationFailure]) -> None:
    if failures:
        raise PayloadValidationError(failures)


_REQUEST_LOCATIONS = ("body", "query", "path", "header")


def _field_path(loc: Sequence[str | int]) -> str:
    """Render an error location as a field path such as ``courses[0].title``."""
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _REQUEST_LOCATIONS:
        parts = parts[1:]
    path = ""
    for part in parts:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path


def failures_from_errors(errors: Iterable[dict[str, Any]]) -> list[ValidationFailure]:
    """Convert pydantic error dicts into validation failures."""
    return [ValidationFailure(_field_path(error.get("loc", ())), error["msg"]) for error in errors]
