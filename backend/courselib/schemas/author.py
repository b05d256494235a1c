"""Pydantic schemas for the author resources.

Two read representations exist: the friendly one (display name and age)
and the full one (raw name parts and birth date). Which one a client gets
is decided by the negotiated media type.
"""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from courselib.schemas.base import API_MODEL_CONFIG
from courselib.schemas.course import CourseForCreationDto
from courselib.shaping import ShapeableModel


class AuthorDto(ShapeableModel):
    """Friendly author representation."""

    model_config = API_MODEL_CONFIG

    id: UUID
    name: str
    age: int
    main_category: str


class AuthorFullDto(ShapeableModel):
    """Full author representation."""

    model_config = API_MODEL_CONFIG

    id: UUID
    first_name: str
    last_name: str
    date_of_birth: date
    main_category: str


class AuthorForCreationDto(BaseModel):
    """Payload for creating an author, optionally with courses.

    Length and presence rules live in ``courselib.validation``.
    """

    model_config = API_MODEL_CONFIG

    first_name: str = ""
    last_name: str = ""
    date_of_birth: date
    main_category: str = ""
    courses: list[CourseForCreationDto] = Field(default_factory=list)
