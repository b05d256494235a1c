"""Pydantic schemas."""

from courselib.schemas.author import (
    AuthorDto,
    AuthorForCreationDto,
    AuthorFullDto,
)
from courselib.schemas.course import (
    CourseDto,
    CourseForCreationDto,
    CourseForUpdateDto,
)
from courselib.schemas.link import LinkDto
from courselib.schemas.resource_parameters import AuthorsResourceParameters

__all__ = [
    "AuthorDto",
    "AuthorForCreationDto",
    "AuthorFullDto",
    "AuthorsResourceParameters",
    "CourseDto",
    "CourseForCreationDto",
    "CourseForUpdateDto",
    "LinkDto",
]
