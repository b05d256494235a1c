"""Repositories over the async SQLAlchemy session."""

from courselib.repositories.author import AuthorNotFoundError, AuthorRepository
from courselib.repositories.course import CourseNotFoundError, CourseRepository

__all__ = [
    "AuthorNotFoundError",
    "AuthorRepository",
    "CourseNotFoundError",
    "CourseRepository",
]
