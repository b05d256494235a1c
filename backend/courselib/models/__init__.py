"""SQLAlchemy models."""

from courselib.models.author import Author
from courselib.models.course import Course

__all__ = [
    "Author",
    "Course",
]
