"""Course API routes, nested under an author."""

import uuid

from fastapi import APIRouter, Depends, Request, Response, status

from courselib.dependencies import get_author_repository, get_course_repository
from courselib.mappers import to_course_dto, to_course_entity
from courselib.repositories import (
    AuthorNotFoundError,
    AuthorRepository,
    CourseNotFoundError,
    CourseRepository,
)
from courselib.schemas import CourseDto, CourseForCreationDto, CourseForUpdateDto
from courselib.validation import (
    raise_for_failures,
    validate_course_for_creation,
    validate_course_for_update,
)

router = APIRouter(prefix="/authors/{author_id}/courses", tags=["courses"])


async def _require_author(authors: AuthorRepository, author_id: uuid.UUID) -> None:
    if not await authors.exists(author_id):
        raise AuthorNotFoundError(f"Author {author_id} not found")


@router.get("", name="get_courses_for_author", response_model=list[CourseDto])
async def get_courses_for_author(
    author_id: uuid.UUID,
    authors: AuthorRepository = Depends(get_author_repository),
    courses: CourseRepository = Depends(get_course_repository),
) -> list[CourseDto]:
    """List an author's courses ordered by title."""
    await _require_author(authors, author_id)
    return [to_course_dto(course) for course in await courses.list_for_author(author_id)]


@router.get("/{course_id}", name="get_course_for_author", response_model=CourseDto)
async def get_course_for_author(
    author_id: uuid.UUID,
    course_id: uuid.UUID,
    authors: AuthorRepository = Depends(get_author_repository),
    courses: CourseRepository = Depends(get_course_repository),
) -> CourseDto:
    await _require_author(authors, author_id)
    course = await courses.get(author_id, course_id)
    if course is None:
        raise CourseNotFoundError(f"Course {course_id} not found for author {author_id}")
    return to_course_dto(course)


@router.post(
    "",
    name="create_course_for_author",
    response_model=CourseDto,
    status_code=status.HTTP_201_CREATED,
)
async def create_course_for_author(
    author_id: uuid.UUID,
    course: CourseForCreationDto,
    request: Request,
    response: Response,
    authors: AuthorRepository = Depends(get_author_repository),
    courses: CourseRepository = Depends(get_course_repository),
) -> CourseDto:
    """Create a course for an author.

    Raises:
        PayloadValidationError: 422 if the payload fails validation.
        AuthorNotFoundError: 404 if the author does not exist.
    """
    raise_for_failures(validate_course_for_creation(course))
    await _require_author(authors, author_id)

    saved = await courses.add(author_id, to_course_entity(course))
    response.headers["Location"] = str(
        request.url_for("get_course_for_author", author_id=str(author_id), course_id=str(saved.id))
    )
    return to_course_dto(saved)


@router.put("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_course_for_author(
    author_id: uuid.UUID,
    course_id: uuid.UUID,
    course: CourseForUpdateDto,
    authors: AuthorRepository = Depends(get_author_repository),
    courses: CourseRepository = Depends(get_course_repository),
) -> Response:
    """Replace a course's title and description."""
    raise_for_failures(validate_course_for_update(course))
    await _require_author(authors, author_id)

    existing = await courses.get(author_id, course_id)
    if existing is None:
        raise CourseNotFoundError(f"Course {course_id} not found for author {author_id}")
    await courses.update(existing, course.title, course.description)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_course_for_author(
    author_id: uuid.UUID,
    course_id: uuid.UUID,
    authors: AuthorRepository = Depends(get_author_repository),
    courses: CourseRepository = Depends(get_course_repository),
) -> Response:
    await _require_author(authors, author_id)
    await courses.delete(author_id, course_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
