"""Bulk author routes: create several authors, fetch them back by id list."""

import uuid

from fastapi import APIRouter, Depends, Request, Response, status

from courselib.dependencies import get_author_repository
from courselib.mappers import to_author_dto, to_author_entity
from courselib.repositories import AuthorNotFoundError, AuthorRepository
from courselib.schemas import AuthorDto, AuthorForCreationDto
from courselib.validation import (
    ValidationFailure,
    raise_for_failures,
    validate_author_for_creation,
)

router = APIRouter(prefix="/authorcollections", tags=["author collections"])


class InvalidIdentifierListError(ValueError):
    """Raised when an id list in the path cannot be parsed."""


def parse_identifier_list(raw: str) -> list[uuid.UUID]:
    """Parse ``"id1,id2"`` into UUIDs.

    Raises:
        InvalidIdentifierListError: If the list is empty or any id is malformed.
    """
    parts = [part.strip() for part in raw.split(",")]
    if not parts or any(not part for part in parts):
        raise InvalidIdentifierListError(f"'{raw}' is not a valid list of author ids")
    try:
        return [uuid.UUID(part) for part in parts]
    except ValueError:
        raise InvalidIdentifierListError(f"'{raw}' is not a valid list of author ids") from None


@router.get("/({author_ids})", name="get_author_collection", response_model=list[AuthorDto])
async def get_author_collection(
    author_ids: str,
    repository: AuthorRepository = Depends(get_author_repository),
) -> list[AuthorDto]:
    """Fetch authors by a comma-separated id list; 404 unless all exist."""
    ids = parse_identifier_list(author_ids)
    authors = await repository.get_by_ids(ids)
    if len(authors) != len(set(ids)):
        raise AuthorNotFoundError("One or more authors in the collection were not found")
    return [to_author_dto(author) for author in authors]


@router.post("", response_model=list[AuthorDto], status_code=status.HTTP_201_CREATED)
async def create_author_collection(
    author_collection: list[AuthorForCreationDto],
    request: Request,
    response: Response,
    repository: AuthorRepository = Depends(get_author_repository),
) -> list[AuthorDto]:
    """Create several authors in one request.

    Every payload is validated before anything is stored.
    """
    failures: list[ValidationFailure] = []
    if not author_collection:
        failures.append(ValidationFailure("authors", "At least one author is required."))
    for index, author in enumerate(author_collection):
        failures.extend(
            ValidationFailure(f"[{index}].{failure.field}", failure.message)
            for failure in validate_author_for_creation(author)
        )
    raise_for_failures(failures)

    created = [await repository.add(to_author_entity(author)) for author in author_collection]
    dtos = [to_author_dto(author) for author in created]

    ids = ",".join(str(dto.id) for dto in dtos)
    response.headers["Location"] = str(request.url_for("get_author_collection", author_ids=ids))
    return dtos
