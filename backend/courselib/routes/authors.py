"""Author API routes.

Collection and single-item reads support sorting, paging, data shaping
and media-type driven representations with optional hypermedia links.
"""

import json
import logging
import uuid

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from courselib.constants import PAGINATION_HEADER
from courselib.dependencies import (
    get_author_repository,
    get_authors_resource_parameters,
    get_representation,
)
from courselib.links import LinkBuilder, ResourceUriType
from courselib.mappers import (
    to_author_dto,
    to_author_dtos,
    to_author_entity,
    to_author_full_dto,
    to_author_full_dtos,
)
from courselib.mapping import PropertyMappingRegistry, UnknownSortFieldError
from courselib.models import Author
from courselib.negotiation import Representation
from courselib.repositories import AuthorNotFoundError, AuthorRepository
from courselib.schemas import AuthorDto, AuthorForCreationDto, AuthorFullDto, AuthorsResourceParameters
from courselib.shaping import ShapeableModel, ensure_fields_exist, shape_collection, shape_data
from courselib.validation import raise_for_failures, validate_author_for_creation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/authors", tags=["authors"])


def _external_type(representation: Representation) -> type[ShapeableModel]:
    return AuthorFullDto if representation.variant == "full" else AuthorDto


@router.api_route("", methods=["GET", "HEAD"], name="get_authors")
async def get_authors(
    request: Request,
    params: AuthorsResourceParameters = Depends(get_authors_resource_parameters),
    representation: Representation = Depends(get_representation),
    repository: AuthorRepository = Depends(get_author_repository),
) -> JSONResponse:
    """List authors with filtering, sorting, paging and data shaping.

    Pagination metadata goes into the ``X-Pagination`` header. With a
    ``hateoas`` media type the body wraps the records as
    ``{"value": [...], "links": [...]}``; otherwise it is a plain list.

    Raises:
        UnknownSortFieldError: 400 if ``orderBy`` names an unsortable field.
        InvalidFieldSelectionError: 400 if ``fields`` names an unknown field.
    """
    if not PropertyMappingRegistry.is_valid_field_list(AuthorDto, Author, params.order_by):
        logger.info("Rejected orderBy %r", params.order_by)
        raise UnknownSortFieldError(params.order_by)

    external_type = _external_type(representation)
    ensure_fields_exist(external_type, params.fields)

    authors = await repository.list_authors(params)
    links = LinkBuilder(request)

    pagination_metadata = {
        "totalCount": authors.total_count,
        "pageSize": authors.page_size,
        "currentPage": authors.current_page,
        "totalPages": authors.total_pages,
        "previousPageLink": (
            links.authors_resource_uri(params, ResourceUriType.PREVIOUS_PAGE)
            if authors.has_previous
            else None
        ),
        "nextPageLink": (
            links.authors_resource_uri(params, ResourceUriType.NEXT_PAGE)
            if authors.has_next
            else None
        ),
    }
    headers = {PAGINATION_HEADER: json.dumps(pagination_metadata)}

    dtos = to_author_full_dtos(authors) if external_type is AuthorFullDto else to_author_dtos(authors)
    shaped = shape_collection(dtos, params.fields)

    if not representation.include_links:
        return JSONResponse(
            content=jsonable_encoder(shaped),
            media_type=representation.media_type,
            headers=headers,
        )

    for record, dto in zip(shaped, dtos):
        record["links"] = links.links_for_author(dto.id)

    body = {
        "value": shaped,
        "links": links.links_for_authors(params, authors.has_next, authors.has_previous),
    }
    return JSONResponse(
        content=jsonable_encoder(body),
        media_type=representation.media_type,
        headers=headers,
    )


@router.options("")
async def get_authors_options() -> Response:
    return Response(headers={"Allow": "GET,HEAD,POST,OPTIONS"})


@router.get("/{author_id}", name="get_author")
async def get_author(
    author_id: uuid.UUID,
    request: Request,
    fields: str | None = None,
    representation: Representation = Depends(get_representation),
    repository: AuthorRepository = Depends(get_author_repository),
) -> JSONResponse:
    """Get one author in the negotiated representation.

    Raises:
        InvalidFieldSelectionError: 400 if ``fields`` names an unknown field.
        AuthorNotFoundError: 404 if the author does not exist.
    """
    external_type = _external_type(representation)
    ensure_fields_exist(external_type, fields)

    author = await repository.get_by_id(author_id)
    if author is None:
        raise AuthorNotFoundError(f"Author {author_id} not found")

    dto = to_author_full_dto(author) if external_type is AuthorFullDto else to_author_dto(author)
    body = shape_data(dto, fields)
    if representation.include_links:
        body["links"] = LinkBuilder(request).links_for_author(author_id, fields)

    return JSONResponse(content=jsonable_encoder(body), media_type=representation.media_type)


@router.post("", name="create_author", status_code=status.HTTP_201_CREATED)
async def create_author(
    author: AuthorForCreationDto,
    request: Request,
    repository: AuthorRepository = Depends(get_author_repository),
) -> JSONResponse:
    """Create an author (and any nested courses).

    Returns the friendly representation with links and a Location header.

    Raises:
        PayloadValidationError: 422 if the payload fails validation.
    """
    raise_for_failures(validate_author_for_creation(author))

    saved = await repository.add(to_author_entity(author))
    dto = to_author_dto(saved)
    logger.info("Created author %s", dto.id)

    body = shape_data(dto)
    body["links"] = LinkBuilder(request).links_for_author(dto.id)

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=jsonable_encoder(body),
        headers={"Location": str(request.url_for("get_author", author_id=str(dto.id)))},
    )


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_author(
    author_id: uuid.UUID,
    repository: AuthorRepository = Depends(get_author_repository),
) -> Response:
    """Delete an author and all of their courses.

    Raises:
        AuthorNotFoundError: 404 if the author does not exist.
    """
    await repository.delete(author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
