"""Shared FastAPI dependency providers."""

from fastapi import Depends, Header, Query
from sqlalchemy.ext.asyncio import AsyncSession

from courselib.constants import DEFAULT_ORDER_BY, DEFAULT_PAGE_SIZE
from courselib.database import get_db
from courselib.negotiation import Representation, negotiator
from courselib.repositories import AuthorRepository, CourseRepository
from courselib.schemas import AuthorsResourceParameters


def get_author_repository(db: AsyncSession = Depends(get_db)) -> AuthorRepository:
    return AuthorRepository(db)


def get_course_repository(db: AsyncSession = Depends(get_db)) -> CourseRepository:
    return CourseRepository(db)


def get_representation(accept: str | None = Header(default=None)) -> Representation:
    """Negotiate the author representation from the Accept header."""
    return negotiator.negotiate(accept)


def get_authors_resource_parameters(
    main_category: str | None = Query(None, alias="mainCategory"),
    search_query: str | None = Query(None, alias="searchQuery"),
    page_number: int = Query(1, alias="pageNumber", ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize", ge=1),
    order_by: str = Query(DEFAULT_ORDER_BY, alias="orderBy"),
    fields: str | None = Query(None),
) -> AuthorsResourceParameters:
    """Collect the author collection query string into one model.

    Oversized page sizes are clamped by the model, not rejected.
    """
    return AuthorsResourceParameters(
        main_category=main_category,
        search_query=search_query,
        page_number=page_number,
        page_size=page_size,
        order_by=order_by,
        fields=fields,
    )
