"""Author repository.

Builds the filtered, sorted, paged author query. Sorting is resolved
through the property mapping registry so clients only ever name external
fields.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from courselib.mapping import PropertyMappingRegistry, apply_sort, compile_sort
from courselib.models import Author
from courselib.paging import PagedResult
from courselib.schemas import AuthorDto, AuthorsResourceParameters


class AuthorNotFoundError(ValueError):
    """Raised when an author is not found."""


class AuthorRepository:
    """Repository for Author persistence and collection queries."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _filtered_query(self, params: AuthorsResourceParameters) -> Select[tuple[Author]]:
        query = select(Author)

        if params.main_category and params.main_category.strip():
            query = query.where(Author.main_category == params.main_category.strip())

        if params.search_query and params.search_query.strip():
            term = params.search_query.strip()
            query = query.where(
                or_(
                    Author.main_category.contains(term, autoescape=True),
                    Author.first_name.contains(term, autoescape=True),
                    Author.last_name.contains(term, autoescape=True),
                )
            )
        return query

    async def list_authors(self, params: AuthorsResourceParameters) -> PagedResult[Author]:
        """Fetch one page of authors.

        Args:
            params: Filter, sort and paging options (page size already clamped).

        Returns:
            The requested page with its pagination metadata.

        Raises:
            UnknownSortFieldError: If ``order_by`` names an unmapped field.
        """
        query = self._filtered_query(params)

        if params.order_by and params.order_by.strip():
            table = PropertyMappingRegistry.lookup(AuthorDto, Author)
            query = apply_sort(query, Author, compile_sort(params.order_by, table))

        # Primary key as final tie-breaker keeps page boundaries stable
        query = query.order_by(Author.id)

        return await PagedResult.create(self.db, query, params.page_number, params.page_size)

    async def get_by_id(self, author_id: uuid.UUID) -> Author | None:
        result = await self.db.execute(select(Author).where(Author.id == author_id))
        return result.scalar_one_or_none()

    async def get_by_ids(self, author_ids: Iterable[uuid.UUID]) -> list[Author]:
        """Fetch authors by id, ordered by first then last name."""
        result = await self.db.execute(
            select(Author)
            .where(Author.id.in_(list(author_ids)))
            .order_by(Author.first_name, Author.last_name)
        )
        return list(result.scalars().all())

    async def exists(self, author_id: uuid.UUID) -> bool:
        result = await self.db.execute(select(Author.id).where(Author.id == author_id))
        return result.scalar_one_or_none() is not None

    async def add(self, author: Author) -> Author:
        """Persist a new author and its courses, assigning fresh ids."""
        author.id = uuid.uuid4()
        for course in author.courses:
            course.id = uuid.uuid4()
        self.db.add(author)
        await self.db.flush()
        return author

    async def delete(self, author_id: uuid.UUID) -> None:
        """Delete an author and, by cascade, its courses.

        Raises:
            AuthorNotFoundError: If the author does not exist.
        """
        author = await self.get_by_id(author_id)
        if author is None:
            raise AuthorNotFoundError(f"Author {author_id} not found")
        await self.db.delete(author)
        await self.db.flush()
