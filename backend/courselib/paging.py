"""Paged query results.

A PagedResult holds one materialised page plus the numbers needed to
describe where it sits in the full result set.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of results.

    ``has_previous`` and ``has_next`` are derived from ``current_page`` and
    ``total_pages`` so they cannot drift out of sync.
    """

    items: tuple[T, ...]
    total_count: int
    current_page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        if self.total_count == 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @classmethod
    async def create(
        cls,
        db: AsyncSession,
        query: Select[Any],
        page_number: int,
        page_size: int,
    ) -> PagedResult[Any]:
        """Count the full result set, then fetch the requested page.

        Args:
            db: Async SQLAlchemy session.
            query: Filtered and ordered select returning ORM entities.
            page_number: 1-based page to fetch (already validated).
            page_size: Items per page (already clamped).

        Returns:
            Immutable page with pagination metadata.
        """
        count_query = select(func.count()).select_from(query.order_by(None).subquery())
        total_count = (await db.execute(count_query)).scalar() or 0

        # Offsets past the end can exceed the database's integer range
        offset = (page_number - 1) * page_size
        if offset >= total_count:
            items: tuple[Any, ...] = ()
        else:
            result = await db.execute(query.offset(offset).limit(page_size))
            items = tuple(result.scalars().all())

        return cls(
            items=items,
            total_count=total_count,
            current_page=page_number,
            page_size=page_size,
        )
