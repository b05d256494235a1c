"""Compile ``orderBy`` strings into ordered internal sort keys."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy import Select, inspect

from courselib.mapping.registry import MappingTable, parse_sort_clause

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortField:
    """One internal sort key; earlier keys take priority over later ones."""

    internal_name: str
    descending: bool = False


class EmptySortSpecificationError(ValueError):
    """Raised when the sort compiler receives a blank ``orderBy``."""


class UnknownSortFieldError(ValueError):
    """Raised when an ``orderBy`` clause names a field that cannot be sorted on."""

    def __init__(self, clause: str):
        self.clause = clause
        super().__init__(f"Sorting on '{clause}' is not supported")


def compile_sort(order_by: str, table: MappingTable) -> list[SortField]:
    """Translate an ``orderBy`` string into internal sort keys.

    Every clause is validated before any output is produced, so the
    result is either complete or an exception is raised.

    Args:
        order_by: Comma-separated clauses such as ``"Name desc, Age"``.
        table: Mapping table for the external/internal type pair.

    Returns:
        Sort keys in priority order. A clause whose external field maps to
        several internal fields contributes one key per internal field.

    Raises:
        EmptySortSpecificationError: If ``order_by`` is blank.
        UnknownSortFieldError: If a clause is malformed or not in ``table``.
    """
    if not order_by or not order_by.strip():
        raise EmptySortSpecificationError("orderBy must not be empty")

    resolved = []
    for clause in order_by.split(","):
        parsed = parse_sort_clause(clause)
        if parsed is None or parsed[0] not in table:
            logger.info("Rejected sort clause %r", clause.strip())
            raise UnknownSortFieldError(clause.strip())
        name, descending = parsed
        resolved.append((table[name], descending))

    sort_fields: list[SortField] = []
    for entry, descending in resolved:
        if entry.reverse_direction:
            descending = not descending
        sort_fields.extend(SortField(internal, descending) for internal in entry.internal_names)
    return sort_fields


def apply_sort(query: Select[Any], model: type, sort_fields: list[SortField]) -> Select[Any]:
    """Apply compiled sort keys to a select as a left-to-right composite order.

    Raises:
        RuntimeError: If a mapping names a column the model does not have.
    """
    columns = inspect(model).columns
    order_by = []
    for sort_field in sort_fields:
        if sort_field.internal_name not in columns:
            raise RuntimeError(
                f"Property mapping references unknown column "
                f"{model.__name__}.{sort_field.internal_name}"
            )
        column = getattr(model, sort_field.internal_name)
        order_by.append(column.desc() if sort_field.descending else column.asc())
    return query.order_by(*order_by)
