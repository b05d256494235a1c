"""Property mapping registry.

Tables are registered once at startup for an exact (external type,
internal type) pair and are read-only afterwards.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

logger = logging.getLogger(__name__)

_DIRECTIONS = ("asc", "desc")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class PropertyMappingEntry:
    """One external field and the internal fields it sorts by.

    Args:
        external_name: Field name visible to API clients.
        internal_names: Internal fields, in tie-break order.
        reverse_direction: Invert the requested direction (e.g. age vs birth date).
    """

    external_name: str
    internal_names: tuple[str, ...]
    reverse_direction: bool = False

    def __post_init__(self) -> None:
        if not self.internal_names:
            raise ValueError(f"Mapping for '{self.external_name}' needs at least one internal field")


class MappingTable(Mapping[str, PropertyMappingEntry]):
    """Immutable, case-insensitive mapping of external name to entry."""

    def __init__(self, entries: Iterable[PropertyMappingEntry]):
        table: dict[str, PropertyMappingEntry] = {}
        for entry in entries:
            key = entry.external_name.lower()
            if key in table:
                raise ValueError(f"Duplicate mapping for external field '{entry.external_name}'")
            table[key] = entry
        self._entries = MappingProxyType(table)

    def __getitem__(self, name: str) -> PropertyMappingEntry:
        return self._entries[name.lower()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._entries

    def __iter__(self):
        return (entry.external_name for entry in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


class MappingNotFoundError(LookupError):
    """Raised when no table is registered for an exact type pair."""


def parse_sort_clause(clause: str) -> tuple[str, bool] | None:
    """Split one trimmed ``orderBy`` clause into (field, descending).

    The direction suffix is matched case-insensitively. Returns None for
    clauses that are empty or carry anything other than ``asc``/``desc``
    after the field name.
    """
    parts = _WHITESPACE.split(clause.strip())
    if not parts or not parts[0]:
        return None
    if len(parts) == 1:
        return parts[0], False
    if len(parts) == 2 and parts[1].lower() in _DIRECTIONS:
        return parts[0], parts[1].lower() == "desc"
    return None


# Module-level storage, populated during startup only
_mapping_tables: dict[tuple[type, type], MappingTable] = {}


class PropertyMappingRegistry:
    """Registry of property mapping tables keyed by (external, internal) type."""

    @classmethod
    def register(
        cls,
        external_type: type,
        internal_type: type,
        entries: Iterable[PropertyMappingEntry],
    ) -> MappingTable:
        """Register the mapping table for a type pair.

        Raises:
            ValueError: If the pair already has a table or entries collide.
        """
        key = (external_type, internal_type)
        if key in _mapping_tables:
            raise ValueError(
                f"Property mapping for <{external_type.__name__}, {internal_type.__name__}> "
                "is already registered"
            )
        table = MappingTable(entries)
        _mapping_tables[key] = table
        logger.info(
            "Registered property mapping <%s, %s> with %d fields",
            external_type.__name__,
            internal_type.__name__,
            len(table),
        )
        return table

    @classmethod
    def has_mapping(cls, external_type: type, internal_type: type) -> bool:
        return (external_type, internal_type) in _mapping_tables

    @classmethod
    def lookup(cls, external_type: type, internal_type: type) -> MappingTable:
        """Return the table registered for exactly this type pair.

        Raises:
            MappingNotFoundError: If nothing was registered for the pair.
        """
        try:
            return _mapping_tables[(external_type, internal_type)]
        except KeyError:
            raise MappingNotFoundError(
                f"Cannot find exact property mapping instance for "
                f"<{external_type.__name__}, {internal_type.__name__}>"
            ) from None

    @classmethod
    def is_valid_field_list(
        cls, external_type: type, internal_type: type, fields: str | None
    ) -> bool:
        """Check a comma-separated sort list against the registered table.

        Empty or absent lists are always valid. Each clause may end in
        ``asc`` or ``desc``; the field part must be a registered name.
        """
        table = cls.lookup(external_type, internal_type)
        if fields is None or not fields.strip():
            return True
        for clause in fields.split(","):
            parsed = parse_sort_clause(clause)
            if parsed is None or parsed[0] not in table:
                return False
        return True

    @classmethod
    def _clear_for_testing(cls) -> None:
        """Clear all registered tables. Internal use in tests only."""
        _mapping_tables.clear()
