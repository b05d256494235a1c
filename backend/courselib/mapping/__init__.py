"""Property mapping between external field names and internal columns.

The registry decides which external names are sortable and which
internal columns each one expands to; the sort compiler turns an
``orderBy`` string into an ordered list of internal sort keys.
"""

from courselib.mapping.registry import (
    MappingNotFoundError,
    MappingTable,
    PropertyMappingEntry,
    PropertyMappingRegistry,
)
from courselib.mapping.sorting import (
    EmptySortSpecificationError,
    SortField,
    UnknownSortFieldError,
    apply_sort,
    compile_sort,
)

__all__ = [
    "EmptySortSpecificationError",
    "MappingNotFoundError",
    "MappingTable",
    "PropertyMappingEntry",
    "PropertyMappingRegistry",
    "SortField",
    "UnknownSortFieldError",
    "apply_sort",
    "compile_sort",
]
