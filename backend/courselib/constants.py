"""Shared constants for paging and route naming."""

from courselib.config import settings

DEFAULT_PAGE_SIZE = settings.default_page_size
MAX_PAGE_SIZE = settings.max_page_size
DEFAULT_ORDER_BY = "Name"

# Response header carrying pagination metadata for collection reads
PAGINATION_HEADER = "X-Pagination"
