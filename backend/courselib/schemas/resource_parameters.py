"""Query parameters for the author collection."""

from pydantic import BaseModel, Field, field_validator

from courselib.constants import DEFAULT_ORDER_BY, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from courselib.schemas.base import API_MODEL_CONFIG


class AuthorsResourceParameters(BaseModel):
    """Filtering, paging, sorting and shaping options for listing authors.

    ``page_size`` above the maximum is silently reduced to the maximum;
    smaller values are kept as given.
    """

    model_config = API_MODEL_CONFIG

    main_category: str | None = None
    search_query: str | None = None
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    order_by: str = DEFAULT_ORDER_BY
    fields: str | None = None

    @field_validator("page_size")
    @classmethod
    def clamp_page_size(cls, value: int) -> int:
        return min(value, MAX_PAGE_SIZE)

    def for_page(self, page_number: int) -> "AuthorsResourceParameters":
        """Copy of these parameters pointing at another page."""
        return self.model_copy(update={"page_number": page_number})

    def to_query_params(self) -> dict[str, str | int]:
        """Wire-named query parameters, omitting unset optional ones."""
        return self.model_dump(by_alias=True, exclude_none=True)
