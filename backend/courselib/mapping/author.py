"""Property mappings for the author resource."""

from courselib.mapping.registry import PropertyMappingEntry, PropertyMappingRegistry
from courselib.models import Author
from courselib.schemas import AuthorDto

AUTHOR_PROPERTY_MAPPINGS = (
    PropertyMappingEntry("Id", ("id",)),
    PropertyMappingEntry("MainCategory", ("main_category",)),
    PropertyMappingEntry("Age", ("date_of_birth",), reverse_direction=True),
    PropertyMappingEntry("Name", ("first_name", "last_name")),
)


def register_property_mappings() -> None:
    """Register every property mapping table. Safe to call more than once."""
    if not PropertyMappingRegistry.has_mapping(AuthorDto, Author):
        PropertyMappingRegistry.register(AuthorDto, Author, AUTHOR_PROPERTY_MAPPINGS)
