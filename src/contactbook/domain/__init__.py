"""Domain layer: entities and value objects. No dependencies on outer layers."""

from contactbook.domain.entities import (
    SEARCH_FIELDS,
    SORT_ASCENDING,
    SORT_DESCENDING,
    THEMES,
    Contact,
    ContactDraft,
)

__all__ = [
    "SEARCH_FIELDS",
    "SORT_ASCENDING",
    "SORT_DESCENDING",
    "THEMES",
    "Contact",
    "ContactDraft",
]
