"""Read-only projection of the contact collection for display."""

from collections.abc import Iterable
from functools import lru_cache

from pyuca import Collator

from contactbook.domain import SEARCH_FIELDS, SORT_DESCENDING, Contact
from contactbook.domain.normalize import search_key


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loads the Unicode collation table once per process.
    return Collator()


def _sort_key(contact: Contact) -> tuple[int, ...]:
    return _collator().sort_key(contact.name.strip().casefold())


def query_contacts(
    contacts: Iterable[Contact],
    *,
    search_text: str = "",
    search_field: str = "name",
    favorites_only: bool = False,
    sort_order: str = "asc",
) -> list[Contact]:
    """
    Filter by favorite, then by search text, then sort by name.

    Search is a case- and whitespace-insensitive substring match on
    search_field (phone also ignores - ( ) +); empty text matches all.
    Sorting is stable, so contacts with equal names keep insertion order
    in either direction. Unknown fields and orders fall back to name and
    ascending. Never mutates the input.
    """
    field = search_field if search_field in SEARCH_FIELDS else "name"
    needle = search_key(search_text, field)

    out = []
    for contact in contacts:
        if favorites_only and not contact.favorite:
            continue
        if needle and needle not in search_key(getattr(contact, field), field):
            continue
        out.append(contact)

    return sorted(out, key=_sort_key, reverse=sort_order == SORT_DESCENDING)
