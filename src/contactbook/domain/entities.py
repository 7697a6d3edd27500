"""Domain entities: Contact and ContactDraft."""

from dataclasses import dataclass

# Attributes a search can be scoped to.
SEARCH_FIELDS = ("name", "email", "phone")

SORT_ASCENDING = "asc"
SORT_DESCENDING = "desc"

THEMES = ("light", "dark")


@dataclass(frozen=True)
class Contact:
    """
    A person in the address book.
    Only ContactStore creates contacts; id and avatar are never caller-supplied.
    """

    id: str
    name: str
    email: str
    phone: str
    avatar: str
    favorite: bool = False


@dataclass(frozen=True)
class ContactDraft:
    """Caller input for create and update. favorite is honored by create only."""

    name: str
    email: str
    phone: str
    favorite: bool | None = None
