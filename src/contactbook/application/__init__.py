"""Application layer: store, query, ports, and result types. Depends only on domain."""

from contactbook.application.contact_query import query_contacts
from contactbook.application.contact_store import ContactStore
from contactbook.application.dto import (
    ContactCreated,
    ContactNotFound,
    ContactUpdated,
    DuplicateFieldError,
)
from contactbook.application.ports import ContactPersistence, KeyValueSlot
from contactbook.application.preferences import PreferencesStore

__all__ = [
    "ContactCreated",
    "ContactNotFound",
    "ContactPersistence",
    "ContactStore",
    "ContactUpdated",
    "DuplicateFieldError",
    "KeyValueSlot",
    "PreferencesStore",
    "query_contacts",
]
