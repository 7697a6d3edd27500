"""
Contactbook core: clean-architecture layout.

- domain: entities (Contact, ContactDraft) and comparison keys. No outer dependencies.
- application: ContactStore, query_contacts, PreferencesStore, ports, result types.
- infrastructure: adapters (slots, JSON persistence, avatar, phone handling).
"""

from contactbook.application import (
    ContactCreated,
    ContactNotFound,
    ContactPersistence,
    ContactStore,
    ContactUpdated,
    DuplicateFieldError,
    KeyValueSlot,
    PreferencesStore,
    query_contacts,
)
from contactbook.domain import Contact, ContactDraft
from contactbook.infrastructure import (
    FileSlot,
    InMemorySlot,
    SlotContactPersistence,
    avatar_for,
)

__all__ = [
    "Contact",
    "ContactCreated",
    "ContactDraft",
    "ContactNotFound",
    "ContactPersistence",
    "ContactStore",
    "ContactUpdated",
    "DuplicateFieldError",
    "FileSlot",
    "InMemorySlot",
    "KeyValueSlot",
    "PreferencesStore",
    "SlotContactPersistence",
    "avatar_for",
    "query_contacts",
]
