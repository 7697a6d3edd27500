"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.avatar import avatar_for
from contactbook.infrastructure.persistence import CONTACTS_KEY, SlotContactPersistence
from contactbook.infrastructure.phone import join_phone, split_phone
from contactbook.infrastructure.seed import DEMO_CONTACTS
from contactbook.infrastructure.slots import FileSlot, InMemorySlot

__all__ = [
    "CONTACTS_KEY",
    "DEMO_CONTACTS",
    "FileSlot",
    "InMemorySlot",
    "SlotContactPersistence",
    "avatar_for",
    "join_phone",
    "split_phone",
]
