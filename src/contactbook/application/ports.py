"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactbook.domain import Contact


class KeyValueSlot(Protocol):
    """Durable named slots holding serialized bytes."""

    def read(self, key: str) -> bytes | None:
        """Return the bytes stored under key, or None when absent."""
        ...

    def write(self, key: str, data: bytes) -> None:
        """Overwrite the slot wholesale. Best-effort."""
        ...


class ContactPersistence(Protocol):
    """Loads and saves the whole ordered contact collection."""

    def load(self) -> list[Contact]:
        """Return the persisted contacts in insertion order, or [] if none are readable."""
        ...

    def save(self, contacts: list[Contact]) -> None:
        """Replace the persisted collection with contacts."""
        ...
