"""ContactPersistence over a key-value slot, serialized as a JSON list."""

import logging

from pydantic import TypeAdapter, ValidationError

from contactbook.application.ports import KeyValueSlot
from contactbook.domain import Contact

logger = logging.getLogger(__name__)

CONTACTS_KEY = "contacts"

_contacts_adapter = TypeAdapter(list[Contact])


class SlotContactPersistence:
    """Saves the whole collection under one slot key; loading fails closed to []."""

    def __init__(self, slot: KeyValueSlot, key: str = CONTACTS_KEY) -> None:
        self._slot = slot
        self._key = key

    def load(self) -> list[Contact]:
        try:
            raw = self._slot.read(self._key)
        except OSError as e:
            logger.warning("Could not read slot %s, starting empty: %s", self._key, e)
            return []
        if raw is None:
            return []
        try:
            contacts = _contacts_adapter.validate_json(raw, strict=True)
        except ValidationError as e:
            logger.warning(
                "Malformed data in slot %s, starting empty (%d errors)",
                self._key,
                e.error_count(),
            )
            return []
        if any(not c.name.strip() for c in contacts):
            logger.warning("Contact without a name in slot %s, starting empty", self._key)
            return []
        return contacts

    def save(self, contacts: list[Contact]) -> None:
        self._slot.write(self._key, _contacts_adapter.dump_json(contacts))
