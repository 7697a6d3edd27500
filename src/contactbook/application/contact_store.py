"""Contact create, update, favorite, delete. Single source of truth, write-through persistence."""

import uuid
from collections.abc import Callable, Iterable
from dataclasses import replace

from contactbook.application.dto import (
    ContactCreated,
    ContactNotFound,
    ContactUpdated,
    DuplicateFieldError,
)
from contactbook.application.ports import ContactPersistence
from contactbook.domain import Contact, ContactDraft
from contactbook.domain.normalize import email_key, name_key, phone_key


def _new_contact_id() -> str:
    return str(uuid.uuid4())


class ContactStore:
    """Owns the ordered contact collection. Order preserved by insertion.

    Every mutation ends by saving the full collection through the injected
    persistence, so memory and storage agree after each call returns.
    """

    def __init__(
        self,
        persistence: ContactPersistence,
        *,
        avatar_for: Callable[[str], str],
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._persistence = persistence
        self._avatar_for = avatar_for
        self._id_factory = id_factory or _new_contact_id
        self._by_id: dict[str, Contact] = {}
        self._order: list[str] = []

    def load(self) -> list[Contact]:
        """Replace the in-memory collection with the persisted one and return it."""
        self._by_id = {}
        self._order = []
        for contact in self._persistence.load():
            if contact.id in self._by_id:
                continue
            self._by_id[contact.id] = contact
            self._order.append(contact.id)
        return self.list_all()

    def list_all(self) -> list[Contact]:
        return [self._by_id[cid] for cid in self._order]

    def get(self, contact_id: str) -> Contact | None:
        return self._by_id.get(contact_id)

    def create(self, draft: ContactDraft) -> ContactCreated | DuplicateFieldError:
        """Append a new contact, or report every unique field it collides on."""
        duplicate = self._find_duplicates(draft)
        if duplicate is not None:
            return duplicate

        name = draft.name.strip()
        contact = Contact(
            id=self._id_factory(),
            name=name,
            email=draft.email.strip(),
            phone=draft.phone.strip(),
            avatar=self._avatar_for(name),
            favorite=bool(draft.favorite),
        )
        self._by_id[contact.id] = contact
        self._order.append(contact.id)
        self._save()
        return ContactCreated(contact=contact)

    def update(
        self, contact_id: str, draft: ContactDraft
    ) -> ContactUpdated | DuplicateFieldError | ContactNotFound:
        """Replace name, email and phone. The contact's own values never count as duplicates."""
        existing = self._by_id.get(contact_id)
        if existing is None:
            return ContactNotFound(contact_id=contact_id)

        duplicate = self._find_duplicates(draft, exclude_id=contact_id)
        if duplicate is not None:
            return duplicate

        name = draft.name.strip()
        contact = replace(
            existing,
            name=name,
            email=draft.email.strip(),
            phone=draft.phone.strip(),
            avatar=self._avatar_for(name),
        )
        self._by_id[contact_id] = contact
        self._save()
        return ContactUpdated(contact=contact)

    def toggle_favorite(self, contact_id: str) -> Contact | None:
        """Flip favorite. Unknown ids are ignored. Returns the new record, or None."""
        existing = self._by_id.get(contact_id)
        toggled = None
        if existing is not None:
            toggled = replace(existing, favorite=not existing.favorite)
            self._by_id[contact_id] = toggled
        self._save()
        return toggled

    def delete(self, contact_id: str) -> bool:
        """Remove the contact permanently. Returns False if it was not present."""
        removed = self._by_id.pop(contact_id, None) is not None
        if removed:
            self._order.remove(contact_id)
        self._save()
        return removed

    def seed(self, drafts: Iterable[ContactDraft]) -> list[Contact]:
        """Create each draft in order, skipping duplicates. Returns the created contacts."""
        created = []
        for draft in drafts:
            result = self.create(draft)
            if isinstance(result, ContactCreated):
                created.append(result.contact)
        return created

    def _find_duplicates(
        self, draft: ContactDraft, *, exclude_id: str | None = None
    ) -> DuplicateFieldError | None:
        draft_name = name_key(draft.name)
        draft_email = email_key(draft.email)
        draft_phone = phone_key(draft.phone)
        colliding: set[str] = set()
        for contact in self._by_id.values():
            if contact.id == exclude_id:
                continue
            if name_key(contact.name) == draft_name:
                colliding.add("name")
            if email_key(contact.email) == draft_email:
                colliding.add("email")
            if phone_key(contact.phone) == draft_phone:
                colliding.add("phone")
        if not colliding:
            return None
        return DuplicateFieldError(
            fields=tuple(f for f in ("name", "email", "phone") if f in colliding)
        )

    def _save(self) -> None:
        self._persistence.save(self.list_all())
