"""Unit tests for ContactStore. In-memory slot; no filesystem."""

import itertools

from contactbook.application import (
    ContactCreated,
    ContactNotFound,
    ContactStore,
    ContactUpdated,
    DuplicateFieldError,
)
from contactbook.domain import ContactDraft
from contactbook.infrastructure import (
    InMemorySlot,
    SlotContactPersistence,
    avatar_for,
)


class RecordingPersistence:
    """Counts saves so tests can assert on write-through behaviour."""

    def __init__(self) -> None:
        self.saved: list[list] = []

    def load(self):
        return []

    def save(self, contacts) -> None:
        self.saved.append(list(contacts))


def _store(persistence=None) -> ContactStore:
    counter = itertools.count(1)
    return ContactStore(
        persistence or SlotContactPersistence(InMemorySlot()),
        avatar_for=avatar_for,
        id_factory=lambda: f"c{next(counter)}",
    )


def _john() -> ContactDraft:
    return ContactDraft(name="John Doe", email="john@x.com", phone="+1 234 567 8900")


def _jane() -> ContactDraft:
    return ContactDraft(name="Jane Smith", email="jane@x.com", phone="+1 234 567 8901")


def test_create_assigns_id_avatar_and_appends() -> None:
    store = _store()
    r1 = store.create(_john())
    assert isinstance(r1, ContactCreated)
    assert r1.contact.id == "c1"
    assert r1.contact.avatar == avatar_for("John Doe")
    assert r1.contact.favorite is False

    r2 = store.create(_jane())
    assert isinstance(r2, ContactCreated)
    assert r2.contact.id != r1.contact.id
    assert [c.name for c in store.list_all()] == ["John Doe", "Jane Smith"]


def test_create_trims_but_keeps_casing() -> None:
    store = _store()
    result = store.create(
        ContactDraft(name="  John Doe ", email=" John@X.com ", phone=" +1 234 ")
    )
    assert isinstance(result, ContactCreated)
    assert result.contact.name == "John Doe"
    assert result.contact.email == "John@X.com"
    assert result.contact.phone == "+1 234"


def test_create_honors_favorite_flag() -> None:
    store = _store()
    draft = ContactDraft(name="Ann", email="ann@x.com", phone="1", favorite=True)
    result = store.create(draft)
    assert isinstance(result, ContactCreated)
    assert result.contact.favorite is True


def test_create_duplicate_name_case_insensitive() -> None:
    store = _store()
    store.create(_john())
    store.create(_jane())
    before = store.list_all()

    result = store.create(
        ContactDraft(name="john doe", email="new@x.com", phone="+1 999")
    )
    assert isinstance(result, DuplicateFieldError)
    assert result.fields == ("name",)
    assert store.list_all() == before


def test_create_duplicate_reports_every_field() -> None:
    store = _store()
    store.create(_john())
    result = store.create(
        ContactDraft(name=" JOHN DOE ", email="JOHN@x.com ", phone="+1 (234) 567-8900")
    )
    assert isinstance(result, DuplicateFieldError)
    assert result.fields == ("name", "email", "phone")
    assert "name, email, phone" in result.message


def test_create_duplicate_fields_may_come_from_different_contacts() -> None:
    store = _store()
    store.create(_john())
    store.create(_jane())
    result = store.create(
        ContactDraft(name="Other", email="jane@x.com", phone="12345678900")
    )
    assert isinstance(result, DuplicateFieldError)
    assert result.fields == ("email", "phone")


def test_failed_create_does_not_persist() -> None:
    persistence = RecordingPersistence()
    store = _store(persistence)
    store.create(_john())
    assert len(persistence.saved) == 1

    store.create(_john())
    assert len(persistence.saved) == 1


def test_update_replaces_fields_and_rederives_avatar() -> None:
    store = _store()
    created = store.create(_john())
    store.toggle_favorite(created.contact.id)

    result = store.update(
        created.contact.id,
        ContactDraft(name="Johnny Doe", email="johnny@x.com", phone="+1 555"),
    )
    assert isinstance(result, ContactUpdated)
    assert result.contact.id == created.contact.id
    assert result.contact.name == "Johnny Doe"
    assert result.contact.avatar == avatar_for("Johnny Doe")
    assert result.contact.favorite is True
    assert store.get(created.contact.id) == result.contact


def test_update_ignores_favorite_in_draft() -> None:
    store = _store()
    created = store.create(_john())
    draft = ContactDraft(name="John Doe", email="john@x.com", phone="1", favorite=True)
    result = store.update(created.contact.id, draft)
    assert isinstance(result, ContactUpdated)
    assert result.contact.favorite is False


def test_update_with_own_values_is_not_a_duplicate() -> None:
    store = _store()
    created = store.create(_john())
    result = store.update(created.contact.id, _john())
    assert isinstance(result, ContactUpdated)


def test_update_colliding_with_other_contact_fails_unchanged() -> None:
    persistence = RecordingPersistence()
    store = _store(persistence)
    john = store.create(_john()).contact
    store.create(_jane())
    saves = len(persistence.saved)

    result = store.update(
        john.id, ContactDraft(name="Jane Smith", email="john@x.com", phone="+1 234 567 8900")
    )
    assert isinstance(result, DuplicateFieldError)
    assert result.fields == ("name",)
    assert store.get(john.id) == john
    assert len(persistence.saved) == saves


def test_update_keeps_position() -> None:
    store = _store()
    john = store.create(_john()).contact
    store.create(_jane())
    store.update(john.id, ContactDraft(name="Zed", email="zed@x.com", phone="9"))
    assert [c.name for c in store.list_all()] == ["Zed", "Jane Smith"]


def test_update_unknown_id_is_not_found() -> None:
    persistence = RecordingPersistence()
    store = _store(persistence)
    result = store.update("missing", _john())
    assert isinstance(result, ContactNotFound)
    assert result.contact_id == "missing"
    assert store.list_all() == []
    assert persistence.saved == []


def test_toggle_favorite_twice_restores_value() -> None:
    store = _store()
    john = store.create(_john()).contact
    assert store.toggle_favorite(john.id).favorite is True
    assert store.toggle_favorite(john.id).favorite is False
    assert store.get(john.id) == john


def test_toggle_favorite_unknown_id_is_noop() -> None:
    store = _store()
    store.create(_john())
    before = store.list_all()
    assert store.toggle_favorite("missing") is None
    assert store.list_all() == before


def test_delete_is_idempotent() -> None:
    store = _store()
    john = store.create(_john()).contact
    store.create(_jane())

    assert store.delete(john.id) is True
    after_first = store.list_all()
    assert [c.name for c in after_first] == ["Jane Smith"]

    assert store.delete(john.id) is False
    assert store.list_all() == after_first


def test_deleted_contact_no_longer_blocks_duplicates() -> None:
    store = _store()
    john = store.create(_john()).contact
    store.delete(john.id)
    assert isinstance(store.create(_john()), ContactCreated)


def test_every_mutation_writes_through() -> None:
    persistence = RecordingPersistence()
    store = _store(persistence)
    john = store.create(_john()).contact
    store.update(john.id, _jane())
    store.toggle_favorite(john.id)
    store.delete(john.id)
    assert len(persistence.saved) == 4
    assert persistence.saved[-1] == []


def test_reload_matches_memory_after_mutations() -> None:
    slot = InMemorySlot()
    store = _store(SlotContactPersistence(slot))
    john = store.create(_john()).contact
    jane = store.create(_jane()).contact
    store.toggle_favorite(jane.id)
    store.update(john.id, ContactDraft(name="Jon", email="jon@x.com", phone="42"))
    store.create(ContactDraft(name="Ann", email="ann@x.com", phone="7"))
    store.delete(john.id)
    expected = store.list_all()

    reloaded = _store(SlotContactPersistence(slot))
    assert reloaded.load() == expected
    assert reloaded.list_all() == expected


def test_load_malformed_data_starts_empty() -> None:
    slot = InMemorySlot({"contacts": b"{not json"})
    store = _store(SlotContactPersistence(slot))
    assert store.load() == []
    assert isinstance(store.create(_john()), ContactCreated)


def test_seed_skips_duplicates() -> None:
    store = _store()
    created = store.seed([_john(), _jane(), _john()])
    assert [c.name for c in created] == ["John Doe", "Jane Smith"]
    assert len(store.list_all()) == 2
