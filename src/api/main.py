"""
FastAPI backend: REST API over the contact store and display preferences.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from fastapi import FastAPI, HTTPException, Request, Response
from pydantic import BaseModel, field_validator

from contactbook.application import (
    ContactCreated,
    ContactNotFound,
    ContactStore,
    DuplicateFieldError,
    PreferencesStore,
    query_contacts,
)
from contactbook.domain import Contact, ContactDraft
from contactbook.infrastructure import (
    DEMO_CONTACTS,
    FileSlot,
    SlotContactPersistence,
    avatar_for,
    join_phone,
    split_phone,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = ".contactbook"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes")


def _get_slot() -> FileSlot:
    data_dir = os.environ.get("CONTACTBOOK_DATA_DIR", "").strip() or DEFAULT_DATA_DIR
    return FileSlot(Path(data_dir))


def _build_store() -> ContactStore:
    store = ContactStore(SlotContactPersistence(_get_slot()), avatar_for=avatar_for)
    contacts = store.load()
    logger.info("Loaded %d contacts", len(contacts))
    if not contacts and _env_flag("CONTACTBOOK_SEED_DEMO"):
        seeded = store.seed(DEMO_CONTACTS)
        logger.info("Seeded %d demo contacts", len(seeded))
    return store


def get_store(app: FastAPI) -> ContactStore:
    if getattr(app.state, "store", None) is None:
        app.state.store = _build_store()
    return app.state.store


def get_preferences(app: FastAPI) -> PreferencesStore:
    if getattr(app.state, "preferences", None) is None:
        app.state.preferences = PreferencesStore(
            _get_slot(), prefers_dark=_env_flag("CONTACTBOOK_PREFERS_DARK")
        )
    return app.state.preferences


app = FastAPI(title="Contactbook API")


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: contacts ---


class ContactBody(BaseModel):
    name: str
    email: str
    phone: str
    country_code: str | None = None
    favorite: bool | None = None

    @field_validator("name")
    @classmethod
    def _name_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name is required.")
        return v

    @field_validator("email")
    @classmethod
    def _email_shape(cls, v: str) -> str:
        local, _, domain = v.strip().partition("@")
        if not local or "." not in domain:
            raise ValueError("Email must look like name@example.com.")
        return v

    def to_draft(self) -> ContactDraft:
        phone = join_phone(self.country_code, self.phone) if self.country_code else self.phone
        return ContactDraft(
            name=self.name, email=self.email, phone=phone, favorite=self.favorite
        )


class ContactItem(BaseModel):
    id: str
    name: str
    email: str
    phone: str
    avatar: str
    favorite: bool


class ContactDetail(ContactItem):
    country_code: str
    phone_number: str


class ThemeBody(BaseModel):
    theme: str


def _item(contact: Contact) -> ContactItem:
    return ContactItem(
        id=contact.id,
        name=contact.name,
        email=contact.email,
        phone=contact.phone,
        avatar=contact.avatar,
        favorite=contact.favorite,
    )


def _duplicate(result: DuplicateFieldError) -> HTTPException:
    return HTTPException(
        status_code=409,
        detail={"message": result.message, "fields": list(result.fields)},
    )


def _not_found(contact_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Contact {contact_id} not found")


@app.get("/contacts")
def list_contacts(
    request: Request,
    q: str = "",
    search_field: str = "name",
    favorites_only: bool = False,
    sort: str = "asc",
):
    store = get_store(request.app)
    contacts = query_contacts(
        store.list_all(),
        search_text=q,
        search_field=search_field,
        favorites_only=favorites_only,
        sort_order=sort,
    )
    return [_item(c) for c in contacts]


@app.get("/contacts/{contact_id}")
def get_contact(contact_id: str, request: Request):
    contact = get_store(request.app).get(contact_id)
    if contact is None:
        raise _not_found(contact_id)
    country_code, phone_number = split_phone(contact.phone)
    return ContactDetail(
        **_item(contact).model_dump(),
        country_code=country_code,
        phone_number=phone_number,
    )


@app.post("/contacts", status_code=201)
def create_contact(body: ContactBody, request: Request):
    result = get_store(request.app).create(body.to_draft())
    if isinstance(result, DuplicateFieldError):
        raise _duplicate(result)
    if not isinstance(result, ContactCreated):
        raise HTTPException(status_code=400, detail="Failed to create contact")
    logger.info("Created contact %s", result.contact.id)
    return _item(result.contact)


@app.put("/contacts/{contact_id}")
def update_contact(contact_id: str, body: ContactBody, request: Request):
    result = get_store(request.app).update(contact_id, body.to_draft())
    if isinstance(result, DuplicateFieldError):
        raise _duplicate(result)
    if isinstance(result, ContactNotFound):
        raise _not_found(contact_id)
    return _item(result.contact)


@app.post("/contacts/{contact_id}/favorite")
def toggle_favorite(contact_id: str, request: Request):
    contact = get_store(request.app).toggle_favorite(contact_id)
    if contact is None:
        raise _not_found(contact_id)
    return _item(contact)


@app.delete("/contacts/{contact_id}", status_code=204)
def delete_contact(contact_id: str, request: Request):
    if get_store(request.app).delete(contact_id):
        logger.info("Deleted contact %s", contact_id)
    return Response(status_code=204)


# --- REST: preferences ---


@app.get("/preferences/theme")
def get_theme(request: Request):
    return {"theme": get_preferences(request.app).theme}


@app.put("/preferences/theme")
def set_theme(body: ThemeBody, request: Request):
    try:
        theme = get_preferences(request.app).set_theme(body.theme)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {"theme": theme}


@app.post("/preferences/theme/toggle")
def toggle_theme(request: Request):
    return {"theme": get_preferences(request.app).toggle_theme()}
