"""Result types for contact store operations."""

from dataclasses import dataclass

from contactbook.domain import Contact


@dataclass(frozen=True)
class ContactCreated:
    """Contact was created, appended and persisted."""

    contact: Contact


@dataclass(frozen=True)
class ContactUpdated:
    """Contact fields were replaced and persisted. id and favorite are unchanged."""

    contact: Contact


@dataclass(frozen=True)
class DuplicateFieldError:
    """
    Draft collides with a live contact on one or more unique fields.
    fields is a non-empty subset of (name, email, phone), in that order.
    Nothing was changed or persisted.
    """

    fields: tuple[str, ...]

    @property
    def message(self) -> str:
        return (
            "The following fields must be unique and already exist: "
            + ", ".join(self.fields)
        )


@dataclass(frozen=True)
class ContactNotFound:
    """No live contact has the given id. Nothing was changed."""

    contact_id: str
