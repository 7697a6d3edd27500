"""Demo contacts used to populate an empty address book."""

from contactbook.domain import ContactDraft

DEMO_CONTACTS = (
    ContactDraft(name="John Doe", email="john@example.com", phone="+1 234 567 8900"),
    ContactDraft(name="Jane Smith", email="jane@example.com", phone="+1 234 567 8901"),
)
