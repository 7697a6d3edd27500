"""Comparison keys for uniqueness checks and search. Stored values are never altered."""

import re

_PHONE_PUNCTUATION = re.compile(r"[\s\-()+]")
_WHITESPACE = re.compile(r"\s+")


def name_key(name: str) -> str:
    return (name or "").strip().lower()


def email_key(email: str) -> str:
    return (email or "").strip().lower()


def phone_key(phone: str) -> str:
    """Phone with spaces, hyphens, parentheses and plus signs removed."""
    return _PHONE_PUNCTUATION.sub("", phone or "")


def search_key(value: str, field: str) -> str:
    """Whitespace-free, lower-cased form used on both sides of a search match."""
    if field == "phone":
        return phone_key(value).lower()
    return _WHITESPACE.sub("", value or "").lower()
