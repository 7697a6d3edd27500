"""Avatar URLs derived from a contact's name."""

from urllib.parse import quote

AVATAR_BASE_URL = "https://ui-avatars.com/api/"

# Characters encodeURIComponent leaves as-is, beyond quote()'s defaults.
_SAFE = "!~*()'"


def avatar_for(name: str) -> str:
    """Return the generated-initials avatar URL for name. Pure and deterministic."""
    return f"{AVATAR_BASE_URL}?name={quote(name, safe=_SAFE)}"
