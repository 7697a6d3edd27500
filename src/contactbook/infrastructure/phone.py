"""Phone country-code handling for the contact edit form."""

import phonenumbers

DEFAULT_COUNTRY_CODE = "+91"


def split_phone(
    raw: str, default_country_code: str = DEFAULT_COUNTRY_CODE
) -> tuple[str, str]:
    """Split a stored phone into (country calling code, rest of the number).

    The calling code is recognised with phonenumbers when the number starts
    with "+"; the rest keeps the caller's original formatting. Numbers
    without a recognisable code get default_country_code and are returned
    unchanged.
    """
    phone = (raw or "").strip()
    if not phone.startswith("+"):
        return default_country_code, phone
    try:
        parsed = phonenumbers.parse(phone, None)
    except phonenumbers.NumberParseException:
        return default_country_code, phone
    code = f"+{parsed.country_code}"
    if not phone.startswith(code):
        return default_country_code, phone
    return code, phone[len(code):].strip()


def join_phone(country_code: str | None, number: str) -> str:
    """Combine the form's country code and number the way they are stored."""
    return f"{(country_code or '').strip()} {(number or '').strip()}".strip()
