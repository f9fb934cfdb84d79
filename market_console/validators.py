"""Shape checks for contact details entered in buyer/seller forms."""

import re

EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

# Optional +country group, optional parentheses around the area code,
# "-" or space separators.
PHONE_RE = re.compile(r"(\+\d{1,3}[- ]?)?\(?\d{3}\)?[- ]?\d{3}[- ]?\d{4}")

_NON_DIGITS = re.compile(r"\D")


def is_valid_email(email: str) -> bool:
    """Empty is valid (the field is optional)."""
    return email == "" or EMAIL_RE.fullmatch(email) is not None


def is_valid_phone(phone: str) -> bool:
    """Exactly 10 digits once non-digits are stripped, in a display format."""
    if len(_NON_DIGITS.sub("", phone)) != 10:
        return False
    return PHONE_RE.fullmatch(phone) is not None
