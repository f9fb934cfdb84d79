"""Form rules for the add/edit screens.

Buyer and seller forms validate name, email and phone; field forms have no
validation. While typing, only the edited field is re-validated; on submit
the whole form is.
"""

from typing import Any, Callable, Mapping

from .entities import contact_fields
from .exceptions import FormValidationError
from .validators import is_valid_email, is_valid_phone

NAME_REQUIRED = "Name is required"
EMAIL_INVALID = "Please enter a valid email address"
PHONE_REQUIRED = "Phone number is required"
PHONE_INVALID = "Please enter a valid 10-digit phone number"

CONTACT_FIELDS = ("name", "email", "phone", "status", "about")
FIELD_FORM_FIELDS = ("title", "description", "category", "type")


def validate_name(value: str) -> str:
    return NAME_REQUIRED if not value.strip() else ""


def validate_email(value: str) -> str:
    return EMAIL_INVALID if value and not is_valid_email(value) else ""


def validate_phone(value: str) -> str:
    if not value:
        return PHONE_REQUIRED
    if not is_valid_phone(value):
        return PHONE_INVALID
    return ""


VALIDATORS: dict[str, Callable[[str], str]] = {
    "name": validate_name,
    "email": validate_email,
    "phone": validate_phone,
}


def empty_errors() -> dict[str, str]:
    return {f: "" for f in VALIDATORS}


def validate_field(field: str, value: str) -> str:
    """Error for a single field; fields without a rule never fail."""
    validator = VALIDATORS.get(field)
    return validator(value) if validator else ""


def validate_contact(values: Mapping[str, str]) -> dict[str, str]:
    return {f: validate_field(f, values.get(f, "") or "") for f in VALIDATORS}


def has_errors(errors: Mapping[str, str]) -> bool:
    return any(errors.values())


def can_submit(errors: Mapping[str, str], values: Mapping[str, str]) -> bool:
    """Submit is enabled only with no errors and both required fields filled."""
    if has_errors(errors):
        return False
    return bool((values.get("name") or "").strip()) and bool((values.get("phone") or "").strip())


def check_contact(values: Mapping[str, str]) -> None:
    errors = validate_contact(values)
    if has_errors(errors):
        raise FormValidationError(errors)


# =========================================================================
# RECORD <-> FORM
# =========================================================================

def contact_payload(prefix: str, values: Mapping[str, str]) -> dict[str, str]:
    keys = contact_fields(prefix)
    return {keys[f]: values.get(f, "") or "" for f in CONTACT_FIELDS}


def contact_values(prefix: str, record: Mapping[str, Any]) -> dict[str, str]:
    keys = contact_fields(prefix)
    return {f: str(record.get(keys[f]) or "") for f in CONTACT_FIELDS}


def field_payload(values: Mapping[str, str]) -> dict[str, str]:
    return {f: values.get(f, "") or "" for f in FIELD_FORM_FIELDS}


def field_values(record: Mapping[str, Any]) -> dict[str, str]:
    return {f: str(record.get(f) or "") for f in FIELD_FORM_FIELDS}
