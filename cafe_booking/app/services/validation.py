import re
from dataclasses import dataclass

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"[0-9-]+")

INVALID_EMAIL = "Please enter a valid email format."
INVALID_PHONE = "Please enter a valid phone format (digits and - only)."
MISSING_DATE = "Please select a reservation date."
MISSING_TIME = "Please select a reservation time."
MISSING_PEOPLE = "Please select a party size."


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    message: str | None = None


VALID = ValidationResult(ok=True)


def validate_form(data) -> ValidationResult:
    """Check a candidate reservation, stopping at the first failing rule.

    ``data`` is anything exposing ``email``, ``phone``, ``date``, ``time`` and
    ``people`` attributes (normally a ``ReservationRequest``).
    """
    if not EMAIL_PATTERN.fullmatch(data.email or ""):
        return ValidationResult(ok=False, message=INVALID_EMAIL)

    if not PHONE_PATTERN.fullmatch(data.phone or ""):
        return ValidationResult(ok=False, message=INVALID_PHONE)

    if not data.date:
        return ValidationResult(ok=False, message=MISSING_DATE)

    if not data.time:
        return ValidationResult(ok=False, message=MISSING_TIME)

    if not data.people:
        return ValidationResult(ok=False, message=MISSING_PEOPLE)

    return VALID
