"""
Signup draft - In-progress field values and the fixed step layout.
"""

import re
from dataclasses import dataclass, fields, replace

_WHITESPACE = re.compile(r"\s+")


@dataclass
class SignupDraft:
    """Mutable record of the twelve signup fields. Every field is text."""

    email: str = ""
    password: str = ""
    confirm_password: str = ""
    first_name: str = ""
    last_name: str = ""
    phone_number: str = ""
    date_of_birth: str = ""
    ssn: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""

    def normalized(self) -> "SignupDraft":
        """Return a copy with every normalization rule applied."""
        return replace(
            self,
            email=normalize_value("email", self.email),
            phone_number=normalize_value("phone_number", self.phone_number),
        )


FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in fields(SignupDraft))

# Fields validated by advance() at each step
STEP_FIELDS: dict[int, tuple[str, ...]] = {
    1: ("email", "password", "confirm_password"),
    2: ("first_name", "last_name", "phone_number", "date_of_birth"),
    3: ("ssn", "address", "city", "state", "zip_code"),
}

FIRST_STEP = 1
LAST_STEP = max(STEP_FIELDS)


def normalize_value(field: str, value: str) -> str:
    """
    Normalize a raw field value before storage and validation.

    Applies: strip for email, removal of all whitespace for phone number.
    Other fields are stored as typed.
    """
    if field == "email":
        return value.strip()
    if field == "phone_number":
        return _WHITESPACE.sub("", value)
    return value
