"""
Field validation - Ordered rule chains for every signup field.

Each field owns an ordered list of rules. A rule pairs a predicate with the
message shown when the predicate fails; evaluation stops at the first
failing rule, so its message is the one reported for the field.

Rules are pure functions of the draft. Only confirm_password looks at a
second field (password); only date_of_birth depends on the clock, which is
injected so "today" can be pinned in tests.
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date, datetime

from .draft import SignupDraft

US_STATE_CODES = frozenset(
    [
        "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
        "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
        "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
        "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
        "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
    ]
)

COMMON_PASSWORDS = frozenset(["password", "12345678", "qwerty"])

MIN_PASSWORD_LENGTH = 8
MIN_AGE_YEARS = 18

_EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_PHONE = re.compile(r"\+?[0-9]{10,15}")
_SSN = re.compile(r"[0-9]{9}")
_ZIP = re.compile(r"[0-9]{5}")
_DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class Rule:
    """One predicate of a field's rule chain and its failure message."""

    check: Callable[[str, SignupDraft], bool]
    message: str


def _required(message: str) -> Rule:
    return Rule(lambda value, _: value != "", message)


def _matches(pattern: re.Pattern[str], message: str) -> Rule:
    return Rule(lambda value, _: pattern.fullmatch(value) is not None, message)


def _has(predicate: Callable[[str], bool], message: str) -> Rule:
    return Rule(lambda value, _: any(predicate(c) for c in value), message)


def _is_ascii_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _is_ascii_lower(c: str) -> bool:
    return "a" <= c <= "z"


def _is_ascii_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_special(c: str) -> bool:
    return not (_is_ascii_upper(c) or _is_ascii_lower(c) or _is_ascii_digit(c))


def parse_date(value: str) -> date | None:
    """Parse a YYYY-MM-DD calendar date, returning None when invalid."""
    try:
        return datetime.strptime(value, _DATE_FORMAT).date()
    except ValueError:
        return None


def age_on(born: date, today: date) -> int:
    """Full years elapsed, counting this year only once the birthday passed."""
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


class SignupValidator:
    """
    Validator holding the rule registry for all signup fields.

    Args:
        today: Clock returning the current date (time-of-day is never used)
    """

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self._today = today
        self._rules: dict[str, list[Rule]] = self._build_rules()

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._rules)

    def validate_field(self, field: str, draft: SignupDraft) -> str | None:
        """
        Run a field's rule chain against the draft.

        Returns:
            Message of the first failing rule, or None when all rules pass
        """
        value = getattr(draft, field)
        for rule in self._rules[field]:
            if not rule.check(value, draft):
                return rule.message
        return None

    def validate(self, field_names: Iterable[str], draft: SignupDraft) -> dict[str, str]:
        """Validate each field independently; return only the failing ones."""
        errors: dict[str, str] = {}
        for field in field_names:
            message = self.validate_field(field, draft)
            if message is not None:
                errors[field] = message
        return errors

    def _not_in_future(self, value: str, _: SignupDraft) -> bool:
        born = parse_date(value)
        return born is not None and born <= self._today()

    def _is_adult(self, value: str, _: SignupDraft) -> bool:
        born = parse_date(value)
        return born is not None and age_on(born, self._today()) >= MIN_AGE_YEARS

    def _build_rules(self) -> dict[str, list[Rule]]:
        return {
            "email": [
                _required("Email is required"),
                _matches(_EMAIL, "Invalid email address"),
                # Very common typo: ".con" instead of ".com"
                Rule(
                    lambda value, _: not value.lower().endswith(".con"),
                    "Email domain looks incorrect ('.con'); did you mean '.com'?",
                ),
            ],
            "password": [
                _required("Password is required"),
                Rule(
                    lambda value, _: len(value) >= MIN_PASSWORD_LENGTH,
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
                ),
                Rule(
                    lambda value, _: value.lower() not in COMMON_PASSWORDS,
                    "Password is too common",
                ),
                _has(_is_ascii_digit, "Password must contain a number"),
                _has(_is_ascii_upper, "Password must contain an uppercase letter"),
                _has(_is_ascii_lower, "Password must contain a lowercase letter"),
                _has(_is_special, "Password must contain a special character"),
            ],
            "confirm_password": [
                _required("Please confirm your password"),
                Rule(lambda value, draft: value == draft.password, "Passwords do not match"),
            ],
            "first_name": [_required("First name is required")],
            "last_name": [_required("Last name is required")],
            "phone_number": [
                _required("Phone number is required"),
                _matches(
                    _PHONE,
                    "Enter a valid international phone number (10–15 digits, optional +)",
                ),
            ],
            "date_of_birth": [
                _required("Date of birth is required"),
                Rule(lambda value, _: parse_date(value) is not None, "Please enter a valid date"),
                Rule(self._not_in_future, "Date of birth cannot be in the future"),
                Rule(self._is_adult, f"You must be at least {MIN_AGE_YEARS} years old"),
            ],
            "ssn": [
                _required("SSN is required"),
                _matches(_SSN, "SSN must be 9 digits"),
            ],
            "address": [_required("Address is required")],
            "city": [_required("City is required")],
            "state": [
                _required("State is required"),
                Rule(lambda value, _: value.upper() in US_STATE_CODES, "Invalid U.S. state code"),
            ],
            "zip_code": [
                _required("ZIP code is required"),
                _matches(_ZIP, "ZIP code must be 5 digits"),
            ],
        }
