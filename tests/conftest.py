"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A validator pinned to a fixed "today"
- A complete set of valid field values
- Workflows wired to a mocked submission collaborator
"""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from signupflow.domain.validation import SignupValidator
from signupflow.domain.workflow import SignupWorkflow

FIXED_TODAY = date(2026, 10, 19)

VALID_FIELDS = {
    "email": "user@example.com",
    "password": "Str0ng!Pass",
    "confirm_password": "Str0ng!Pass",
    "first_name": "Ada",
    "last_name": "Lovelace",
    "phone_number": "+14155552671",
    "date_of_birth": "1990-05-17",
    "ssn": "123456789",
    "address": "1 Main St",
    "city": "Springfield",
    "state": "IL",
    "zip_code": "62701",
}


@pytest.fixture
def validator() -> SignupValidator:
    """Validator whose clock always reads FIXED_TODAY."""
    return SignupValidator(today=lambda: FIXED_TODAY)


@pytest.fixture
def valid_fields() -> dict[str, str]:
    """Fresh copy of a complete, valid set of field values."""
    return dict(VALID_FIELDS)


@pytest.fixture
def submitter() -> AsyncMock:
    """Submission collaborator that accepts every signup."""
    return AsyncMock()


@pytest.fixture
def workflow(submitter: AsyncMock, validator: SignupValidator) -> SignupWorkflow:
    """Workflow at step 1 with an empty draft."""
    return SignupWorkflow(submitter=submitter, validator=validator)
