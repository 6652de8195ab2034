"""
Unit tests for API request/response models.

Tests Pydantic model validation and camelCase aliasing.
"""

from unittest.mock import AsyncMock

import pytest
from pydantic import ValidationError

from signupflow.api.models import ErrorResponse, FieldsUpdateRequest, WorkflowResponse
from signupflow.domain.workflow import SignupWorkflow


class TestFieldsUpdateRequest:
    """Tests for FieldsUpdateRequest model."""

    def test_camel_case_names_accepted(self) -> None:
        request = FieldsUpdateRequest.model_validate(
            {"confirmPassword": "x", "zipCode": "12345", "dateOfBirth": "1990-01-01"}
        )
        assert request.confirm_password == "x"
        assert request.zip_code == "12345"
        assert request.date_of_birth == "1990-01-01"

    def test_provided_returns_only_sent_fields(self) -> None:
        request = FieldsUpdateRequest.model_validate({"email": " a@b.co ", "phoneNumber": "+1 2"})
        assert request.provided() == {"email": " a@b.co ", "phone_number": "+1 2"}

    def test_null_values_ignored(self) -> None:
        request = FieldsUpdateRequest.model_validate({"email": None, "city": "Austin"})
        assert request.provided() == {"city": "Austin"}

    def test_empty_string_is_kept(self) -> None:
        """Clearing a field is an update, not an omission."""
        request = FieldsUpdateRequest.model_validate({"city": ""})
        assert request.provided() == {"city": ""}

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            FieldsUpdateRequest.model_validate({"nickname": "ada"})
        assert "nickname" in str(exc_info.value)

    def test_non_text_value_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FieldsUpdateRequest.model_validate({"zipCode": 12345})


class TestWorkflowResponse:
    """Tests for WorkflowResponse model."""

    def test_from_new_workflow(self) -> None:
        response = WorkflowResponse.from_workflow("abc", SignupWorkflow(submitter=AsyncMock()))

        assert response.model_dump(by_alias=True) == {
            "sessionId": "abc",
            "step": 1,
            "errors": {},
            "submissionError": "",
            "busy": False,
            "completed": False,
            "redirectTo": None,
        }

    def test_error_keys_are_camel_case(self) -> None:
        workflow = SignupWorkflow(submitter=AsyncMock())
        workflow.advance()

        response = WorkflowResponse.from_workflow("abc", workflow)

        assert set(response.errors) == {"email", "password", "confirmPassword"}

    def test_field_values_never_included(self, valid_fields: dict[str, str]) -> None:
        workflow = SignupWorkflow(submitter=AsyncMock())
        workflow.update_many(valid_fields)

        dumped = WorkflowResponse.from_workflow("abc", workflow).model_dump_json()

        assert valid_fields["password"] not in dumped
        assert valid_fields["ssn"] not in dumped


class TestErrorResponse:
    """Tests for ErrorResponse model."""

    def test_detail(self) -> None:
        assert ErrorResponse(detail="Signup session not found").detail == "Signup session not found"
