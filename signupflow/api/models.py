"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Field names travel as camelCase on the wire (confirmPassword, zipCode, ...).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from signupflow.domain.workflow import SignupWorkflow


class FieldsUpdateRequest(BaseModel):
    """Partial update of draft fields. Omitted fields keep their value."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    email: str | None = None
    password: str | None = None
    confirm_password: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    date_of_birth: str | None = None
    ssn: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None

    def provided(self) -> dict[str, str]:
        """Values sent in the request, keyed by draft attribute name."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class WorkflowResponse(BaseModel):
    """
    Observable workflow state.

    Field values are deliberately absent: the draft holds a password and an
    SSN, which are never echoed back.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    session_id: str
    step: int
    errors: dict[str, str]
    submission_error: str
    busy: bool
    completed: bool
    redirect_to: str | None = None

    @classmethod
    def from_workflow(cls, session_id: str, workflow: SignupWorkflow) -> "WorkflowResponse":
        return cls(
            session_id=session_id,
            step=workflow.step,
            errors={to_camel(name): message for name, message in workflow.errors.items()},
            submission_error=workflow.submission_error,
            busy=workflow.busy,
            completed=workflow.completed,
            redirect_to=workflow.redirect_to,
        )


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
