"""
Domain exceptions - Semantic error types for the signup workflow.

Field validation failures are not exceptions: they are reported as data
through the workflow's error mapping. These types cover collaborator
failures and operations requested out of order.
"""


class SignupError(Exception):
    """Base class for signup domain errors."""

    pass


class SignupRejected(SignupError):
    """The submission collaborator refused the signup (e.g. email taken)."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class SubmissionInProgress(SignupError):
    """A submission for this draft is already awaiting the collaborator."""

    pass


class StepOutOfOrder(SignupError):
    """Submission requested before the final step was reached."""

    pass


class WorkflowCompleted(SignupError):
    """The workflow already submitted successfully and accepts no changes."""

    pass


class UnknownField(SignupError):
    """Field name is not part of the signup draft."""

    pass
