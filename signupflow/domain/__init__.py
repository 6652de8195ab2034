"""
Domain layer - Pure signup logic with zero framework imports.

This package contains the step-wise signup workflow, its field validation
rules and the SSN protection helper. It defines its own port interface for
the remote account-creation call, keeping the workflow independent of any
transport.
"""

from .draft import FIELD_NAMES, STEP_FIELDS, SignupDraft
from .exceptions import (
    SignupError,
    SignupRejected,
    StepOutOfOrder,
    SubmissionInProgress,
    UnknownField,
    WorkflowCompleted,
)
from .ports import SignupSubmitter, SubmitResult
from .ssn import SsnProtector, protect_ssn
from .validation import SignupValidator
from .workflow import SignupWorkflow

__all__ = [
    "FIELD_NAMES",
    "STEP_FIELDS",
    "SignupDraft",
    "SignupError",
    "SignupRejected",
    "SignupSubmitter",
    "SignupValidator",
    "SignupWorkflow",
    "SsnProtector",
    "StepOutOfOrder",
    "SubmissionInProgress",
    "SubmitResult",
    "UnknownField",
    "WorkflowCompleted",
    "protect_ssn",
]
