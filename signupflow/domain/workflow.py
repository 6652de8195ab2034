"""
Signup workflow - Step-wise form controller.

Three-Step Signup Flow
======================

Steps (fixed field groups):
- 1: email, password, confirm_password
- 2: first_name, last_name, phone_number, date_of_birth
- 3: ssn, address, city, state, zip_code

Navigation:
    advance()  validates only the current step's fields, moves 1 -> 2 -> 3
    retreat()  moves back without validating, never below step 1
    submit()   at step 3 only: validates every field, then hands the
               normalized draft to the SignupSubmitter port

Validation failures are reported per field through ``errors`` and never
raise. A rejected or failed submission is stored as one workflow-level message
and leaves the draft untouched so the user can retry.

Submission is the only suspension point. While it is awaiting the
collaborator ``busy`` is True and a second submit() raises
SubmissionInProgress instead of issuing another request.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .draft import FIELD_NAMES, FIRST_STEP, LAST_STEP, STEP_FIELDS, SignupDraft, normalize_value
from .exceptions import (
    SignupRejected,
    StepOutOfOrder,
    SubmissionInProgress,
    UnknownField,
    WorkflowCompleted,
)
from .ports import SignupSubmitter, SubmitResult
from .validation import SignupValidator

logger = logging.getLogger(__name__)

GENERIC_SUBMISSION_ERROR = "Something went wrong"


@dataclass
class SignupWorkflow:
    """
    Controller for one in-progress signup.

    Holds the draft, the current step and the per-field errors, and
    orchestrates navigation gated by validation.
    """

    submitter: SignupSubmitter
    validator: SignupValidator = field(default_factory=SignupValidator)
    post_signup_redirect: str = "/dashboard"

    draft: SignupDraft = field(default_factory=SignupDraft, init=False)
    step: int = field(default=FIRST_STEP, init=False)
    errors: dict[str, str] = field(default_factory=dict, init=False)
    submission_error: str = field(default="", init=False)
    busy: bool = field(default=False, init=False)
    completed: bool = field(default=False, init=False)

    @property
    def redirect_to(self) -> str | None:
        """Post-signup destination, set once the submission completed."""
        return self.post_signup_redirect if self.completed else None

    def update(self, name: str, value: str) -> None:
        """
        Store a field value after normalization.

        A field that currently carries an error is re-validated at once,
        so the error disappears as soon as the new value passes.

        Raises:
            UnknownField: If name is not a draft field
            WorkflowCompleted: If the signup was already submitted
        """
        self._ensure_open()
        if name not in FIELD_NAMES:
            raise UnknownField(name)

        setattr(self.draft, name, normalize_value(name, value))
        if name in self.errors:
            self._apply([name], self.validator.validate([name], self.draft))

    def update_many(self, values: Mapping[str, str]) -> None:
        """Store several field values; all names are checked before any is set."""
        self._ensure_open()
        unknown = [name for name in values if name not in FIELD_NAMES]
        if unknown:
            raise UnknownField(", ".join(unknown))
        for name, value in values.items():
            self.update(name, value)

    def advance(self) -> bool:
        """
        Validate the current step and move forward if it passes.

        Returns:
            True if every field of the step passed (step capped at the last)
        """
        self._ensure_open()
        step_fields = STEP_FIELDS[self.step]
        failures = self.validator.validate(step_fields, self.draft)
        self._apply(step_fields, failures)

        if failures:
            logger.debug("Step %d blocked by: %s", self.step, ", ".join(failures))
            return False

        self.step = min(self.step + 1, LAST_STEP)
        logger.debug("Advanced to step %d", self.step)
        return True

    def retreat(self) -> None:
        """Move back one step. Errors are kept and nothing is re-validated."""
        self._ensure_open()
        self.step = max(self.step - 1, FIRST_STEP)

    async def submit(self) -> SubmitResult:
        """
        Validate every field and submit the normalized draft.

        Returns:
            SubmitResult.COMPLETED on collaborator success,
            SubmitResult.INVALID if any field fails (collaborator not called),
            SubmitResult.REJECTED if the collaborator refused or failed

        Raises:
            StepOutOfOrder: If called before the last step
            SubmissionInProgress: If a submission is already awaiting the collaborator
            WorkflowCompleted: If the signup was already submitted
        """
        self._ensure_open()
        if self.step != LAST_STEP:
            raise StepOutOfOrder(f"submit requires step {LAST_STEP}, current step is {self.step}")
        if self.busy:
            raise SubmissionInProgress()

        # All steps again, not just the visible one
        failures = self.validator.validate(FIELD_NAMES, self.draft)
        self._apply(FIELD_NAMES, failures)
        if failures:
            logger.debug("Submission blocked by: %s", ", ".join(failures))
            return SubmitResult.INVALID

        self.submission_error = ""
        self.busy = True
        try:
            await self.submitter.submit_signup(self.draft.normalized())
        except SignupRejected as exc:
            self.submission_error = exc.message or GENERIC_SUBMISSION_ERROR
            logger.warning("Signup rejected: %s", self.submission_error)
            return SubmitResult.REJECTED
        except Exception:
            # Transport and other unexpected failures stay retryable
            self.submission_error = GENERIC_SUBMISSION_ERROR
            logger.exception("Signup submission failed")
            return SubmitResult.REJECTED
        finally:
            self.busy = False

        self.completed = True
        logger.info("Signup completed, redirecting to %s", self.post_signup_redirect)
        return SubmitResult.COMPLETED

    def _apply(self, validated: Iterable[str], failures: Mapping[str, str]) -> None:
        """Replace the errors of the validated fields with this pass's results."""
        for name in validated:
            if name in failures:
                self.errors[name] = failures[name]
            else:
                self.errors.pop(name, None)

    def _ensure_open(self) -> None:
        if self.completed:
            raise WorkflowCompleted()
