"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the signup workflow
requires from the outside world. Adapters implement these protocols.
"""

from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .draft import SignupDraft


class SubmitResult(Enum):
    """
    Result of a submission attempt.

    Used by SignupWorkflow.submit() to indicate completion or the kind of
    failure. Neither failure is fatal: the user corrects fields or retries.
    """

    COMPLETED = "completed"
    INVALID = "invalid"
    REJECTED = "rejected"


class SignupSubmitter(Protocol):
    """Port interface for the remote account-creation operation."""

    async def submit_signup(self, draft: "SignupDraft") -> None:
        """
        Create the account described by a fully validated draft.

        Called exactly once per successful submission, with email trimmed
        and phone number whitespace-stripped.

        Args:
            draft: Normalized signup draft

        Raises:
            SignupRejected: With a human-readable message when the remote
                side refuses the signup
        """
        ...
