"""
Console signup submitter adapter - Implements SignupSubmitter protocol.

This module provides a console-based stand-in for the remote
account-creation service, logging accepted signups for demo purposes.
"""

import logging

from signupflow.domain.draft import SignupDraft
from signupflow.domain.ssn import SsnProtector

logger = logging.getLogger(__name__)


class ConsoleSignupSubmitter:
    """
    Implements SignupSubmitter protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - accepts every signup.
    """

    def __init__(self, protector: SsnProtector) -> None:
        """
        Initialize submitter with the SSN protector used before "storage".

        Args:
            protector: SsnProtector bound to the deployment secret
        """
        self._protector = protector

    async def submit_signup(self, draft: SignupDraft) -> None:
        """
        Log the accepted signup (simulates account creation).

        Only the SSN digest is logged; the raw SSN and the password never
        reach the log. Logged at INFO level to be visible in server logs.

        Args:
            draft: Normalized signup draft from the domain layer
        """
        digest = self._protector.protect(draft.ssn)
        logger.info("[SIGNUP] Email: %s SSN digest: %s", draft.email, digest)
