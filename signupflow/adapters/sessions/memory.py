"""
In-memory session store - Live signup workflows addressed by session id.

Drafts only live as long as the process: nothing here is persisted. A
session is dropped when its signup completes or the user abandons it.
"""

import logging
import secrets
from collections.abc import Callable

from signupflow.domain.workflow import SignupWorkflow

logger = logging.getLogger(__name__)


class InMemorySessionStore:
    """Maps opaque session ids to SignupWorkflow instances."""

    def __init__(self, workflow_factory: Callable[[], SignupWorkflow]) -> None:
        """
        Initialize store.

        Args:
            workflow_factory: Builds a fresh workflow for each new session
        """
        self._workflow_factory = workflow_factory
        self._sessions: dict[str, SignupWorkflow] = {}

    def create(self) -> tuple[str, SignupWorkflow]:
        """Start a new signup and return its id and workflow."""
        session_id = secrets.token_urlsafe(16)
        workflow = self._workflow_factory()
        self._sessions[session_id] = workflow
        logger.debug("Signup session %s started", session_id)
        return session_id, workflow

    def get(self, session_id: str) -> SignupWorkflow | None:
        return self._sessions.get(session_id)

    def discard(self, session_id: str) -> bool:
        """
        Drop a session and its draft.

        Returns:
            True if the session existed
        """
        removed = self._sessions.pop(session_id, None) is not None
        if removed:
            logger.debug("Signup session %s discarded", session_id)
        return removed

    def __len__(self) -> int:
        return len(self._sessions)
