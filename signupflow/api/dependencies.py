"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the session
store and the addressed signup workflow into routes.
"""

from fastapi import Depends, HTTPException, Request, status

from signupflow.adapters.sessions.memory import InMemorySessionStore
from signupflow.domain.workflow import SignupWorkflow


def get_session_store(request: Request) -> InMemorySessionStore:
    """
    Get session store from app state.

    The store is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.sessions


def get_workflow(
    session_id: str,
    store: InMemorySessionStore = Depends(get_session_store),
) -> SignupWorkflow:
    """
    Resolve the workflow addressed by the session_id path parameter.

    Raises:
        HTTPException: 404 if the session is unknown, completed or abandoned
    """
    workflow = store.get(session_id)
    if workflow is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Signup session not found",
        )
    return workflow
