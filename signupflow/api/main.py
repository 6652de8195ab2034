"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routers and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from signupflow.adapters.sessions.memory import InMemorySessionStore
from signupflow.adapters.submitter.console import ConsoleSignupSubmitter
from signupflow.api.v1 import router as v1_router
from signupflow.config.settings import Settings, get_settings
from signupflow.domain.ssn import SsnProtector
from signupflow.domain.workflow import SignupWorkflow

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Signup Workflow API v1 - Fill in, validate and submit a three-step signup",
    },
]


def check_ssn_secret(settings: Settings) -> None:
    """
    Flag the development SSN secret.

    The default secret is kept working so local setups need no configuration,
    but every digest made with it is reproducible by anyone. Startup fails
    instead when require_ssn_secret is enabled.

    Raises:
        RuntimeError: If the default secret is in use and require_ssn_secret is set
    """
    if not settings.uses_default_ssn_secret:
        return
    if settings.require_ssn_secret:
        raise RuntimeError("SSN_SECRET is not set and REQUIRE_SSN_SECRET is enabled")
    logger.warning("SSN_SECRET is not set; SSN digests use the insecure development secret")


def build_session_store(settings: Settings) -> InMemorySessionStore:
    """Wire the submitter and settings into a store of fresh workflows."""
    submitter = ConsoleSignupSubmitter(SsnProtector(settings.ssn_secret))

    def new_workflow() -> SignupWorkflow:
        return SignupWorkflow(
            submitter=submitter,
            post_signup_redirect=settings.post_signup_redirect,
        )

    return InMemorySessionStore(new_workflow)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Checks the SSN secret configuration on startup
    - Creates the session store on startup
    - Drops all in-progress drafts on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")
    check_ssn_secret(settings)

    # Store sessions in app state for dependency injection
    app.state.sessions = build_session_store(settings)

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    logger.info("Discarded %d in-progress signups", len(app.state.sessions))


app = FastAPI(
    title="signupflow",
    description="Signup Workflow API - Three-step account registration with per-step validation",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str | int]:
    """
    Health check endpoint.

    Returns 200 OK with the number of in-progress signups.
    """
    sessions = request.app.state.sessions
    return {"status": "healthy", "active_signups": len(sessions)}
