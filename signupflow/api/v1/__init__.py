"""
API v1 package.

Contains versioned API routes for the signup workflow API.
"""

from signupflow.api.v1.routes import router

__all__ = ["router"]
