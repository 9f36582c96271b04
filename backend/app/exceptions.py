"""
Zomato Backend — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the database connector.
Why:   The connector records why its single attempt failed without letting
       the failure escape and stop the process.
How:   Each exception class carries a message and optional context dict.

Exception Hierarchy:
    ZomatoError (base)
    ├── DatabaseConnectionError   → startup attempt failed (logged, never raised to clients)
    └── DatabaseUnavailableError  → database handle requested with no live connection

HTTP errors (unknown route, wrong method) are left to FastAPI's defaults
and have no counterpart here.
"""

from typing import Any, Dict, Optional


class ZomatoError(Exception):
    """
    Base exception for all Zomato backend errors.

    Attributes:
        message:  Human-readable error description
        context:  Additional debug info (logged, never returned to clients)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DatabaseConnectionError(ZomatoError):
    """
    The single startup connection attempt to MongoDB failed.

    When:    Server selection timed out, the URI was invalid, or the ping
             command was rejected.
    Handling: Stored on the connector and logged. The process keeps serving.
    """

    def __init__(
        self,
        message: str = "MongoDB connection failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseUnavailableError(ZomatoError):
    """Raised when the database handle is requested but no connection exists."""

    def __init__(
        self,
        state: str = "idle",
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"Database is not available (connector state: {state})"
        ctx = context or {}
        ctx["state"] = state
        super().__init__(message=message, context=ctx)
        self.state = state
