"""
Notes API - Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for the caller-meaningful failures.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these by type
       and return the JSON error envelopes with the matching status code.
Who:   Raised by the note service and the notes router.
When:  During request processing when a request cannot be fulfilled.

Exception Hierarchy:
    NotesAPIError (base)
    ├── ValidationError   → 400 Bad Request {"error": "Validation error", "details": [...]}
    └── NotFoundError     → 404 Not Found   {"error": "Note not found"}

    Anything else is unexpected and ends up in the catch-all handler (500).
"""

from typing import Any, Dict, List, Optional


class NotesAPIError(Exception):
    """
    Base exception for all Notes API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesAPIError):
    """
    Raised when a request payload breaks one or more input rules.

    What:    The client sent missing or malformed fields.
    HTTP:    400 Bad Request

    `messages` always holds every violated rule, in evaluation order, so a
    client can fix all of them in one round trip.

    Example response:
        {
            "error": "Validation error",
            "details": [
                "title must be a non-empty string",
                "content must be a non-empty string"
            ]
        }
    """

    def __init__(
        self,
        messages: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.messages = list(messages or [])
        ctx = context or {}
        ctx["messages"] = self.messages
        super().__init__(message="Validation error", context=ctx)


class NotFoundError(NotesAPIError):
    """
    Raised when a referenced note does not exist.

    What:    The id in the path matches no live note.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message="Note not found", context=ctx)
        self.resource_id = resource_id
