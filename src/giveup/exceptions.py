"""Exceptions raised by giveup itself.

These signal *misuse* of the library at the call site, e.g. an empty hint
or a value that is not a result. They are raised eagerly, on both the
success and the failure branch, so a mistake surfaces while developing
rather than in the middle of rendering a failure for an end user.

The failures that giveup renders are never wrapped in these types; they
are the caller's own values.

Hierarchy
---------
GiveupError
├── InvalidAnnotationError   (also a ValueError)
└── NotAResultError          (also a TypeError)
"""

from __future__ import annotations


class GiveupError(Exception):
    """Base exception for all giveup errors."""


class InvalidAnnotationError(GiveupError, ValueError):
    """Raised when a hint, example or headline is not a usable string."""


class NotAResultError(GiveupError, TypeError):
    """Raised when a chain is started from something other than ``Ok``/``Err``."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"expected Ok or Err, got {type(value).__name__}",
        )
        self.value: object = value
        """The offending value, kept for debugging."""


def require_text(label: str, text: object, *, allow_empty: bool = False) -> str:
    """Return *text* if it is a ``str``, else raise.

    *label* names the argument in the error message (``"hint"``,
    ``"example"``, ``"headline"``). Blank strings are rejected unless
    *allow_empty* is set.
    """
    if not isinstance(text, str):
        raise InvalidAnnotationError(
            f"{label} must be a str, got {type(text).__name__}",
        )
    if not allow_empty and not text.strip():
        raise InvalidAnnotationError(f"{label} must not be empty")
    return text
