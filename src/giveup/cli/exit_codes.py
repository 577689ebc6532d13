"""Exit-code constants used when giving up.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit. giveup never exits with it; exported for host applications
that map their own outcomes alongside ``GENERAL_ERROR``."""

GENERAL_ERROR: int = 1
"""A failure was rendered to stderr and the program gave up."""
