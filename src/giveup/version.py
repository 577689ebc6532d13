"""Single source of truth for the giveup version."""

from __future__ import annotations

__version__: str = "0.2.0"
