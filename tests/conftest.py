"""Shared pytest fixtures and configuration for the giveup test suite.

Guidelines
----------
* Termination is observed with ``pytest.raises(SystemExit)``.
* stderr is observed with ``capsys``; Rich must write plain text there.
* Tests must not depend on the terminal or colour settings of the host.
"""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _plain_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Stop Rich from forcing terminal mode into captured streams."""
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)
