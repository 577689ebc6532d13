"""Immutable value objects for rendered failures.

Like every model in giveup, :class:`FailureReport` is a **frozen**
dataclass with no I/O. The CLI layer decides how (and whether) to style
it; the plaintext shape is fixed here.
"""

from __future__ import annotations

from dataclasses import dataclass

HINT_LABEL: str = "Hint"
EXAMPLE_LABEL: str = "Example"
CAUSE_LABEL: str = "Caused by"


@dataclass(frozen=True, slots=True)
class FailureReport:
    """Everything shown to the user when a result gives up."""

    headline: str
    """Short label for the failing operation, supplied at the call site."""

    description: str
    """Rendered text of the failure value. May be empty."""

    causes: tuple[str, ...] = ()
    """Rendered chained causes, outermost first."""

    hint: str | None = None
    """Actionable guidance, or ``None`` when no hint was attached."""

    example: str | None = None
    """Sample remedial command, or ``None`` when no example was attached."""

    @property
    def summary(self) -> str:
        """The first line: ``<headline>: <description>``."""
        if not self.description:
            return self.headline
        if not self.headline:
            return self.description
        return f"{self.headline}: {self.description}"

    def lines(self) -> list[str]:
        """Return the plaintext message, one entry per output line."""
        lines = [self.summary]
        lines.extend(f"{CAUSE_LABEL}: {cause}" for cause in self.causes)
        if self.hint is not None:
            lines.append(f"{HINT_LABEL}: {self.hint}")
        if self.example is not None:
            lines.append(f"{EXAMPLE_LABEL}: {self.example}")
        return lines

    def __str__(self) -> str:
        return "\n".join(self.lines())
