"""Fluent hint/example decoration of a result, resolved by :meth:`giveup`.

Typical use at the top of a command-line program::

    config = (
        attempt(read_config, path)
        .with_hint("Create a configuration file")
        .with_example("touch config-filename")
        .giveup("Missing configuration file")
    )

On success ``config`` is the value ``read_config`` returned. On failure
the user sees::

    Missing configuration file: [Errno 2] No such file or directory: '...'
    Hint: Create a configuration file
    Example: touch config-filename

and the process exits with status 1.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from giveup.core.formatting import describe_causes, describe_failure
from giveup.core.models import FailureReport
from giveup.core.result import Err, Ok, Result
from giveup.exceptions import NotAResultError, require_text

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Annotated(Generic[T]):
    """A result plus optional user guidance, waiting to be resolved.

    Immutable: :meth:`with_hint` and :meth:`with_example` return new
    instances. Repeating either call replaces the earlier value.
    """

    outcome: Result[T, object]
    hint: str | None = None
    example: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.outcome, (Ok, Err)):
            raise NotAResultError(self.outcome)

    def with_hint(self, text: str) -> Annotated[T]:
        """Attach actionable guidance shown as ``Hint: <text>``."""
        return replace(self, hint=require_text("hint", text))

    def with_example(self, text: str) -> Annotated[T]:
        """Attach a sample command shown as ``Example: <text>``."""
        return replace(
            self, example=require_text("example", text, allow_empty=True),
        )

    def report(self, headline: str) -> FailureReport | None:
        """Build the message for the failure branch; ``None`` on success.

        An empty *headline* is allowed so headlines built at runtime still
        reach the exit path; the first line is then the failure alone.
        """
        require_text("headline", headline, allow_empty=True)
        if isinstance(self.outcome, Ok):
            return None
        error = self.outcome.error
        return FailureReport(
            headline=headline,
            description=describe_failure(error),
            causes=describe_causes(error),
            hint=self.hint,
            example=self.example,
        )

    def giveup(self, headline: str) -> T:
        """Return the success payload, or print the report and exit(1).

        Never returns on the failure branch.
        """
        report = self.report(headline)
        if report is None:
            return self.outcome.value  # type: ignore[union-attr]

        from giveup.cli.boundary import terminate

        terminate(report)


def annotate(result: object) -> Annotated[Any]:
    """Start an annotation chain from an ``Ok``/``Err``.

    An existing :class:`Annotated` is returned unchanged so chains can be
    passed around and extended.

    Raises
    ------
    NotAResultError
        When *result* is neither a result nor an annotated result.
    """
    if isinstance(result, Annotated):
        return result
    if isinstance(result, (Ok, Err)):
        return Annotated(result)
    raise NotAResultError(result)
