"""Process-exit boundary.

This module is the **only** place in giveup that terminates the process.
Both entry points funnel through :func:`terminate`:

* :meth:`Annotated.giveup <giveup.core.annotated.Annotated.giveup>` on an
  ``Err``;
* the :func:`giving_up` context manager, for code that raises instead of
  returning results.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import NoReturn

from giveup.cli import exit_codes
from giveup.cli.console import print_report
from giveup.core.annotated import Annotated
from giveup.core.models import FailureReport
from giveup.core.result import Err
from giveup.exceptions import require_text

logger = logging.getLogger(__name__)


def terminate(report: FailureReport) -> NoReturn:
    """Print *report* to stderr and exit with ``GENERAL_ERROR``.

    Exits through :func:`sys.exit` so ``finally`` blocks, ``atexit``
    handlers and stream flushing still run.
    """
    print_report(report)
    logger.debug(
        "giving up: %s (exit status %d)",
        report.headline,
        exit_codes.GENERAL_ERROR,
    )
    sys.exit(exit_codes.GENERAL_ERROR)


@contextmanager
def giving_up(
    headline: str,
    *,
    hint: str | None = None,
    example: str | None = None,
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
) -> Iterator[None]:
    """Give up with a formatted message if the block raises *catch*.

    Example
    -------
    ::

        with giving_up("Missing configuration file",
                       hint="Create a configuration file",
                       example="touch config-filename"):
            config = read_config(path)

    Arguments are validated on entry, before the block runs. Exceptions
    that are not instances of *catch* propagate unchanged; by default
    that includes ``KeyboardInterrupt`` and ``SystemExit``.
    """

    def _annotate(outcome: Err[BaseException]) -> Annotated[None]:
        annotated: Annotated[None] = Annotated(outcome)
        if hint is not None:
            annotated = annotated.with_hint(hint)
        if example is not None:
            annotated = annotated.with_example(example)
        return annotated

    require_text("headline", headline, allow_empty=True)
    if hint is not None:
        require_text("hint", hint)
    if example is not None:
        require_text("example", example, allow_empty=True)

    try:
        yield
    except catch as exc:
        _annotate(Err(exc)).giveup(headline)
