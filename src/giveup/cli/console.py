"""Rich console bound to standard error.

A fresh console is created for every report so it always targets the
*current* ``sys.stderr`` (which test runners and host applications may
have replaced) and re-detects whether that stream is a terminal.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from giveup.core.models import CAUSE_LABEL, EXAMPLE_LABEL, HINT_LABEL, FailureReport


def get_console() -> Console:
    """Create a Rich console that writes to stderr without re-wrapping."""
    return Console(stderr=True, highlight=False, soft_wrap=True)


def render_report(report: FailureReport) -> list[Text]:
    """Turn *report* into styled lines for a terminal.

    User text is wrapped in :class:`~rich.text.Text` and never parsed as
    markup, so brackets in error messages are printed literally.
    """
    summary = Text()
    summary.append(report.headline, style="bold")
    if report.headline and report.description:
        summary.append(": ")
    summary.append(report.description)

    lines = [summary]
    lines.extend(
        Text.assemble((f"{CAUSE_LABEL}:", "dim"), f" {cause}")
        for cause in report.causes
    )
    if report.hint is not None:
        lines.append(Text.assemble((f"{HINT_LABEL}:", "yellow"), f" {report.hint}"))
    if report.example is not None:
        lines.append(
            Text.assemble((f"{EXAMPLE_LABEL}:", "cyan"), f" {report.example}"),
        )
    return lines


def print_report(report: FailureReport, console: Console | None = None) -> None:
    """Write *report* to *console* (default: a new stderr console).

    Off a terminal the plaintext is written to the console's file as is;
    Rich would otherwise expand tabs and strip control characters.
    """
    console = console or get_console()
    if not console.is_terminal:
        console.file.write(f"{report}\n")
        console.file.flush()
        return
    for line in render_report(report):
        console.print(line)
