"""Pure rendering of failure values into text.

Nothing here writes to a stream or exits. All functions are total: they
never raise for any failure value, because they run on the way out of a
program that is already failing.
"""

from __future__ import annotations


def describe_failure(error: object) -> str:
    """Render *error* to a single user-facing string.

    * ``str(error)`` is used when it is non-empty.
    * An exception with an empty message renders as its class name
      (``FileNotFoundError()`` → ``"FileNotFoundError"``).
    * Any other empty value renders as ``""``.
    * If ``str()`` itself raises, ``<unprintable TypeName object>`` is used.
    """
    try:
        text = str(error)
    except Exception:  # noqa: BLE001
        return f"<unprintable {type(error).__name__} object>"
    if not text and isinstance(error, BaseException):
        return type(error).__name__
    return text


def iter_causes(error: object) -> list[BaseException]:
    """Return the chained causes of *error*, outermost first.

    Follows ``__cause__``, then ``__context__`` unless
    ``__suppress_context__`` is set, matching how the interpreter prints
    chained tracebacks. Non-exception values have no causes.
    """
    causes: list[BaseException] = []
    if not isinstance(error, BaseException):
        return causes

    seen = {id(error)}
    current: BaseException | None = _next_cause(error)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        causes.append(current)
        current = _next_cause(current)
    return causes


def _next_cause(exc: BaseException) -> BaseException | None:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def describe_causes(error: object) -> tuple[str, ...]:
    """Render every chained cause of *error* with :func:`describe_failure`."""
    return tuple(describe_failure(cause) for cause in iter_causes(error))
