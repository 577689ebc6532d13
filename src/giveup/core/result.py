"""The result-like type giveup decorates.

A :data:`Result` is either :class:`Ok` (a success payload) or :class:`Err`
(a failure value), exactly one of the two. Both variants are frozen
dataclasses with no behaviour beyond inspection and the fluent entry
points into :class:`~giveup.core.annotated.Annotated`.

Most Python code signals failure by raising, so :func:`attempt` bridges
the two worlds by turning a raising call into a :data:`Result`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar, Union

if TYPE_CHECKING:
    from giveup.core.annotated import Annotated

T = TypeVar("T")
E = TypeVar("E")


class _Chainable:
    """Fluent entry points shared by :class:`Ok` and :class:`Err`."""

    __slots__ = ()

    def with_hint(self, text: str) -> Annotated[Any]:
        from giveup.core.annotated import annotate

        return annotate(self).with_hint(text)  # type: ignore[arg-type]

    def with_example(self, text: str) -> Annotated[Any]:
        from giveup.core.annotated import annotate

        return annotate(self).with_example(text)  # type: ignore[arg-type]

    def giveup(self, headline: str) -> Any:
        """Return the success payload, or print *headline* and exit."""
        from giveup.core.annotated import annotate

        return annotate(self).giveup(headline)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class Ok(_Chainable, Generic[T]):
    """A successful outcome carrying *value*."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(_Chainable, Generic[E]):
    """A failed outcome carrying *error*.

    *error* is usually an exception instance, but any object with a
    meaningful ``str()`` works (a plain message string is common).
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


Result = Union[Ok[T], Err[E]]
"""Either :class:`Ok` or :class:`Err`."""


def attempt(
    func: Callable[..., T],
    *args: Any,
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    **kwargs: Any,
) -> Result[T, BaseException]:
    """Call ``func(*args, **kwargs)`` and capture the outcome.

    Parameters
    ----------
    func:
        The callable to run.
    catch:
        Exception type (or tuple of types) converted into :class:`Err`.
        Anything else propagates unchanged. Defaults to ``Exception`` so
        ``KeyboardInterrupt`` and ``SystemExit`` are never swallowed.

    Returns
    -------
    Result
        ``Ok(return_value)`` or ``Err(exception)``.
    """
    try:
        return Ok(func(*args, **kwargs))
    except catch as exc:
        return Err(exc)
