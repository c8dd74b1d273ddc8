"""
Подъем значений в контейнеры.

Functions converting plain Python values, kungfu Results and exception-based
code into Maybe / Either.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from .._types import Thunk
from ..either import Either
from ..maybe import Maybe


def optional[T](value: T | None, /) -> Maybe[T]:
    """
    Convert ``T | None`` to Maybe. None becomes absent().

    **When to use:** dict lookups, ORM ``first()``, config reads - anywhere
    a plain Optional enters a chain.

    Example:
        from chainable import lift as L

        port = L.up.optional(os.environ.get("PORT")).map(int)
    """
    if value is None:
        return Maybe.absent()
    return Maybe.present(value)


def from_result[T, E](result: Result[T, E], /) -> Either[E, T]:
    """
    Convert kungfu Result to Either: Ok -> success, Error -> error.

    Example:
        L.up.from_result(Ok(42))          # Right(42)
        L.up.from_result(Error("boom"))   # Left(boom)
    """
    match result:
        case Ok(value):
            return Either.success(value)
        case Error(err):
            return Either.error(err)
        case _:
            raise TypeError(f"Expected kungfu Result, got {type(result).__name__}")


def note[T, E](maybe: Maybe[T], /, *, error: Thunk[E]) -> Either[E, T]:
    """
    Attach an error to absence: present -> success, absent -> error(error()).

    NOTE: error is a thunk so the payload is built only on absence.
    """
    if maybe.is_absent:
        return Either.error(error())
    return Either.success(maybe.value)


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
) -> Either[E, T]:
    """
    Execute thunk, catch exceptions and convert them to an error case.

    **When to use:** Bridge between exception-based code and chains.

    Example:
        from chainable import lift as L
        import json

        L.up.catching(lambda: json.loads(raw), on_error=lambda e: str(e))

    NOTE: Catches all Exception subclasses. For specific exceptions,
          filter in on_error or use try/except manually.
    """
    try:
        return Either.success(thunk())
    except Exception as exc:
        return Either.error(on_error(exc))


__all__ = (
    "catching",
    "from_result",
    "note",
    "optional",
)
