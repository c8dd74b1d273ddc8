"""
Опускание контейнера в значение.

Functions extracting plain values, kungfu Results or LazyCoroResults.
"""

from __future__ import annotations

import typing

from kungfu import Error, LazyCoroResult, Ok, Result

from ..either import Either, TextEither
from ..maybe import Maybe


def to_optional[T](maybe: Maybe[T], /) -> T | None:
    """Maybe -> ``T | None``."""
    return maybe.value if maybe.has_value else None


@typing.overload
def to_result[T](either: TextEither[T], /) -> Result[T, str]: ...


@typing.overload
def to_result[T, E](either: Either[E, T], /) -> Result[T, E]: ...


def to_result(either: typing.Any, /) -> Result[typing.Any, typing.Any]:
    """
    Either / TextEither -> kungfu Result.

    Example:
        L.down.to_result(Either.success(1))   # Ok(1)
        L.down.to_result(Either.error("e"))   # Error('e')
    """
    if either.is_error:
        return Error(either.error_value)
    return Ok(either.success_value)


def to_lazy[T, E](either: Either[E, T] | TextEither[T], /) -> LazyCoroResult[T, typing.Any]:
    """
    Either -> kungfu LazyCoroResult, to continue in an async pipeline.

    NOTE: This is NOT lazy in the computation sense, the value is already
          computed. The coroutine only returns it.
    """
    result = to_result(either)

    async def run() -> Result[T, typing.Any]:
        return result

    return LazyCoroResult(run)


@typing.overload
def or_else[T](container: Maybe[T], default: T, /) -> T: ...


@typing.overload
def or_else[T](container: Either[typing.Any, T] | TextEither[T], default: T, /) -> T: ...


def or_else(container: typing.Any, default: typing.Any, /) -> typing.Any:
    """Value, or default on absence / error."""
    return container.or_else(default)


def unsafe(container: typing.Any, /) -> typing.Any:
    """
    Unwrap, raising on a short-circuit state.

    - Maybe: raises EmptyAccessError when absent
    - Either / TextEither: raises WrongVariantAccessError on error
    """
    match container:
        case Maybe():
            return container.value
        case Either() | TextEither():
            return container.success_value
        case _:
            raise TypeError(f"Expected Maybe, Either or TextEither, got {type(container).__name__}")


__all__ = (
    "or_else",
    "to_lazy",
    "to_optional",
    "to_result",
    "unsafe",
)
