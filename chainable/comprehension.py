"""
Generator-based do-notation.

Каждый yield - это bind: контейнер разворачивается, значение отправляется
обратно в генератор. return оборачивается через pure.

Example:
    @do_maybe
    def total(a: Maybe[int], b: Maybe[int]) -> Generator[Maybe[int], int, int]:
        x = yield a
        y = yield b
        return x + y

    total(Maybe.present(10), Maybe.present(20))  # Some(30)
    total(Maybe.present(10), Maybe.absent())     # None

Equivalent to chain(a, lambda x: b, lambda x, y: x + y).
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Generator
from functools import wraps

from ._types import Binder, Unit
from .either import Either, TextEither
from .maybe import Maybe

logger = logging.getLogger(__name__)

# bind returned our own marker: the yielded container was unwrapped
_CONTINUE: typing.Any = object()


def doM[M, P, T](
    gen: Generator[M, typing.Any, T],
    *,
    bind: Callable[[M, Binder[typing.Any, P]], P],
    pure: Unit[T, P],
) -> P:
    """
    Drive a generator through bind.

    - yielded container present/success: its value is sent back in
    - yielded container short-circuited: generator is closed, that state is returned
    - generator returns: the value is wrapped with pure

    NOTE: Exceptions raised inside the generator propagate unchanged.
          The generator is driven in a loop, block length does not grow the stack.
    """
    sent: typing.Any = None

    def capture(value: typing.Any) -> typing.Any:
        nonlocal sent
        sent = value
        return _CONTINUE

    try:
        while True:
            try:
                container = gen.send(sent)
            except StopIteration as stop:
                return pure(stop.value)
            outcome = bind(container, capture)
            if outcome is not _CONTINUE:
                logger.debug("do-block short-circuited: %s", outcome)
                return outcome
    finally:
        gen.close()


def do_maybe[**Params, T](
    fn: Callable[Params, Generator[Maybe[typing.Any], typing.Any, T]],
) -> Callable[Params, Maybe[T]]:
    """Decorator: generator function yielding Maybe -> function returning Maybe."""

    @wraps(fn)
    def wrapper(*args: Params.args, **kwargs: Params.kwargs) -> Maybe[T]:
        return doM(fn(*args, **kwargs), bind=Maybe.bind, pure=Maybe.pure)

    return wrapper


def do_either[**Params, L, T](
    fn: Callable[Params, Generator[Either[L, typing.Any], typing.Any, T]],
) -> Callable[Params, Either[L, T]]:
    """Decorator: generator function yielding Either -> function returning Either."""

    @wraps(fn)
    def wrapper(*args: Params.args, **kwargs: Params.kwargs) -> Either[L, T]:
        return doM(fn(*args, **kwargs), bind=Either.bind, pure=Either.pure)

    return wrapper


def do_text[**Params, T](
    fn: Callable[Params, Generator[TextEither[typing.Any], typing.Any, T]],
) -> Callable[Params, TextEither[T]]:
    """Decorator: generator function yielding TextEither -> function returning TextEither."""

    @wraps(fn)
    def wrapper(*args: Params.args, **kwargs: Params.kwargs) -> TextEither[T]:
        return doM(fn(*args, **kwargs), bind=TextEither.bind, pure=TextEither.pure)

    return wrapper


__all__ = (
    "doM",
    "do_either",
    "do_maybe",
    "do_text",
)
