"""
Chaining combinator
===================

chain(first, project, combine): bind project over first, then feed both
unwrapped values to combine and wrap the result with the container's pure.

Architecture:
- chainM - generic, works with any container via bind, is_short, short, get_first/get_second, pure hooks
- chain_maybe / chain_either / chain_text - sugar per container
- chain - dispatches on the container type

Depth-N chains are N-1 nested chain calls, each closure seeing every value
bound before it:

    chain(m1, lambda a:
        chain(m2, lambda b: m3, lambda b, c: (b, c)),
        lambda a, bc: a + bc[0] + bc[1])
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable

from ._types import Binder, Combiner, Unit
from .either import Either, TextEither
from .maybe import Maybe

logger = logging.getLogger(__name__)


# ============================================================================
# Generic combinator (bind + short + pure hooks)
# ============================================================================


def chainM[M, N, P, A, B, C](
    first: M,
    project: Binder[A, N],
    combine: Combiner[A, B, C],
    *,
    bind: Callable[[M, Binder[A, N]], N],
    is_short: Callable[[N], bool],
    short: Callable[[N], P],
    get_first: Callable[[M], A],
    get_second: Callable[[N], B],
    pure: Unit[C, P],
) -> P:
    """
    Generic chain combinator.

    1. intermediate = bind(first, project)
    2. short-circuited intermediate -> short(intermediate), combine is NOT called
    3. otherwise -> pure(combine(get_first(first), get_second(intermediate)))

    NOTE: Exceptions from project/combine are not captured, they reach
          the caller of chainM unchanged.
    """
    intermediate = bind(first, project)
    if is_short(intermediate):
        logger.debug("chain short-circuited: %s", intermediate)
        return short(intermediate)
    return pure(combine(get_first(first), get_second(intermediate)))


# ============================================================================
# Sugar per container
# ============================================================================


def chain_maybe[A, B, C](
    first: Maybe[A],
    project: Binder[A, Maybe[B]],
    combine: Combiner[A, B, C],
) -> Maybe[C]:
    """Chain for Maybe. Absence anywhere yields absent()."""
    return chainM(
        first,
        project,
        combine,
        bind=Maybe.bind,
        is_short=_maybe_is_short,
        short=_maybe_short,
        get_first=_maybe_value,
        get_second=_maybe_value,
        pure=Maybe.pure,
    )


def chain_either[L, A, B, C](
    first: Either[L, A],
    project: Binder[A, Either[L, B]],
    combine: Combiner[A, B, C],
) -> Either[L, C]:
    """Chain for Either. The first error encountered is returned."""
    return chainM(
        first,
        project,
        combine,
        bind=Either.bind,
        is_short=_either_is_short,
        short=_either_short,
        get_first=_either_value,
        get_second=_either_value,
        pure=Either.pure,
    )


def chain_text[A, B, C](
    first: TextEither[A],
    project: Binder[A, TextEither[B]],
    combine: Combiner[A, B, C],
) -> TextEither[C]:
    """Chain for TextEither. The first error message is returned."""
    return chainM(
        first,
        project,
        combine,
        bind=TextEither.bind,
        is_short=_text_is_short,
        short=_text_short,
        get_first=_text_value,
        get_second=_text_value,
        pure=TextEither.pure,
    )


@typing.overload
def chain[A, B, C](
    first: Maybe[A], project: Binder[A, Maybe[B]], combine: Combiner[A, B, C], /
) -> Maybe[C]: ...


@typing.overload
def chain[A, B, C](
    first: TextEither[A], project: Binder[A, TextEither[B]], combine: Combiner[A, B, C], /
) -> TextEither[C]: ...


@typing.overload
def chain[L, A, B, C](
    first: Either[L, A], project: Binder[A, Either[L, B]], combine: Combiner[A, B, C], /
) -> Either[L, C]: ...


def chain(
    first: typing.Any,
    project: Binder[typing.Any, typing.Any],
    combine: Combiner[typing.Any, typing.Any, typing.Any],
    /,
) -> typing.Any:
    """
    Chain any supported container.

    Example:
        chain(Maybe.present(10), lambda _: Maybe.present(20), lambda a, b: a + b)
        # Some(30)
    """
    match first:
        case Maybe():
            return chain_maybe(first, project, combine)
        case TextEither():
            return chain_text(first, project, combine)
        case Either():
            return chain_either(first, project, combine)
        case _:
            raise TypeError(f"chain() expects Maybe, Either or TextEither, got {type(first).__name__}")


# ============================================================================
# Hooks
# ============================================================================


def _maybe_is_short(m: Maybe[object]) -> bool:
    return m.is_absent


def _maybe_short(_: Maybe[object]) -> Maybe[object]:
    return Maybe.absent()


def _maybe_value[T](m: Maybe[T]) -> T:
    return m.value


def _either_is_short(e: Either[object, object]) -> bool:
    return e.is_error


def _either_short[L](e: Either[L, object]) -> Either[L, object]:
    return Either.error(e.error_value)


def _either_value[T](e: Either[object, T]) -> T:
    return e.success_value


def _text_is_short(e: TextEither[object]) -> bool:
    return e.is_error


def _text_short(e: TextEither[object]) -> TextEither[object]:
    return TextEither.error(e.error_value)


def _text_value[T](e: TextEither[T]) -> T:
    return e.success_value


__all__ = (
    "chain",
    "chainM",
    "chain_either",
    "chain_maybe",
    "chain_text",
)
