"""Monad laws for Maybe, Either and TextEither."""

from __future__ import annotations

from collections.abc import Callable

from hypothesis import given
from hypothesis import strategies as st

from chainable import Either, Maybe, TextEither

ints = st.integers(min_value=-1000, max_value=1000)

maybes = st.one_of(st.just(Maybe.absent()), ints.map(Maybe.present))
eithers = st.one_of(st.text(max_size=5).map(Either.error), ints.map(Either.success))
text_eithers = st.one_of(st.text(max_size=5).map(TextEither.error), ints.map(TextEither.success))


def _maybe_fns() -> st.SearchStrategy[Callable[[int], Maybe[int]]]:
    return st.one_of(
        ints.map(lambda k: lambda x: Maybe.present(x + k)),
        ints.map(lambda k: lambda x: Maybe.present(x * k) if x % 2 else Maybe.absent()),
        st.just(lambda x: Maybe.absent()),
    )


def _either_fns() -> st.SearchStrategy[Callable[[int], Either[str, int]]]:
    return st.one_of(
        ints.map(lambda k: lambda x: Either.success(x - k)),
        st.text(max_size=3).map(lambda msg: lambda x: Either.error(f"{msg}{x}")),
    )


def _text_fns() -> st.SearchStrategy[Callable[[int], TextEither[int]]]:
    return st.one_of(
        ints.map(lambda k: lambda x: TextEither.success(x - k)),
        st.text(max_size=3).map(lambda msg: lambda x: TextEither.error(f"{msg}{x}")),
    )


# Maybe


@given(ints, _maybe_fns())
def test_maybe_left_identity(x: int, f: Callable[[int], Maybe[int]]) -> None:
    assert Maybe.pure(x).bind(f) == f(x)


@given(maybes)
def test_maybe_right_identity(m: Maybe[int]) -> None:
    assert m.bind(Maybe.pure) == m


@given(maybes, _maybe_fns(), _maybe_fns())
def test_maybe_associativity(
    m: Maybe[int],
    f: Callable[[int], Maybe[int]],
    g: Callable[[int], Maybe[int]],
) -> None:
    assert m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))


# Either


@given(ints, _either_fns())
def test_either_left_identity(x: int, f: Callable[[int], Either[str, int]]) -> None:
    assert Either.pure(x).bind(f) == f(x)


@given(eithers)
def test_either_right_identity(m: Either[str, int]) -> None:
    assert m.bind(Either.pure) == m


@given(eithers, _either_fns(), _either_fns())
def test_either_associativity(
    m: Either[str, int],
    f: Callable[[int], Either[str, int]],
    g: Callable[[int], Either[str, int]],
) -> None:
    assert m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))


@given(st.text(max_size=5), _either_fns())
def test_either_error_absorbs(e: str, f: Callable[[int], Either[str, int]]) -> None:
    assert Either.error(e).bind(f) == Either.error(e)


# TextEither


@given(ints, _text_fns())
def test_text_left_identity(x: int, f: Callable[[int], TextEither[int]]) -> None:
    assert TextEither.pure(x).bind(f) == f(x)


@given(text_eithers)
def test_text_right_identity(m: TextEither[int]) -> None:
    assert m.bind(TextEither.pure) == m


@given(text_eithers, _text_fns(), _text_fns())
def test_text_associativity(
    m: TextEither[int],
    f: Callable[[int], TextEither[int]],
    g: Callable[[int], TextEither[int]],
) -> None:
    assert m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))


@given(_maybe_fns())
def test_maybe_absent_absorbs(f: Callable[[int], Maybe[int]]) -> None:
    calls: list[int] = []

    def recorded(x: int) -> Maybe[int]:
        calls.append(x)
        return f(x)

    assert Maybe.absent().bind(recorded) == Maybe.absent()
    assert calls == []


@given(st.text(max_size=5), _text_fns())
def test_text_error_absorbs(e: str, f: Callable[[int], TextEither[int]]) -> None:
    calls: list[int] = []

    def recorded(x: int) -> TextEither[int]:
        calls.append(x)
        return f(x)

    assert TextEither.error(e).bind(recorded) == TextEither.error(e)
    assert calls == []
