from __future__ import annotations

import logging

import pytest

from chainable import Either, Maybe, TextEither, chain, chainM


def _add(a: int, b: int) -> int:
    return a + b


def _never_called(*args: object) -> object:
    raise AssertionError(f"called with {args!r}")


def test_maybe_both_present() -> None:
    assert chain(Maybe.present(10), lambda _: Maybe.present(20), _add) == Maybe.present(30)


def test_maybe_first_absent_skips_project() -> None:
    assert chain(Maybe.absent(), _never_called, _add) == Maybe.absent()


def test_maybe_second_absent_skips_combine() -> None:
    assert chain(Maybe.present(10), lambda _: Maybe.absent(), _never_called) == Maybe.absent()


def test_maybe_four_deep_chain_never_divides() -> None:
    steps: list[str] = []

    def divide(a: int, rest: tuple[int, int, int]) -> float:
        steps.append("divide")
        v2, v3, v4 = rest
        return (a + v2) * v3 / v4

    result = chain(
        Maybe.present(10),
        lambda v1: chain(
            Maybe.present(20),
            lambda v2: chain(Maybe.present(2), lambda v3: Maybe.absent(), lambda v3, v4: (v3, v4)),
            lambda v2, rest: (v2, *rest),
        ),
        divide,
    )

    assert result == Maybe.absent()
    assert steps == []


def test_maybe_three_deep_chain() -> None:
    result = chain(
        Maybe.present(10),
        lambda v1: chain(Maybe.present(20), lambda v2: Maybe.present(2), lambda v2, v3: (v2, v3)),
        lambda v1, rest: (v1 + rest[0]) * rest[1],
    )
    assert result == Maybe.present(60)
    assert str(result) == "Some(60)"


def test_project_sees_first_value() -> None:
    result = chain(Maybe.present(3), lambda a: Maybe.present(a * 2), lambda a, b: (a, b))
    assert result == Maybe.present((3, 6))


def test_either_success() -> None:
    assert chain(Either.success(10), lambda _: Either.success(20), _add) == Either.success(30)


def test_either_error_skips_combine() -> None:
    result = chain(Either.success(10), lambda _: Either.error("e1"), _never_called)
    assert result == Either.error("e1")


def test_either_first_error_survives() -> None:
    result = chain(
        Either.success(10),
        lambda v1: chain(Either.error("error-1"), lambda v2: Either.error("error-2"), _add),
        _add,
    )
    assert result.error_value == "error-1"


def test_text_either_chain_stays_text_either() -> None:
    ok = chain(TextEither.success(10), lambda _: TextEither.success(20), _add)
    assert isinstance(ok, TextEither)
    assert ok == TextEither.success(30)

    failed = chain(TextEither.success(10), lambda _: TextEither.error("e1"), _never_called)
    assert isinstance(failed, TextEither)
    assert str(failed) == "Left(e1)"


def test_method_form_matches_function_form() -> None:
    assert Maybe.present(1).chain(lambda _: Maybe.present(2), _add) == Maybe.present(3)
    assert Either.success(1).chain(lambda _: Either.success(2), _add) == Either.success(3)
    assert TextEither.success(1).chain(lambda _: TextEither.success(2), _add) == TextEither.success(3)


def test_combine_fault_escapes() -> None:
    with pytest.raises(ZeroDivisionError):
        chain(Maybe.present(1), lambda _: Maybe.present(0), lambda a, b: a / b)


def test_project_fault_escapes() -> None:
    def boom(_: int) -> Either[str, int]:
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        chain(Either.success(1), boom, _add)


def test_unsupported_container() -> None:
    with pytest.raises(TypeError):
        chain([1], lambda _: [2], _add)  # type: ignore[call-overload]


def test_chainM_with_custom_hooks() -> None:
    # list-of-one as a toy container, empty list short-circuits
    result = chainM(
        [4],
        lambda a: [a + 1],
        _add,
        bind=lambda m, f: f(m[0]) if m else [],
        is_short=lambda m: not m,
        short=lambda m: [],
        get_first=lambda m: m[0],
        get_second=lambda m: m[0],
        pure=lambda v: [v],
    )
    assert result == [9]


def test_short_circuit_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="chainable.chain"):
        chain(Maybe.present(1), lambda _: Maybe.absent(), _add)
    assert "short-circuited" in caplog.text
