from __future__ import annotations

from collections.abc import Generator

from _infra import banner, run, show

from chainable import Maybe, TextEither, do_maybe, do_text


@do_maybe
def scaled(a: Maybe[int], b: Maybe[int], c: Maybe[int]) -> Generator[Maybe[int], int, int]:
    v1 = yield a
    v2 = yield b
    v3 = yield c
    return (v1 + v2) * v3


@do_text
def parse_pair(left: str, right: str) -> Generator[TextEither[int], int, tuple[int, int]]:
    x = yield _parse(left)
    y = yield _parse(right)
    return x, y


def _parse(raw: str) -> TextEither[int]:
    if raw.isdigit():
        return TextEither.success(int(raw))
    return TextEither.error(f"not an int: {raw!r}")


def main() -> None:
    banner("03_do_notation: generator do-blocks")

    show("scaled", scaled(Maybe.present(10), Maybe.present(20), Maybe.present(2)))
    show("scaled", scaled(Maybe.present(10), Maybe.absent(), Maybe.present(2)))
    show("pair", parse_pair("4", "2"))
    show("pair", parse_pair("4", "two"))


if __name__ == "__main__":
    run(main)
