from __future__ import annotations

from _infra import banner, run, show

from chainable import Maybe, chain


def main() -> None:
    banner("01_maybe_chains: chain + bind short-circuiting on absence")

    value1 = Maybe.present(10)
    value2 = Maybe.present(20)
    none: Maybe[int] = Maybe.absent()

    show("both", chain(value1, lambda v1: value2, lambda v1, v2: v1 + v2))
    show("none first", chain(none, lambda v1: value2, lambda v1, v2: v1 + v2))
    show("none second", chain(value1, lambda v1: none, lambda v1, v2: v1 + v2))

    # (v1 + v2) * v3
    three = chain(
        value1,
        lambda v1: chain(value2, lambda v2: Maybe.present(2), lambda v2, v3: (v2, v3)),
        lambda v1, rest: (v1 + rest[0]) * rest[1],
    )
    show("three", three)

    # (v1 + v2) * v3 / v4 - the division never runs
    four = chain(
        value1,
        lambda v1: chain(
            none,
            lambda v2: chain(Maybe.present(2), lambda v3: Maybe.absent(), lambda v3, v4: (v3, v4)),
            lambda v2, rest: (v2, *rest),
        ),
        lambda v1, rest: (v1 + rest[0]) * rest[1] / rest[2],
    )
    show("four", four)

    # Same pipeline with bind only
    nested = value1.bind(
        lambda v1: value2.bind(
            lambda v2: Maybe.present(2).bind(
                lambda v3: none.bind(
                    lambda v4: Maybe.pure((v1 + v2) * v3 / v4)
                )
            )
        )
    )
    show("bind", nested)


if __name__ == "__main__":
    run(main)
