from __future__ import annotations

from _infra import banner, run, show

from chainable import TextEither, chain


def main() -> None:
    banner("02_either_chains: first error wins")

    ok = chain(
        TextEither.success(10),
        lambda v1: TextEither.success(20),
        lambda v1, v2: v1 + v2,
    )
    show("ok", ok)

    failed = chain(
        TextEither.success(10),
        lambda v1: chain(
            TextEither.error("error-1"),
            lambda v2: TextEither.error("error-2"),
            lambda v2, v3: v2 + v3,
        ),
        lambda v1, rest: v1 + rest,
    )
    show("failed", failed)


if __name__ == "__main__":
    run(main)
