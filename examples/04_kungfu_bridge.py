from __future__ import annotations

import asyncio
import json

from _infra import banner, run, show

from chainable import Either, lift as L
from kungfu import Error, Ok


def main() -> None:
    banner("04_kungfu_bridge: lift up / lift down")

    config: dict[str, str] = {"port": "8080"}

    port = L.up.optional(config.get("port")).map(int)
    show("port", port)
    show("host", L.down.or_else(L.up.optional(config.get("host")), "localhost"))

    parsed = L.up.catching(lambda: json.loads("{broken"), on_error=lambda e: type(e).__name__)
    show("parsed", parsed)

    show("note", L.up.note(L.up.optional(config.get("user")), error=lambda: "user missing"))
    show("from Ok", L.up.from_result(Ok(42)))
    show("from Error", L.up.from_result(Error("boom")))

    lazy = L.down.to_lazy(Either.success(7))
    match asyncio.run(lazy.map(lambda v: v * 6)()):
        case Ok(value):
            show("lazy", value)
        case Error(err):
            show("lazy", f"error: {err!r}")


if __name__ == "__main__":
    run(main)
