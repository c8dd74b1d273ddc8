"""
Lift helpers with semantic namespaces.

    from chainable import lift as L

Architecture:
- L.up.*    - подъем значений в Maybe / Either
- L.down.*  - опускание контейнера в значение / kungfu Result

Examples:
    from chainable import lift as L

    port = L.up.optional(config.get("port"))
    parsed = L.up.catching(lambda: int(raw), on_error=str)
    result = L.down.to_result(parsed)          # kungfu Ok / Error
    value = L.down.or_else(port, 8080)
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

from .up import catching, from_result, note, optional
from .down import or_else, to_lazy, to_optional, to_result, unsafe

up = up_ns
down = down_ns

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "catching",
    "from_result",
    "note",
    "optional",
    # Down
    "or_else",
    "to_lazy",
    "to_optional",
    "to_result",
    "unsafe",
)
