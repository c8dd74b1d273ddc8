"""
Core type definitions for chainable.

Алиасы для функций, которые передаются в bind/chain.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Binder = dependent step: unwrapped value -> next container
type Binder[A, M] = Callable[[A], M]

# Combiner = selector over both unwrapped values of a chain step
type Combiner[A, B, C] = Callable[[A, B], C]

# Unit = monadic return for a container kind
type Unit[T, M] = Callable[[T], M]

# Thunk = zero-arg callable, used for lazily built error payloads
type Thunk[T] = Callable[[], T]

__all__ = (
    "Binder",
    "Combiner",
    "Thunk",
    "Unit",
)
