"""Maybe Monad

Optional value container:
- present(value) - holds a value (never ``None``)
- absent() - holds nothing

Absence is the short-circuit state: bind never calls its function on an
absent Maybe."""

from __future__ import annotations

import typing
from collections.abc import Callable

from ._errors import EmptyAccessError, InvalidStateError
from ._types import Binder, Combiner


class Maybe[T]:
    """Optional value monad.

    Monadic laws:
    - Left identity: Maybe.pure(a).bind(f) ≡ f(a)
    - Right identity: m.bind(Maybe.pure) ≡ m
    - Associativity: m.bind(f).bind(g) ≡ m.bind(x => f(x).bind(g))
    """

    __slots__ = ("_has_value", "_value")

    def __init__(self, has_value: bool, value: T | None = None, /) -> None:
        if has_value and value is None:
            raise InvalidStateError("Maybe.present")
        self._has_value = has_value
        self._value = value if has_value else None

    # Constructors

    @staticmethod
    def present[V](value: V, /) -> Maybe[V]:
        """Wrap a value. ``None`` is rejected with InvalidStateError."""
        return Maybe(True, value)

    @staticmethod
    def absent[V]() -> Maybe[V]:
        """Empty Maybe, usable as Maybe of any element type."""
        return Maybe(False)

    @staticmethod
    def pure[V](value: V, /) -> Maybe[V]:
        """Monadic return, same as present()."""
        return Maybe.present(value)

    # Accessors

    @property
    def has_value(self) -> bool:
        return self._has_value

    @property
    def is_absent(self) -> bool:
        return not self._has_value

    @property
    def value(self) -> T:
        """The held value. Raises EmptyAccessError when absent."""
        if not self._has_value:
            raise EmptyAccessError()
        return typing.cast(T, self._value)

    def or_else(self, default: T, /) -> T:
        """Held value, or default when absent."""
        return typing.cast(T, self._value) if self._has_value else default

    # Monad operations

    def bind[U](self, f: Binder[T, Maybe[U]], /) -> Maybe[U]:
        """
        Monadic bind (>>=).

        - Present: returns f(value)
        - Absent: short-circuit, f is never called
        """
        if not self._has_value:
            return Maybe.absent()
        return f(typing.cast(T, self._value))

    def map[U](self, f: Callable[[T], U], /) -> Maybe[U]:
        """Functor fmap - apply function to held value and re-wrap it."""
        return self.bind(lambda value: Maybe.present(f(value)))

    def chain[B, C](
        self,
        project: Binder[T, Maybe[B]],
        combine: Combiner[T, B, C],
        /,
    ) -> Maybe[C]:
        """Bind project, then combine both unwrapped values. See chainable.chain."""
        from .chain import chain_maybe
        return chain_maybe(self, project, combine)

    # Protocol methods

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._has_value == other._has_value and self._value == other._value

    def __hash__(self) -> int:
        return hash((Maybe, self._has_value, self._value))

    def __str__(self) -> str:
        return f"Some({self._value})" if self._has_value else "None"

    def __repr__(self) -> str:
        return f"Maybe.present({self._value!r})" if self._has_value else "Maybe.absent()"


def bind[T, U](m: Maybe[T], f: Binder[T, Maybe[U]], /) -> Maybe[U]:
    """Function form of Maybe.bind."""
    return m.bind(f)


__all__ = ("Maybe", "bind")
