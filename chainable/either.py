"""Either Monad

Disjoint error/success container:
- Either[L, R] - error of type L or success of type R (Left/Right)
- TextEither[R] - Either with the error fixed to str

Either has two type parameters, chaining needs one. TextEither fixes the
error type and re-exposes bind/pure over the success type only.
NOTE: TextEither делегирует во внутренний Either[str, R], а не заменяет его.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from ._errors import InvalidStateError, WrongVariantAccessError
from ._types import Binder, Combiner


class Either[L, R]:
    """Error/success tagged union.

    Exactly one payload is valid per instance. Error is the short-circuit
    state: bind propagates the first error verbatim.

    Monadic laws:
    - Left identity: Either.pure(a).bind(f) ≡ f(a)
    - Right identity: m.bind(Either.pure) ≡ m
    - Associativity: m.bind(f).bind(g) ≡ m.bind(x => f(x).bind(g))
    """

    __slots__ = ("_is_error", "_error", "_success")

    def __init__(self, is_error: bool, error: L | None, success: R | None, /) -> None:
        if not is_error and success is None:
            raise InvalidStateError("Either.success")
        self._is_error = is_error
        self._error = error if is_error else None
        self._success = None if is_error else success

    # Constructors

    @staticmethod
    def error[E, V](value: E, /) -> Either[E, V]:
        """Error case (Left)."""
        return Either(True, value, None)

    @staticmethod
    def success[E, V](value: V, /) -> Either[E, V]:
        """Success case (Right). ``None`` is rejected with InvalidStateError."""
        return Either(False, None, value)

    @staticmethod
    def pure[E, V](value: V, /) -> Either[E, V]:
        """Monadic return, same as success()."""
        return Either.success(value)

    # Accessors

    @property
    def is_error(self) -> bool:
        return self._is_error

    @property
    def is_success(self) -> bool:
        return not self._is_error

    @property
    def error_value(self) -> L:
        if not self._is_error:
            raise WrongVariantAccessError("Left", "a Right")
        return typing.cast(L, self._error)

    @property
    def success_value(self) -> R:
        if self._is_error:
            raise WrongVariantAccessError("Right", "a Left")
        return typing.cast(R, self._success)

    def or_else(self, default: R, /) -> R:
        """Success value, or default on error."""
        return default if self._is_error else typing.cast(R, self._success)

    # Monad operations

    def bind[U](self, f: Binder[R, Either[L, U]], /) -> Either[L, U]:
        """
        Monadic bind (>>=).

        - Success: returns f(success_value)
        - Error: short-circuit, same error retyped, f is never called
        """
        if self._is_error:
            return Either.error(self.error_value)
        return f(self.success_value)

    def map[U](self, f: Callable[[R], U], /) -> Either[L, U]:
        """Functor fmap - apply function to success value."""
        return self.bind(lambda value: Either.success(f(value)))

    def map_err[F](self, f: Callable[[L], F], /) -> Either[F, R]:
        """Map over error value."""
        if self._is_error:
            return Either.error(f(self.error_value))
        return Either.success(self.success_value)

    def chain[B, C](
        self,
        project: Binder[R, Either[L, B]],
        combine: Combiner[R, B, C],
        /,
    ) -> Either[L, C]:
        """Bind project, then combine both unwrapped values. See chainable.chain."""
        from .chain import chain_either
        return chain_either(self, project, combine)

    # Protocol methods

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return (
            self._is_error == other._is_error
            and self._error == other._error
            and self._success == other._success
        )

    def __hash__(self) -> int:
        return hash((Either, self._is_error, self._error, self._success))

    def __str__(self) -> str:
        return f"Left({self._error})" if self._is_error else f"Right({self._success})"

    def __repr__(self) -> str:
        if self._is_error:
            return f"Either.error({self._error!r})"
        return f"Either.success({self._success!r})"


class TextEither[R]:
    """Either[str, R] with one free type parameter.

    Thin wrapper: every operation delegates to the wrapped Either, and
    bind/pure produce TextEither instead of the raw Either.
    """

    __slots__ = ("_either",)

    def __init__(self, either: Either[str, R], /) -> None:
        if either.is_error and not isinstance(either.error_value, str):
            raise InvalidStateError("TextEither.error")
        self._either = either

    @staticmethod
    def of[V](either: Either[str, V], /) -> TextEither[V]:
        """Wrap an existing Either whose error is text."""
        return TextEither(either)

    @staticmethod
    def error[V](message: str, /) -> TextEither[V]:
        return TextEither(Either.error(message))

    @staticmethod
    def success[V](value: V, /) -> TextEither[V]:
        return TextEither(Either.success(value))

    @staticmethod
    def pure[V](value: V, /) -> TextEither[V]:
        """Monadic return, same as success()."""
        return TextEither.success(value)

    @property
    def either(self) -> Either[str, R]:
        """The wrapped two-parameter Either."""
        return self._either

    @property
    def is_error(self) -> bool:
        return self._either.is_error

    @property
    def is_success(self) -> bool:
        return self._either.is_success

    @property
    def error_value(self) -> str:
        return self._either.error_value

    @property
    def success_value(self) -> R:
        return self._either.success_value

    def or_else(self, default: R, /) -> R:
        return self._either.or_else(default)

    def bind[U](self, f: Binder[R, TextEither[U]], /) -> TextEither[U]:
        """Monadic bind over the success value; errors propagate unchanged."""
        if self.is_error:
            return TextEither.error(self.error_value)
        return f(self.success_value)

    def map[U](self, f: Callable[[R], U], /) -> TextEither[U]:
        return TextEither(self._either.map(f))

    def chain[B, C](
        self,
        project: Binder[R, TextEither[B]],
        combine: Combiner[R, B, C],
        /,
    ) -> TextEither[C]:
        from .chain import chain_text
        return chain_text(self, project, combine)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextEither):
            return NotImplemented
        return self._either == other._either

    def __hash__(self) -> int:
        return hash((TextEither, self._either))

    def __str__(self) -> str:
        return str(self._either)

    def __repr__(self) -> str:
        return f"TextEither({self._either!r})"


def bind[L, R, U](e: Either[L, R], f: Binder[R, Either[L, U]], /) -> Either[L, U]:
    """Function form of Either.bind."""
    return e.bind(f)


__all__ = ("Either", "TextEither", "bind")
