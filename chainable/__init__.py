"""
Monadic containers with short-circuiting chains.

Core building blocks for expressing a sequence of dependent, possibly
failing computations linearly.

Architecture:
- Maybe[T] - optional value, absence short-circuits
- Either[L, R] - error or success, the first error short-circuits
- TextEither[R] - Either with str error, one free type parameter
- chain / chainM - bind + combine both unwrapped values
- do_* decorators - generator-based do-notation over bind
- lift - conversions to/from plain values and kungfu Results
"""

# Core types
from ._types import Binder, Combiner, Thunk, Unit

# Containers
from .maybe import Maybe
from .either import Either, TextEither

# Chaining
from .chain import chain, chainM, chain_either, chain_maybe, chain_text

# Do-notation
from .comprehension import doM, do_either, do_maybe, do_text

# Lift helpers
from . import lift

# Errors
from ._errors import EmptyAccessError, InvalidStateError, WrongVariantAccessError

__all__ = (
    # Types
    "Binder",
    "Combiner",
    "Thunk",
    "Unit",
    # Containers
    "Either",
    "Maybe",
    "TextEither",
    # Chaining
    "chain",
    "chainM",
    "chain_either",
    "chain_maybe",
    "chain_text",
    # Do-notation
    "doM",
    "do_either",
    "do_maybe",
    "do_text",
    # Lift module
    "lift",
    # Errors
    "EmptyAccessError",
    "InvalidStateError",
    "WrongVariantAccessError",
)
