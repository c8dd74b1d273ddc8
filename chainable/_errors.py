from __future__ import annotations


class InvalidStateError(Exception):
    """Container built with a value it must never hold (e.g. ``None``)."""

    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}: missing value is not allowed")


class EmptyAccessError(Exception):
    """Value read from an absent Maybe."""

    def __init__(self) -> None:
        super().__init__("Cannot access value of an absent Maybe")


class WrongVariantAccessError(Exception):
    """Inactive case of an Either was read."""

    requested: str
    actual: str

    def __init__(self, requested: str, actual: str) -> None:
        self.requested = requested
        self.actual = actual
        super().__init__(f"Cannot get {requested} value from {actual} Either")


__all__ = ("EmptyAccessError", "InvalidStateError", "WrongVariantAccessError")
