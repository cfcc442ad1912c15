"""Errors raised by the string helpers."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A helper received a parameter it cannot work with.

    Subclasses :class:`ValueError` so callers that already guard against
    ``ValueError`` keep working.
    """

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {name}={value!r}: {reason}")
