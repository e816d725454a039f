from __future__ import annotations

__all__ = [
    "EmptyValueError",
    "MaybeError",
]

import typing as t


class MaybeError(Exception):
    """Base exception for all maybe errors."""


class EmptyValueError(MaybeError, ValueError):
    """A value is required, but it is absent."""

    DEFAULT_MESSAGE: t.ClassVar[str] = "Provided value must not be empty"

    def __init__(self, message: t.Optional[str] = None) -> None:
        self.message = message if message is not None else self.DEFAULT_MESSAGE
        super().__init__(self.message)
