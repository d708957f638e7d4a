"""Exception root for the git wire protocol package."""

from __future__ import annotations


class GitWireError(Exception):
    """
    Base exception for all git wire protocol errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"
