"""Errors raised while building and encoding upload requests."""

from __future__ import annotations

from typing import Any

from ..types import GitWireError


class RequestValidationError(GitWireError):
    """Raised when an upload request is not fit to be sent."""


class UnsupportedDepthError(GitWireError):
    """
    Raised when a request carries a depth outside the known variants.

    Attributes:
        depth: The offending value.
    """

    def __init__(self, depth: Any) -> None:
        self.depth = depth
        super().__init__(f"unsupported depth type: {type(depth).__name__}")


class EncodeError(GitWireError):
    """
    Raised when writing an encoded line fails.

    The original exception is chained as `__cause__`.

    Attributes:
        stage: What was being written, e.g. "encoding shallow <hex>".
        cause: The underlying writer or framing error.
    """

    def __init__(self, stage: str, cause: BaseException) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage}: {cause}")
