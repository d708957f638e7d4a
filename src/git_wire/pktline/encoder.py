r"""
pkt-line frame encoding.

Every message of the git smart protocol is split into pkt-lines. A pkt-line
is a 4-character lowercase hex length followed by the payload. The length
counts itself, so the smallest data frame is 5 bytes long::

    "want 0123...\n"  ->  b"0032want 0123...\n"

The special frame "0000" (flush-pkt) carries no payload. It marks the end of
a logical message, such as the list of wants a client sends.

Frame layout::

    [length: 4 hex chars][payload: length - 4 bytes]

Lengths 1-3 are never valid. An empty payload is always encoded as a
flush-pkt rather than as "0004".

References:
    - https://git-scm.com/docs/protocol-common#_pkt_line_format
"""

from __future__ import annotations

from typing import IO, Any

from ..types import GitWireError
from .constants import FLUSH_PKT, LENGTH_PREFIX_SIZE, MAX_PAYLOAD_SIZE


class PktLineError(GitWireError):
    """Raised when a payload cannot be framed."""


class PayloadTooLongError(PktLineError):
    """
    Raised when a payload exceeds the single-frame limit.

    Attributes:
        size: Length of the rejected payload in bytes.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"payload is too long: {size} bytes (max {MAX_PAYLOAD_SIZE})")


def encode_pkt_line(payload: bytes) -> bytes:
    """
    Frame a single payload.

    Args:
        payload: Raw payload bytes. Empty means flush-pkt.

    Returns:
        The framed bytes, length prefix included.

    Raises:
        PayloadTooLongError: If the payload exceeds `MAX_PAYLOAD_SIZE`.
    """
    if not payload:
        return FLUSH_PKT

    if len(payload) > MAX_PAYLOAD_SIZE:
        raise PayloadTooLongError(len(payload))

    # The length prefix counts its own four characters.
    return f"{len(payload) + LENGTH_PREFIX_SIZE:04x}".encode("ascii") + payload


class PktLineEncoder:
    """
    Writes pkt-line frames to a binary stream.

    Each call frames and writes its payloads in order. Errors raised by the
    underlying writer propagate unchanged; nothing is buffered or retried.
    """

    def __init__(self, writer: IO[bytes]) -> None:
        """
        Bind the encoder to a stream.

        Args:
            writer: Destination for the framed bytes.
        """
        self._writer = writer

    def flush(self) -> None:
        """Write a flush-pkt."""
        self._writer.write(FLUSH_PKT)

    def encode(self, *payloads: bytes) -> None:
        """
        Frame and write each payload.

        An empty payload is written as a flush-pkt.

        Raises:
            PayloadTooLongError: If a payload is too long. Earlier payloads
                have already been written.
        """
        for payload in payloads:
            self._writer.write(encode_pkt_line(payload))

    def encode_string(self, *payloads: str) -> None:
        """Frame and write each string payload as UTF-8."""
        self.encode(*(p.encode("utf-8") for p in payloads))

    def encodef(self, fmt: str, *args: Any) -> None:
        """
        Format a payload printf-style and write it as one frame.

        Args:
            fmt: A `%`-style format string.
            args: Values interpolated into `fmt`.
        """
        self.encode_string(fmt % args)
