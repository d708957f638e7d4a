"""pkt-line framing constants."""

from typing_extensions import Final

LENGTH_PREFIX_SIZE: Final = 4
"""Width of the hex length prefix in bytes."""

MAX_PKT_SIZE: Final = 65520
"""Largest frame, prefix included, a peer is required to accept."""

MAX_PAYLOAD_SIZE: Final = MAX_PKT_SIZE - LENGTH_PREFIX_SIZE
"""Largest payload that fits in a single frame."""

FLUSH_PKT: Final = b"0000"
"""Zero-length frame marking the end of a logical message."""
