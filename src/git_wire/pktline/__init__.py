"""
pkt-line framing for the git smart protocol.

See `encoder` for the frame layout.
"""

from .constants import FLUSH_PKT, LENGTH_PREFIX_SIZE, MAX_PAYLOAD_SIZE, MAX_PKT_SIZE
from .encoder import PayloadTooLongError, PktLineEncoder, PktLineError, encode_pkt_line

__all__ = [
    "FLUSH_PKT",
    "LENGTH_PREFIX_SIZE",
    "MAX_PAYLOAD_SIZE",
    "MAX_PKT_SIZE",
    "PayloadTooLongError",
    "PktLineEncoder",
    "PktLineError",
    "encode_pkt_line",
]
