r"""
Upload request encoding.

An upload request is written as a sequence of pkt-lines closed by a
flush-pkt::

    want <hex> <cap> <cap> ...\n     first want, with the capabilities
    want <hex>\n                     remaining wants
    shallow <hex>\n                  one per shallow boundary
    deepen <n>\n                     \
    deepen-since <epoch>\n            > at most one of these
    deepen-not <ref>\n               /
    0000                             flush-pkt

Wants and shallows are sorted by their hex form, and the capabilities by
name, so equal requests always produce identical bytes.

Encoding runs as a fixed sequence of stages. The first failing write
aborts the sequence: later lines and the flush-pkt are never written, so a
peer never sees a truncated request that looks complete.

References:
    - https://git-scm.com/docs/pack-protocol#_packfile_negotiation
"""

from __future__ import annotations

import logging
from typing import IO, Any

from ..capability import CapabilityList
from ..pktline import PktLineEncoder, PktLineError
from ..types import sort_hashes
from .depth import Depth, DepthCommits, DepthReference, DepthSince
from .errors import EncodeError, RequestValidationError, UnsupportedDepthError
from .ulreq import UploadRequest

logger = logging.getLogger(__name__)

WRITE_ERRORS = (OSError, PktLineError)
"""Failures of the underlying stream or framer that abort encoding."""


class UploadRequestEncoder:
    """
    Writes `UploadRequest` values to a binary stream as pkt-lines.

    The encoder keeps no state between calls: sorted hash lists and errors
    live only for the duration of one `encode()`. Reusing an instance for
    successive requests is safe; sharing one between threads is not.
    """

    def __init__(self, writer: IO[bytes]) -> None:
        """
        Bind the encoder to a stream.

        Args:
            writer: Destination for the framed request.
        """
        self._pkt = PktLineEncoder(writer)

    def encode(self, request: UploadRequest) -> None:
        """
        Write the encoding of `request`.

        Every payload ends with a newline. A depth of `DepthCommits(0)` or
        `None` sends no depth line.

        Args:
            request: The request to encode. It is not modified.

        Raises:
            RequestValidationError: If `request.wants` is empty. Nothing is
                written in this case.
            UnsupportedDepthError: If the depth is not a known variant.
            EncodeError: If a write fails.
        """
        if not request.wants:
            raise RequestValidationError("empty wants provided")

        sorted_wants = sort_hashes(request.wants)
        sorted_shallows = sort_hashes(request.shallows)

        self._encode_first_want(sorted_wants[0], request.capabilities)
        self._encode_additional_wants(sorted_wants[1:])
        self._encode_shallows(sorted_shallows)
        self._encode_depth(request.depth)
        self._encode_flush()

        logger.debug(
            "Encoded upload request: %d wants, %d shallows, %d capabilities",
            len(sorted_wants),
            len(sorted_shallows),
            len(request.capabilities),
        )

    def _encode_first_want(self, want: str, capabilities: CapabilityList) -> None:
        if capabilities.is_empty():
            self._write("encoding first want line", "want %s\n", want)
        else:
            # Sort a copy: the caller's list keeps its own order.
            self._write(
                "encoding first want line",
                "want %s %s\n",
                want,
                str(capabilities.sorted()),
            )

    def _encode_additional_wants(self, wants: list[str]) -> None:
        for want in wants:
            self._write(f"encoding want {want!r}", "want %s\n", want)

    def _encode_shallows(self, shallows: list[str]) -> None:
        for shallow in shallows:
            self._write(f"encoding shallow {shallow!r}", "shallow %s\n", shallow)

    def _encode_depth(self, depth: Depth | None) -> None:
        match depth:
            case None:
                pass

            case DepthCommits(commits=commits):
                # A zero depth means no limit and is not sent.
                if commits != 0:
                    self._write(f"encoding depth {commits}", "deepen %d\n", commits)

            case DepthSince():
                when = depth.utc()
                self._write(
                    f"encoding depth {when.isoformat()}",
                    "deepen-since %d\n",
                    depth.unix_seconds(),
                )

            case DepthReference(reference=reference):
                self._write(f"encoding depth {reference}", "deepen-not %s\n", reference)

            case _:
                raise UnsupportedDepthError(depth)

    def _encode_flush(self) -> None:
        try:
            self._pkt.flush()
        except WRITE_ERRORS as e:
            raise EncodeError("encoding flush-pkt", e) from e

    def _write(self, stage: str, fmt: str, *args: Any) -> None:
        """Write one formatted line, attaching `stage` to any failure."""
        try:
            self._pkt.encodef(fmt, *args)
        except WRITE_ERRORS as e:
            raise EncodeError(stage, e) from e
