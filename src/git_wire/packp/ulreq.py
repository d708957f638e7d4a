"""
Upload requests: what a fetching client asks `git-upload-pack` for.

After reading the server's reference advertisement, the client answers
with the objects it wants, the shallow boundaries it already has, an
optional depth limit and the capabilities it chose from the advertisement.
`UploadRequestEncoder` turns this value into pkt-lines.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..capability import Capability, CapabilityList, default_agent
from ..types import ObjectHash
from .depth import Depth, DepthCommits, DepthReference, DepthSince
from .errors import RequestValidationError

CONFLICTING_CAPABILITIES: list[tuple[Capability, Capability]] = [
    (Capability.MULTI_ACK, Capability.MULTI_ACK_DETAILED),
    (Capability.SIDEBAND, Capability.SIDEBAND_64K),
]
"""Capability pairs a client must not request together."""


@dataclass
class UploadRequest:
    """
    A fetch request as sent by the client.

    The encoder reads this value but never modifies it.
    """

    wants: list[ObjectHash] = field(default_factory=list)
    """Objects the client asks for. Must not be empty when encoded."""

    shallows: list[ObjectHash] = field(default_factory=list)
    """Commits at which the client's history is already cut."""

    depth: Depth | None = field(default_factory=lambda: DepthCommits(0))
    """History limit. `None` and `DepthCommits(0)` both mean unlimited."""

    capabilities: CapabilityList = field(default_factory=CapabilityList)
    """Capabilities requested on the first want line."""

    def validate(self) -> None:
        """
        Check the request is consistent before sending it.

        The encoder only rejects an empty want list. This method also checks
        that every feature the request uses is backed by the capability that
        enables it, and that no two mutually exclusive capabilities are set.

        Raises:
            RequestValidationError: On the first problem found.
        """
        if not self.wants:
            raise RequestValidationError("want can't be empty")

        self._validate_required_capabilities()
        self._validate_conflicting_capabilities()

    def _validate_required_capabilities(self) -> None:
        if self.shallows and not self.capabilities.supports(Capability.SHALLOW):
            raise RequestValidationError(
                f"shallows are set but capability {Capability.SHALLOW} is not"
            )

        match self.depth:
            case DepthCommits(commits=commits) if commits != 0:
                required = Capability.SHALLOW
            case DepthSince():
                required = Capability.DEEPEN_SINCE
            case DepthReference():
                required = Capability.DEEPEN_NOT
            case _:
                return

        if not self.capabilities.supports(required):
            raise RequestValidationError(f"depth is set but capability {required} is not")

    def _validate_conflicting_capabilities(self) -> None:
        for first, second in CONFLICTING_CAPABILITIES:
            if self.capabilities.supports(first) and self.capabilities.supports(second):
                raise RequestValidationError(
                    f"capabilities {first} and {second} are mutually exclusive"
                )


def new_upload_request() -> UploadRequest:
    """Create an empty request with no depth limit and no capabilities."""
    return UploadRequest()


def new_upload_request_from_capabilities(advertised: CapabilityList) -> UploadRequest:
    """
    Create a request seeded with capabilities the server advertised.

    Only capabilities that are safe to request unconditionally are copied:
    `ofs-delta` is requested when available, and when the server sends its
    agent the client answers with its own.

    Args:
        advertised: Capabilities from the server's reference advertisement.
    """
    request = new_upload_request()

    if advertised.supports(Capability.OFS_DELTA):
        request.capabilities.set(Capability.OFS_DELTA)

    if advertised.supports(Capability.AGENT):
        request.capabilities.set(Capability.AGENT, default_agent())

    return request
