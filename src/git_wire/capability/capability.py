"""
Capability tokens of the git smart protocol.

Capabilities are optional protocol features. The server advertises the
ones it supports on its first reference line; the client picks a subset and
sends it on its first request line.

Most capabilities are bare tokens. A few carry a value, written
`name=value`, and `symref` may appear more than once.

References:
    - https://git-scm.com/docs/protocol-capabilities
"""

from __future__ import annotations

from enum import StrEnum

from typing_extensions import Final


class Capability(StrEnum):
    """Known capability tokens."""

    MULTI_ACK = "multi_ack"
    """Server may ACK several common commits before the client is done."""

    MULTI_ACK_DETAILED = "multi_ack_detailed"
    """Like `multi_ack` with explicit `ready` and `common` ACK states."""

    NO_DONE = "no-done"
    """Server may send the pack right after `ready`, without waiting for `done`."""

    THIN_PACK = "thin-pack"
    """Pack may contain deltas against objects the client already has."""

    SIDEBAND = "side-band"
    """Multiplex progress and data over the pack stream, 1000-byte frames."""

    SIDEBAND_64K = "side-band-64k"
    """Like `side-band` with frames up to 65520 bytes."""

    OFS_DELTA = "ofs-delta"
    """Deltas may reference their base by pack offset."""

    AGENT = "agent"
    """Implementation name and version, for logging only."""

    SHALLOW = "shallow"
    """Shallow clone support (`shallow` and `deepen` lines)."""

    DEEPEN_SINCE = "deepen-since"
    """Depth limit expressed as a timestamp."""

    DEEPEN_NOT = "deepen-not"
    """Depth limit expressed as an excluded reference."""

    DEEPEN_RELATIVE = "deepen-relative"
    """`deepen` counts from the current shallow boundary."""

    NO_PROGRESS = "no-progress"
    """Server must not send progress on sideband channel 2."""

    INCLUDE_TAG = "include-tag"
    """Server sends annotated tags that point at fetched objects."""

    REPORT_STATUS = "report-status"
    """Receive-pack reports the result of each reference update."""

    DELETE_REFS = "delete-refs"
    """Receive-pack accepts the zero hash as new value to delete a reference."""

    QUIET = "quiet"
    """Receive-pack must not print human-readable output."""

    ATOMIC = "atomic"
    """Receive-pack applies all reference updates or none."""

    PUSH_OPTIONS = "push-options"
    """Client may send push options after the update commands."""

    ALLOW_TIP_SHA1_IN_WANT = "allow-tip-sha1-in-want"
    """Server accepts wants for unadvertised objects at reference tips."""

    ALLOW_REACHABLE_SHA1_IN_WANT = "allow-reachable-sha1-in-want"
    """Server accepts wants for any reachable object."""

    PUSH_CERT = "push-cert"
    """Signed push, the value is the nonce."""

    SYMREF = "symref"
    """Symbolic reference target, as `symref=HEAD:refs/heads/main`."""

    FILTER = "filter"
    """Partial clone object filters."""


REQUIRES_ARGUMENT: Final[frozenset[str]] = frozenset(
    {Capability.AGENT, Capability.PUSH_CERT, Capability.SYMREF}
)
"""Capabilities that are meaningless without a value."""

MULTIPLE_ARGUMENTS: Final[frozenset[str]] = frozenset({Capability.SYMREF})
"""Capabilities that may carry more than one value."""

KNOWN: Final[frozenset[str]] = frozenset(Capability)
"""Every capability this package knows the argument rules for."""
