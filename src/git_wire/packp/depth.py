"""
History depth limits for shallow fetches.

A client may ask the server to cut history short in three ways:

    DepthCommits(n)        deepen <n>            keep n commits per tip
    DepthSince(when)       deepen-since <epoch>  keep commits newer than `when`
    DepthReference(ref)    deepen-not <ref>      drop history reachable from `ref`

`DepthCommits(0)` means no limit. The variants form a closed union: code
that dispatches on `Depth` handles exactly these three types.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True, slots=True)
class DepthCommits:
    """Limit history to a number of commits from each wanted tip."""

    commits: int
    """Number of commits to keep. Zero disables the limit."""

    def is_unlimited(self) -> bool:
        """Check whether this depth requests no limit at all."""
        return self.commits == 0


@dataclass(frozen=True, slots=True)
class DepthSince:
    """Limit history to commits newer than a point in time."""

    when: datetime
    """Cutoff. Naive values are taken to be UTC."""

    def utc(self) -> datetime:
        """Return the cutoff as an aware UTC datetime."""
        if self.when.tzinfo is None:
            return self.when.replace(tzinfo=timezone.utc)
        return self.when.astimezone(timezone.utc)

    def unix_seconds(self) -> int:
        """Whole seconds since the epoch, rounded down."""
        return calendar.timegm(self.utc().utctimetuple())


@dataclass(frozen=True, slots=True)
class DepthReference:
    """Exclude history reachable from a reference."""

    reference: str
    """Reference name, e.g. `refs/heads/main`."""


Depth = DepthCommits | DepthSince | DepthReference
"""Union of every depth specifier."""
