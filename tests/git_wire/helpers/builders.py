"""Builders for test values."""

from __future__ import annotations

from git_wire.capability import CapabilityList
from git_wire.types import ObjectHash


def make_hash(fill: int) -> ObjectHash:
    """Create a hash with every byte set to `fill`."""
    return ObjectHash(bytes([fill]) * ObjectHash.LENGTH)


def make_hex(fill: int) -> str:
    """Hex form of `make_hash(fill)`."""
    return make_hash(fill).hex()


def make_capabilities(*tokens: str) -> CapabilityList:
    """Build a capability list from `name` or `name=value` tokens, in order."""
    capabilities = CapabilityList()
    for token in tokens:
        name, sep, value = token.partition("=")
        if sep:
            capabilities.add(name, value)
        else:
            capabilities.add(name)
    return capabilities


def pkt(payload: str) -> bytes:
    """Frame a single text payload by hand, independently of the encoder."""
    data = payload.encode("utf-8")
    return b"%04x" % (len(data) + 4) + data
